from __future__ import annotations

import math
import os
import stat
from pathlib import Path
from typing import Dict, Iterable

from loguru import logger

from .constants import BYTES_PER_MB, MAX_FILE_SIZE_BYTES
from .typing import LogSink


def too_large_message(size: int) -> str:
    megabytes = math.floor(size / BYTES_PER_MB + 0.5)
    return f"File too large ({megabytes}MB), skipped"


def error_message(exc: BaseException) -> str:
    return f"Error reading file: {exc}"


def read_file_content(
    path: str | os.PathLike[str],
    *,
    max_bytes: int = MAX_FILE_SIZE_BYTES,
) -> str:
    """
    Return the file text, or a placeholder when it is larger than ``max_bytes``
    or cannot be read. Never raises for I/O or decoding problems.

    Only regular files are opened; pipes, sockets and devices could block.
    """

    try:
        st = os.stat(path)
        if not stat.S_ISREG(st.st_mode):
            return error_message(OSError(f"{path} is not a regular file"))
        if st.st_size > max_bytes:
            return too_large_message(st.st_size)
        # newline="" keeps CRLF and friends exactly as stored
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        return error_message(exc)


def read_workspace_files(
    root: str | os.PathLike[str],
    paths: Iterable[str],
    *,
    max_bytes: int = MAX_FILE_SIZE_BYTES,
    log: LogSink = logger,
) -> Dict[str, str]:
    """
    Materialize a chosen set of root-relative files, keyed by the path as given.

    Paths resolving outside ``root`` or that cannot be resolved at all (e.g. an
    embedded NUL) are not read; they get an error placeholder.
    """

    base = Path(root).resolve()
    contents: Dict[str, str] = {}
    for rel in paths:
        try:
            target = (base / rel).resolve()
        except (OSError, ValueError) as exc:
            log.error(f"Cannot resolve {rel!r} under {base}: {exc}")
            contents[rel] = error_message(exc)
            continue
        if target != base and base not in target.parents:
            log.error(f"Refusing to read {rel}: outside of {base}")
            contents[rel] = error_message(ValueError(f"{rel} is outside the workspace"))
            continue
        contents[rel] = read_file_content(target, max_bytes=max_bytes)
    log.info(f"Read {len(contents)} requested files under {base}")
    return contents


__all__ = [
    "error_message",
    "read_file_content",
    "read_workspace_files",
    "too_large_message",
]
