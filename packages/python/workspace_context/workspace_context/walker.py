"""Depth-first workspace walk producing a structure listing and a content map."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from .constants import DIRECTORY_SUFFIX, INDENT
from .errors import ScanError
from .ignore_rules import build_ignore_policy
from .materializer import read_file_content
from .matcher import is_ignored
from .models import FileDetails, IgnorePolicy, ScanResult
from .settings import ScanSettings
from .typing import LogSink


def _list_entries(path: str, sort_entries: bool) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def scan_directory(
    root: str | os.PathLike[str],
    *,
    policy: Optional[IgnorePolicy] = None,
    settings: Optional[ScanSettings] = None,
    log: LogSink = logger,
) -> ScanResult:
    """
    Walk ``root`` and return the visible structure plus file contents.

    The ignore policy is built once from ``root`` unless one is supplied.
    Paths are matched relative to ``root`` at every level. A root that cannot
    be listed raises ``ScanError``; unreadable subdirectories are logged and
    left empty.
    """

    settings = settings or ScanSettings()
    base = os.path.abspath(root)
    if policy is None:
        policy = build_ignore_policy(base, extra_patterns=settings.extra_ignore_patterns, log=log)

    try:
        top_entries = _list_entries(base, settings.sort_entries)
    except OSError as exc:
        log.error(f"[scan] cannot list scan root {base}: {exc}")
        raise ScanError(base, str(exc)) from exc

    result = ScanResult()
    # (depth, root-relative dir, remaining entries); top of stack is the current directory
    stack: List[Tuple[int, str, Iterator[os.DirEntry]]] = [(0, "", iter(top_entries))]

    while stack:
        depth, rel_dir, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
        is_dir = _is_directory(entry)
        if is_ignored(rel_path, policy, is_dir=is_dir):
            log.debug(f"[scan] ignored {rel_path}")
            continue

        indent = INDENT * depth
        if not is_dir:
            result.structure.append(f"{indent}{entry.name}")
            result.contents[rel_path] = read_file_content(
                entry.path, max_bytes=settings.max_file_size_bytes
            )
            continue

        result.structure.append(f"{indent}{entry.name}{DIRECTORY_SUFFIX}")
        if entry.is_symlink():
            log.debug(f"[scan] not following symlinked directory {rel_path}")
            continue
        try:
            children = _list_entries(entry.path, settings.sort_entries)
        except OSError as exc:
            log.error(f"[scan] skipping unreadable directory {rel_path}: {exc}")
            continue
        stack.append((depth + 1, rel_path, iter(children)))

    log.info(
        f"[scan] {base}: {len(result.structure)} entries, {len(result.contents)} files"
    )
    return result


def list_important_files(
    root: str | os.PathLike[str],
    *,
    settings: Optional[ScanSettings] = None,
    log: LogSink = logger,
) -> FileDetails:
    """Scan ``root`` and return ``{structure, contents}`` for prompt building."""

    return scan_directory(root, settings=settings, log=log).to_file_details()


__all__ = ["list_important_files", "scan_directory"]
