"""Build the effective ignore policy for a workspace root.

Three sources are merged once per scan:

* the builtin ``DEFAULT_IGNORE_PATTERNS``
* patterns parsed from the root ``.gitignore``
* directories holding a ``.gitkeep`` marker, which override every pattern
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Set

from loguru import logger

from .constants import DEFAULT_IGNORE_PATTERNS, GITIGNORE_FILENAME, GITKEEP_FILENAME
from .models import IgnorePolicy
from .typing import LogSink


def parse_ignore_lines(text: str) -> List[str]:
    """Turn ignore-file text into patterns: no blanks, no comments, no edge slashes."""

    patterns: List[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        # Remove leading/trailing slashes; a bare "/" collapses to nothing
        pattern = line.strip("/")
        if pattern:
            patterns.append(pattern)
    return patterns


def read_gitignore(root: str | os.PathLike[str], *, log: LogSink = logger) -> List[str]:
    gitignore_path = Path(root) / GITIGNORE_FILENAME
    if not os.path.isfile(gitignore_path):
        log.info(f"No {GITIGNORE_FILENAME} file found at: {gitignore_path}")
        return []

    try:
        content = gitignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.error(f"Error reading {gitignore_path}: {exc}")
        return []

    patterns = parse_ignore_lines(content)
    log.debug(f"Processed {GITIGNORE_FILENAME} patterns: {patterns}")
    return patterns


def find_keep_directories(root: str | os.PathLike[str], *, log: LogSink = logger) -> Set[str]:
    """
    Walk the whole tree, unfiltered, and collect every directory that directly
    contains a ``.gitkeep`` file. Paths are POSIX style and relative to
    ``root``; the root itself is ``"."``.

    Unreadable directories are logged and contribute nothing.
    """

    base = os.path.abspath(root)
    keep_dirs: Set[str] = set()

    def _on_error(exc: OSError) -> None:
        log.error(f"Error reading directory for {GITKEEP_FILENAME}: {exc}")

    for current, _dirs, files in os.walk(base, onerror=_on_error):
        if GITKEEP_FILENAME in files:
            keep_dirs.add(Path(os.path.relpath(current, base)).as_posix())

    log.debug(f"Found {GITKEEP_FILENAME} in directories: {sorted(keep_dirs)}")
    return keep_dirs


def build_ignore_policy(
    root: str | os.PathLike[str],
    *,
    extra_patterns: Iterable[str] = (),
    log: LogSink = logger,
) -> IgnorePolicy:
    patterns = set(DEFAULT_IGNORE_PATTERNS)
    patterns.update(read_gitignore(root, log=log))
    patterns.update(parse_ignore_lines("\n".join(extra_patterns)))

    policy = IgnorePolicy(
        patterns=frozenset(patterns),
        keep_directories=frozenset(find_keep_directories(root, log=log)),
    )
    log.debug(
        f"Root level ignore patterns ({len(policy.patterns)}): {sorted(policy.patterns)}"
    )
    return policy


__all__ = [
    "build_ignore_policy",
    "find_keep_directories",
    "parse_ignore_lines",
    "read_gitignore",
]
