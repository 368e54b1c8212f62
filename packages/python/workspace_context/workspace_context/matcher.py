"""Simplified glob matching of ignore patterns against root-relative paths.

Only ``*`` is special (any run of characters, separators included). There is
no negation, no ``**`` and no anchoring; a pattern matches a path that equals
it or that continues past it at a ``/`` boundary.
"""

from __future__ import annotations

import posixpath
import re
from functools import lru_cache
from typing import Pattern

from .models import IgnorePolicy

ROOT_DIR = "."


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> Pattern[str]:
    clean = pattern[:-1] if pattern.endswith("/") else pattern
    escaped = ".*".join(re.escape(part) for part in clean.split("*"))
    return re.compile(f"{escaped}(?:/.*)?", re.DOTALL)


def matches_pattern(pattern: str, relative_path: str) -> bool:
    return compile_pattern(pattern).fullmatch(relative_path) is not None


def _is_within(path: str, directory: str) -> bool:
    if directory == ROOT_DIR:
        return True
    return path == directory or path.startswith(directory + "/")


def parent_directory(relative_path: str) -> str:
    return posixpath.dirname(relative_path) or ROOT_DIR


def is_kept(relative_path: str, policy: IgnorePolicy) -> bool:
    """True when the path sits inside (at any depth) a keep directory."""

    parent = parent_directory(relative_path)
    return any(_is_within(parent, keep_dir) for keep_dir in policy.keep_directories)


def leads_to_keep_directory(relative_dir: str, policy: IgnorePolicy) -> bool:
    """True when the directory is a keep directory or an ancestor of one."""

    return any(_is_within(keep_dir, relative_dir) for keep_dir in policy.keep_directories)


def is_ignored(relative_path: str, policy: IgnorePolicy, *, is_dir: bool = False) -> bool:
    """
    Decide whether ``relative_path`` (POSIX, relative to the scan root) is skipped.

    Keep directories win over every pattern. Directories on the way to a keep
    directory are never skipped so the kept files stay reachable.
    """

    if is_kept(relative_path, policy):
        return False
    if is_dir and leads_to_keep_directory(relative_path, policy):
        return False
    return any(matches_pattern(pattern, relative_path) for pattern in policy.patterns)


__all__ = [
    "compile_pattern",
    "is_ignored",
    "is_kept",
    "leads_to_keep_directory",
    "matches_pattern",
    "parent_directory",
]
