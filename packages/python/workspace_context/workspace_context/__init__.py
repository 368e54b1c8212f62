"""Workspace scanning for language-model context.

Example usage:

    from workspace_context import list_important_files

    details = list_important_files("/path/to/workspace")
    print(details.structure)
    print(details.contents["src/index.ts"])
"""

from .constants import DEFAULT_IGNORE_PATTERNS, MAX_FILE_SIZE_BYTES
from .errors import ScanError, WorkspaceContextError
from .ignore_rules import build_ignore_policy, find_keep_directories, read_gitignore
from .materializer import read_file_content, read_workspace_files
from .matcher import is_ignored, matches_pattern
from .models import FileDetails, IgnorePolicy, ScanResult
from .settings import ScanSettings, load_settings
from .walker import list_important_files, scan_directory

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "MAX_FILE_SIZE_BYTES",
    "FileDetails",
    "IgnorePolicy",
    "ScanResult",
    "ScanSettings",
    "ScanError",
    "WorkspaceContextError",
    "build_ignore_policy",
    "find_keep_directories",
    "read_gitignore",
    "is_ignored",
    "matches_pattern",
    "read_file_content",
    "read_workspace_files",
    "scan_directory",
    "list_important_files",
    "load_settings",
]
