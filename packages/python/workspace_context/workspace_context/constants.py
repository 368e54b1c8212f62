from __future__ import annotations

GITIGNORE_FILENAME = ".gitignore"
GITKEEP_FILENAME = ".gitkeep"

MAX_FILE_SIZE_BYTES = 1_048_576
BYTES_PER_MB = 1024 * 1024

DIRECTORY_SUFFIX = "/"
INDENT = "  "

DEFAULT_IGNORE_PATTERNS = (
    # --- Build / distribution ---
    "dist",
    "build",
    "out",
    "target",
    "bin",
    "lib",
    ".next",
    "public",

    # --- Dependencies ---
    "node_modules",
    "package-lock.json",
    "bower_components",
    "vendor",
    "packages",

    # --- Environments / virtual envs ---
    ".venv",
    "venv",
    "env",
    ".env",
    "virtualenv",

    # --- Version control ---
    ".git",
    ".svn",
    ".hg",

    # --- IDE / editor ---
    ".idea",
    ".vscode",
    ".vs",
    ".sublime-workspace",

    # --- Cache / temp ---
    ".cache",
    "tmp",
    "temp",
    "__pycache__",

    # --- System ---
    ".DS_Store",
    "*.db",

    # --- Test & coverage outputs ---
    "coverage",
    ".nyc_output",
    ".pytest_cache",

    # --- Logs ---
    "logs",
    "*.log",
    "npm-debug.log*",
    "yarn-debug.log*",
    "yarn-error.log*",

    # --- Images / media ---
    "*.jpg",
    "*.jpeg",
    "*.png",
    "*.gif",
    "*.webp",
    "*.mov",
    "*.flv",
    "*.wmv",
    "*.swf",
    "*.fla",
    "*.svg",
    "*.ico",
    "*.webm",
    "*.woff",
)


__all__ = [
    "BYTES_PER_MB",
    "DEFAULT_IGNORE_PATTERNS",
    "DIRECTORY_SUFFIX",
    "GITIGNORE_FILENAME",
    "GITKEEP_FILENAME",
    "INDENT",
    "MAX_FILE_SIZE_BYTES",
]
