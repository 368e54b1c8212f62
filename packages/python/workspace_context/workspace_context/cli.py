from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from .errors import ScanError
from .logging_setup import setup_logging
from .materializer import read_workspace_files
from .models import FileDetails
from .rendering import render_json, render_text
from .settings import ScanSettings, load_settings
from .walker import list_important_files


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="workspace-context",
        description="Print a filtered file tree and file contents of a workspace",
    )
    p.add_argument("root", nargs="?", default=".", help="Workspace root (default: cwd)")
    p.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    contents = p.add_mutually_exclusive_group()
    contents.add_argument(
        "--full",
        dest="include_contents",
        action="store_const",
        const=True,
        default=None,
        help="Include file contents in text output",
    )
    contents.add_argument(
        "--structure-only",
        dest="include_contents",
        action="store_const",
        const=False,
        help="Only print the tree in text output",
    )
    p.add_argument("--max-file-bytes", type=int, default=None, help="Size cutoff per file")
    p.add_argument("--unsorted", action="store_true", help="Keep directory listing order")
    p.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Extra ignore pattern (repeatable)",
    )
    p.add_argument(
        "--read",
        nargs="+",
        metavar="PATH",
        help="Only read these root-relative files instead of scanning",
    )
    p.add_argument("--log-level", default=None, help="Loguru level (default from env or INFO)")
    p.add_argument("--log-file", type=Path, default=None, help="Also write debug logs here")
    return p


def _settings_from_args(args: argparse.Namespace) -> ScanSettings:
    base = load_settings()
    return load_settings(
        max_file_size_bytes=args.max_file_bytes,
        sort_entries=False if args.unsorted else None,
        extra_ignore_patterns=base.extra_ignore_patterns + list(args.ignore) if args.ignore else None,
        use_full_workspace=args.include_contents,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)
    setup_logging(settings.log_level, args.log_file)

    root = os.path.abspath(args.root)

    if args.read:
        files = read_workspace_files(root, args.read, max_bytes=settings.max_file_size_bytes)
        if args.format == "json":
            out = json.dumps(files, indent=2, ensure_ascii=False)
        else:
            out = render_text(FileDetails(contents=files), root)
        sys.stdout.write(out + "\n")
        return 0

    try:
        details = list_important_files(root, settings=settings)
    except ScanError as exc:
        logger.error(str(exc))
        return 1

    if args.format == "json":
        out = render_json(details)
    else:
        out = render_text(details, root, include_contents=settings.use_full_workspace)
    sys.stdout.write(out + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
