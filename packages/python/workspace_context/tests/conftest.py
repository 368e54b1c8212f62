import os

import pytest


class RecordingLog:
    """Stand-in for loguru's logger that keeps messages per level."""

    def __init__(self):
        self.records = []

    def _record(self, level, message):
        self.records.append((level, message))

    def debug(self, message, *args, **kwargs):
        self._record("DEBUG", message)

    def info(self, message, *args, **kwargs):
        self._record("INFO", message)

    def error(self, message, *args, **kwargs):
        self._record("ERROR", message)

    def messages(self, level):
        return [message for lvl, message in self.records if lvl == level]


@pytest.fixture()
def recording_log():
    return RecordingLog()


@pytest.fixture()
def make_tree(tmp_path):
    """Create files from a {relative_path: text | bytes} mapping under tmp_path."""

    def _make(files):
        for rel, data in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(data, bytes):
                target.write_bytes(data)
            else:
                target.write_text(data, encoding="utf-8")
        return tmp_path

    return _make


def file_paths_from_structure(lines):
    """Rebuild root-relative file paths from indented structure lines."""

    stack = []
    paths = []
    for line in lines:
        stripped = line.lstrip(" ")
        depth = (len(line) - len(stripped)) // 2
        del stack[depth:]
        if stripped.endswith("/"):
            stack.append(stripped[:-1])
        else:
            paths.append("/".join(stack + [stripped]))
    return paths


@pytest.fixture()
def structure_files():
    return file_paths_from_structure




class _ReversedScandir:
    """os.scandir replacement that yields entries in reverse name order."""

    def __init__(self, real_scandir, path):
        with real_scandir(path) as it:
            self._entries = iter(sorted(it, key=lambda e: e.name, reverse=True))

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._entries)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def close(self):
        pass


@pytest.fixture()
def reversed_scandir(monkeypatch):
    """Make directory listings come back in reverse name order."""

    real_scandir = os.scandir
    monkeypatch.setattr(os, "scandir", lambda path=".": _ReversedScandir(real_scandir, path))
