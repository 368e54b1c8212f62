"""Lightweight typing helpers shared by the scanner modules."""

from typing import Any, Protocol


class LogSink(Protocol):
    """Minimal logging capability the scanner writes to and never reads back.

    Loguru's ``logger`` satisfies it, as does any stub with the same methods.
    """

    def debug(self, message: str, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover - structural typing only
        ...

    def info(self, message: str, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover - structural typing only
        ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover - structural typing only
        ...
