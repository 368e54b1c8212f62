"""Domain-level errors for workspace scanning."""


class WorkspaceContextError(Exception):
    """Base class for errors raised by workspace_context."""


class ScanError(WorkspaceContextError):
    """Raised when the scan root itself cannot be listed."""

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"Cannot scan {root}: {reason}")
        self.root = root
        self.reason = reason
