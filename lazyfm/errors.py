"""Filesystem error type shared by listing, navigation, and mutations."""

from __future__ import annotations


class FileSystemError(Exception):
    """One failed filesystem call: which operation, on which path, and why.

    ``cause`` is the underlying ``OSError``; it is ``None`` when the request
    was rejected before reaching the OS (for example an invalid rename name).
    """

    def __init__(self, operation: str, path: str, cause: BaseException | str | None = None) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(operation, path, cause)

    def reason(self) -> str:
        """Short human-readable cause text for status rows."""
        cause = self.cause
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        if cause is None:
            return "unknown error"
        return str(cause)

    def __str__(self) -> str:
        return f"{self.operation} failed for {self.path}: {self.reason()}"


__all__ = ["FileSystemError"]
