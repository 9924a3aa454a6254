from __future__ import annotations


class SheetUploaderError(Exception):
    """Base class for errors raised by the uploader."""


class FatalSetupError(SheetUploaderError):
    """Raised when the environment is misconfigured and the run must stop."""


class RemoteReadError(FatalSetupError):
    """Raised when a sheet row cannot be read or the read is ambiguous."""


class MalformedRowError(FatalSetupError):
    """Raised when a sheet row does not match the expected column layout."""


class RemoteWriteError(SheetUploaderError):
    """Raised when the sheet rejects a result write."""


__all__ = [
    "SheetUploaderError",
    "FatalSetupError",
    "RemoteReadError",
    "MalformedRowError",
    "RemoteWriteError",
]
