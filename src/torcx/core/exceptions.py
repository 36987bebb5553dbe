from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union


class TorcxError(Exception):
    """Base exception for torcx."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ManifestError(TorcxError):
    """A manifest could not be read, decoded or written.

    ``kind`` is ``"io"`` or ``"parse"``; ``path`` names the offending file
    (``None`` for in-memory documents) and ``cause`` the underlying reason.
    """

    kind: str = ""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[str] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["kind"] = self.kind
        if path is not None:
            ctx["path"] = str(path)
        if cause:
            ctx["cause"] = cause
        TorcxError.__init__(self, message, context=ctx)
        self.path = str(path) if path is not None else None
        self.cause = cause


class ManifestIOError(ManifestError, OSError):
    """Raised when a manifest path is missing, unreadable or unwritable."""

    kind = "io"

    def __init__(self, message: str, **kwargs: Any) -> None:
        ManifestError.__init__(self, message, **kwargs)


class ManifestParseError(ManifestError, ValueError):
    """Raised when a manifest is malformed, has the wrong kind, or holds an unknown image format."""

    kind = "parse"

    def __init__(self, message: str, **kwargs: Any) -> None:
        ManifestError.__init__(self, message, **kwargs)


class ImageFormatError(TorcxError, ValueError):
    """Raised for an unrecognized image ``format`` value."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TorcxError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ProfileNotFoundError(TorcxError, FileNotFoundError):
    """Raised when a named profile exists in none of the profile directories."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TorcxError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ConfigError(TorcxError, ValueError):
    """Raised when a torcx configuration document is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TorcxError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "TorcxError",
    "ManifestError",
    "ManifestIOError",
    "ManifestParseError",
    "ImageFormatError",
    "ProfileNotFoundError",
    "ConfigError",
]
