from __future__ import annotations

from typing import Any, Dict, Mapping


class LayerDepsError(Exception):
    """Base exception for layerdeps."""

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


class ManifestReadError(LayerDepsError, OSError):
    """Raised when a manifest file is missing or cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LayerDepsError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class ManifestParseError(LayerDepsError, ValueError):
    """Raised when manifest content is not a valid document of the expected shape."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LayerDepsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class VersionRangeError(ManifestParseError):
    """Raised when a declared version range cannot be parsed or satisfied."""


class InstallProcessError(LayerDepsError, RuntimeError):
    """Raised when the installer process fails to spawn or exits non-zero."""

    def __init__(
        self,
        message: str = "",
        *,
        exit_code: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if exit_code is not None:
            ctx.setdefault("exit_code", exit_code)
        LayerDepsError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)
        self.exit_code = exit_code


class ConfigError(LayerDepsError, ValueError):
    """Raised when merged configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LayerDepsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "LayerDepsError",
    "ManifestReadError",
    "ManifestParseError",
    "VersionRangeError",
    "InstallProcessError",
    "ConfigError",
]
