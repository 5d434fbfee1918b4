"""Exception hierarchy for the symbology engine.

Three families:
- UnsupportedTypeError: a renderer or symbol kind has no drawing/matching rule.
  Always caught inside the engine and degraded to an empty icon.
- ResourceFetchError: a remote image, legend or attribute payload could not be
  fetched or decoded.
- MalformedInputError: the caller broke the input contract (missing object id,
  empty LOD list, unknown legend layer).
"""

from __future__ import annotations


class SymbologyError(Exception):
    """Base class for all symbology errors."""


class UnsupportedTypeError(SymbologyError):
    """Raised when a renderer, symbol or style key is not in a dispatch table."""

    def __init__(self, kind: str, type_name: str | None) -> None:
        super().__init__(f"unsupported {kind} type: {type_name!r}")
        self.kind = kind
        self.type_name = type_name


class ResourceFetchError(SymbologyError):
    """Raised when a remote resource cannot be fetched or decoded."""


class ImageResourceError(ResourceFetchError):
    """Raised when an image reference cannot be resolved to image bytes."""


class LegendFetchError(ResourceFetchError):
    """Raised when a map server legend request fails or reports an error."""

    def __init__(self, message: str, server_error: dict | None = None) -> None:
        super().__init__(message)
        self.server_error = server_error


class AttributeFetchError(ResourceFetchError):
    """Raised when a layer attribute payload cannot be fetched."""


class MalformedInputError(SymbologyError, ValueError):
    """Raised when input violates the caller contract."""
