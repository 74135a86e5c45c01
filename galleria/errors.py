"""Error types raised by the compositing service."""

from __future__ import annotations


class GalleriaError(Exception):
    """Base class for all compositing failures reported to the caller."""


class MissingInputError(GalleriaError):
    """A required input (artwork, environment) was not supplied."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class UpstreamFetchError(GalleriaError):
    """A remote image could not be downloaded."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class ImageDecodeError(GalleriaError):
    """Supplied bytes are not a decodable raster image."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class CompositingError(GalleriaError):
    """Rendering or storing the mockup failed unexpectedly."""
