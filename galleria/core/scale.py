"""Physical → pixel scale derived from the environment image."""

from __future__ import annotations

from galleria.models import ArtworkSpec, Size
from galleria.core.sanitize import min_size, round_half_up

# The environment is assumed to show a wall this many physical units wide,
# whatever its pixel resolution. The same factor applies to in and cm.
WALL_WIDTH_UNITS = 120.0


def pixels_per_unit(environment_width: int) -> float:
    """Pixels per physical unit for an environment of the given pixel width."""
    return min_size(environment_width) / WALL_WIDTH_UNITS


def to_pixels(length: float, ppu: float, scale: float = 1.0) -> int:
    """Convert a physical length to whole pixels; never below 1."""
    return max(1, round_half_up(length * ppu * scale))


def artwork_pixel_size(artwork: ArtworkSpec, environment_width: int) -> Size:
    ppu = pixels_per_unit(environment_width)
    return Size(
        width=to_pixels(artwork.width, ppu, artwork.scale),
        height=to_pixels(artwork.height, ppu, artwork.scale),
    )
