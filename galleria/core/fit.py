"""Contain fit — scale a rectangle into a container without distortion."""

from __future__ import annotations

from galleria.models import Placement
from galleria.core.sanitize import min_size, round_half_up


def contain_fit(
    container_width: int, container_height: int,
    source_width: int, source_height: int,
) -> Placement:
    """
    Largest uniformly scaled copy of the source that fits in the container,
    centered. Every input is coerced to at least 1 pixel.
    """
    cw, ch = min_size(container_width), min_size(container_height)
    sw, sh = min_size(source_width), min_size(source_height)

    factor = min(cw / sw, ch / sh)
    width = max(1, min(cw, round_half_up(sw * factor)))
    height = max(1, min(ch, round_half_up(sh * factor)))

    return Placement(
        width=width,
        height=height,
        left=round_half_up((cw - width) / 2),
        top=round_half_up((ch - height) / 2),
    )
