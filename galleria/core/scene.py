"""Scene compositing — places the framed artwork on the environment."""

from __future__ import annotations

from PIL import Image

from galleria.models import Anchor, Placement
from galleria.core.sanitize import round_half_up


def anchor_offset(
    background: tuple[int, int],
    overlay: tuple[int, int],
    anchor: Anchor,
) -> Placement:
    """
    Top-left corner that centers the overlay on the anchor point, clamped so
    the overlay stays inside the background on each axis. An overlay larger
    than the background pins to 0 on that axis.
    """
    bw, bh = background
    ow, oh = overlay

    left = round_half_up(anchor.x / 100 * bw - ow / 2)
    top = round_half_up(anchor.y / 100 * bh - oh / 2)

    left = max(0, min(left, max(0, bw - ow)))
    top = max(0, min(top, max(0, bh - oh)))

    return Placement(width=ow, height=oh, left=left, top=top)


def composite_scene(
    background: Image.Image,
    overlay: Image.Image,
    anchor: Anchor,
) -> tuple[Image.Image, Placement]:
    """Flatten the overlay onto the background; returns an RGB image."""
    placement = anchor_offset(background.size, overlay.size, anchor)

    scene = background.convert("RGBA")
    scene.alpha_composite(overlay.convert("RGBA"), placement.offset)
    return scene.convert("RGB"), placement
