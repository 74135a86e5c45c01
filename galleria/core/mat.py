"""Mat board width and color resolution."""

from __future__ import annotations
from typing import Optional

from galleria.models import MatSpec
from galleria.core.sanitize import round_half_up

MAT_COLORS: dict[str, Optional[str]] = {
    "none": None,
    "white": "#ffffff",
    "cream": "#fdf6e3",
    "black": "#1a1a1a",
    "grey": "#9ca3af",
}


def mat_color(option: str) -> Optional[str]:
    """Fill color for a mat option; None means transparent / no mat."""
    return MAT_COLORS.get(option)


def mat_pixels(mat: MatSpec, ppu: float) -> int:
    if not mat.enabled:
        return 0
    return max(0, round_half_up(mat.width * ppu))


def list_mats() -> list[dict[str, Optional[str]]]:
    return [{"id": k, "color": v} for k, v in MAT_COLORS.items()]
