"""Preset frame rendering — solid borders drawn from a registry style.

Draws, back to front: drop shadow, border fill, optional double-line
accent, mat, and finally the artwork sized to its exact pixel box.
"""

from __future__ import annotations
from typing import Optional

from PIL import Image, ImageDraw, ImageFilter

from galleria.renderers.base import FrameRenderer
from galleria.models import FrameSpec, LayoutPlan, PresetFrame
from galleria.core.sanitize import round_half_up

SHADOW_OFFSET = (4, 6)
SHADOW_BLUR = 8
SHADOW_OPACITY = 0.4
BACKING_COLOR = "#ffffff"


class PresetFrameRenderer(FrameRenderer):
    """Vector-style frame: rectangles of flat color around the artwork."""

    def get_id(self) -> str:
        return "frame.preset"

    def applies(self, frame: FrameSpec) -> bool:
        return isinstance(frame, PresetFrame)

    def render(
        self,
        plan: LayoutPlan,
        artwork: Image.Image,
        frame_image: Optional[Image.Image] = None,
    ) -> Image.Image:
        style = plan.style
        size = plan.total.as_tuple()
        w, h = size
        fw = plan.border_width

        canvas = Image.new("RGBA", size, (0, 0, 0, 0))

        # Clipped to the canvas: border, mat and artwork together cover every
        # pixel, so the shadow never shows in the flattened output.
        if style.has_shadow:
            canvas.alpha_composite(self._shadow(size))

        draw = ImageDraw.Draw(canvas)

        if fw > 0:
            draw.rectangle([0, 0, w - 1, h - 1], fill=style.color)

        if style.double_line and fw > 0:
            i = round_half_up(fw / 3)
            draw.rectangle(
                [i, i, w - 1 - i, h - 1 - i],
                outline=style.accent_color, width=1,
            )

        if plan.mat_width > 0 and plan.mat_color:
            draw.rectangle(
                [fw, fw, w - 1 - fw, h - 1 - fw],
                fill=plan.mat_color,
            )

        # The box was sized from the artwork's own physical proportions
        art = artwork.convert("RGBA").resize(
            plan.artwork.as_tuple(), Image.LANCZOS,
        )
        canvas.alpha_composite(art, (plan.inset, plan.inset))

        backing = Image.new("RGBA", size, BACKING_COLOR)
        backing.alpha_composite(canvas)
        return backing.convert("RGB")

    def _shadow(self, size: tuple[int, int]) -> Image.Image:
        """Blurred dark silhouette of the whole rectangle, clipped to the canvas."""
        w, h = size
        dx, dy = SHADOW_OFFSET
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).rectangle(
            [dx, dy, w - 1 + dx, h - 1 + dy],
            fill=(0, 0, 0, int(255 * SHADOW_OPACITY)),
        )
        return layer.filter(ImageFilter.GaussianBlur(SHADOW_BLUR))
