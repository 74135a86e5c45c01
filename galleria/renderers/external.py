"""External frame rendering — places a supplied frame raster around the artwork.

Both the frame raster and the artwork are contain-fit, so a frame or
artwork whose aspect ratio does not match the canvas is letterboxed
rather than stretched.
"""

from __future__ import annotations
from typing import Optional

from PIL import Image, ImageDraw

from galleria.renderers.base import FrameRenderer
from galleria.models import ExternalFrame, FrameSpec, LayoutPlan
from galleria.core.fit import contain_fit


class ExternalFrameRenderer(FrameRenderer):
    """Frame art produced elsewhere (e.g. an image-generation service)."""

    def get_id(self) -> str:
        return "frame.external"

    def applies(self, frame: FrameSpec) -> bool:
        return isinstance(frame, ExternalFrame)

    def render(
        self,
        plan: LayoutPlan,
        artwork: Image.Image,
        frame_image: Optional[Image.Image] = None,
    ) -> Image.Image:
        if frame_image is None:
            raise ValueError("external frame renderer needs a frame image")

        total = plan.total
        canvas = Image.new("RGBA", total.as_tuple(), (0, 0, 0, 0))

        # Mat sits behind the frame so an empty frame center shows it
        if plan.mat_width > 0 and plan.mat_color:
            fw = plan.border_width
            ImageDraw.Draw(canvas).rectangle(
                [fw, fw, total.width - 1 - fw, total.height - 1 - fw],
                fill=plan.mat_color,
            )

        frame_fit = contain_fit(
            total.width, total.height, frame_image.width, frame_image.height,
        )
        frame = frame_image.convert("RGBA").resize(frame_fit.size, Image.LANCZOS)
        canvas.alpha_composite(frame, frame_fit.offset)

        opening = plan.opening
        art_fit = contain_fit(
            opening.width, opening.height, artwork.width, artwork.height,
        ).shifted(plan.inset, plan.inset)
        art = artwork.convert("RGBA").resize(art_fit.size, Image.LANCZOS)
        canvas.alpha_composite(art, art_fit.offset)

        return canvas
