"""Canvas builder — dispatches a layout plan to the matching frame renderer."""

from __future__ import annotations
from typing import Optional

from PIL import Image

from galleria.models import FrameSpec, LayoutPlan
from galleria.renderers.base import FrameRenderer


class CanvasBuilder:
    """Holds the available renderers and picks one per frame selection."""

    def __init__(self, renderers: list[FrameRenderer] | None = None) -> None:
        if renderers is None:
            renderers = default_renderers()
        self.renderers = renderers

    def renderer_for(self, frame: FrameSpec) -> FrameRenderer:
        for renderer in self.renderers:
            if renderer.applies(frame):
                return renderer
        raise LookupError(f"no renderer for frame mode {frame.mode!r}")

    def build(
        self,
        plan: LayoutPlan,
        frame: FrameSpec,
        artwork: Image.Image,
        frame_image: Optional[Image.Image] = None,
    ) -> Image.Image:
        """Render frame + mat + artwork into a single raster of `plan.total` size."""
        return self.renderer_for(frame).render(plan, artwork, frame_image)


def default_renderers() -> list[FrameRenderer]:
    from galleria.renderers.preset import PresetFrameRenderer
    from galleria.renderers.external import ExternalFrameRenderer

    return [PresetFrameRenderer(), ExternalFrameRenderer()]
