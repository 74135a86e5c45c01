"""Main mockup compositor — orchestrates layout, framing and scene placement."""

from __future__ import annotations

from galleria.models import (
    CompositeRequest, CompositeResult, ExternalFrame, LayoutPlan,
)
from galleria.core.canvas import CanvasBuilder
from galleria.core.mat import mat_color, mat_pixels
from galleria.core.registry import FrameStyleRegistry
from galleria.core.scale import artwork_pixel_size, pixels_per_unit
from galleria.core.scene import composite_scene

EXTERNAL_STYLE_ID = "ai-generated"


class MockupCompositor:
    """
    Stateless mockup compositor.

    Takes a composite request, derives the pixel layout from the physical
    sizes, renders the framed artwork, and places it on the environment.
    """

    def __init__(
        self,
        registry: FrameStyleRegistry,
        canvas: CanvasBuilder | None = None,
    ) -> None:
        self.registry = registry
        self.canvas = canvas or CanvasBuilder()

    def plan(self, request: CompositeRequest) -> LayoutPlan:
        """Layout phase: physical inches → pixel boxes."""
        env_width = request.environment_image.width
        ppu = pixels_per_unit(env_width)

        if isinstance(request.frame, ExternalFrame):
            style = self.registry.resolve(EXTERNAL_STYLE_ID)
            border = request.frame.border_width
        else:
            style = self.registry.resolve(request.frame.style)
            border = style.border_width

        return LayoutPlan(
            pixels_per_unit=ppu,
            artwork=artwork_pixel_size(request.artwork, env_width),
            border_width=border,
            mat_width=mat_pixels(request.mat, ppu),
            mat_color=mat_color(request.mat.option) if request.mat.enabled else None,
            style=style,
        )

    def compose(self, request: CompositeRequest) -> CompositeResult:
        plan = self.plan(request)

        # Framing phase
        framed = self.canvas.build(
            plan, request.frame, request.artwork_image, request.frame_image,
        )

        # Scene phase
        image, placement = composite_scene(
            request.environment_image, framed, request.anchor,
        )

        total = plan.total
        return CompositeResult(
            image=image,
            total_width=total.width,
            total_height=total.height,
            artwork_width=plan.artwork.width,
            artwork_height=plan.artwork.height,
            placement=placement,
        )
