"""Composite request, layout plan and result models."""

from __future__ import annotations
import io
from typing import Optional
from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .artwork import Anchor, ArtworkSpec, MatSpec
from .frame import ExternalFrame, FrameSpec, FrameStyle, PresetFrame
from .geometry import Placement, Size


class LayoutPlan(BaseModel):
    """
    Pixel geometry for one composite, derived from the physical inputs.

    The canvas builder draws exactly this box: artwork in the middle,
    mat around it, frame border around the mat.
    """
    model_config = ConfigDict(frozen=True)

    pixels_per_unit: float
    artwork: Size
    border_width: int
    mat_width: int
    mat_color: Optional[str] = None   # None = no mat
    style: FrameStyle

    @property
    def inset(self) -> int:
        """Distance from the canvas edge to the artwork opening."""
        return self.border_width + self.mat_width

    @property
    def total(self) -> Size:
        return Size(
            width=self.artwork.width + 2 * self.inset,
            height=self.artwork.height + 2 * self.inset,
        )

    @property
    def opening(self) -> Size:
        return self.total.inset(self.inset)


class CompositeRequest(BaseModel):
    """Everything needed to produce one mockup. Consumed once."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    artwork: ArtworkSpec = Field(default_factory=ArtworkSpec)
    frame: FrameSpec = Field(default_factory=PresetFrame)
    mat: MatSpec = Field(default_factory=MatSpec)
    anchor: Anchor = Field(default_factory=Anchor)

    artwork_image: Image.Image
    environment_image: Image.Image
    frame_image: Optional[Image.Image] = None

    @model_validator(mode="after")
    def _frame_raster_present(self) -> CompositeRequest:
        if isinstance(self.frame, ExternalFrame) and self.frame_image is None:
            raise ValueError("external frame mode requires a frame image")
        return self


class CompositeResult(BaseModel):
    """The flattened mockup plus the geometry used to build it."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image: Image.Image
    total_width: int
    total_height: int
    artwork_width: int
    artwork_height: int
    placement: Placement    # Where the framed artwork landed on the background

    def to_jpeg(self, quality: int = 95) -> bytes:
        buf = io.BytesIO()
        self.image.convert("RGB").save(buf, format="JPEG", quality=quality)
        return buf.getvalue()
