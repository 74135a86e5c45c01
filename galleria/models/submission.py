"""Raw composite submission as received from a client, before sanitizing."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel

from .artwork import Anchor, ArtworkSpec, MatSpec
from .frame import ExternalFrame, FrameSpec, PresetFrame


class CompositeSubmission(BaseModel):
    """
    One user action: uploaded bytes plus string-typed form values.

    Numeric fields stay as received; the properties below sanitize
    them, so malformed values never fail here.
    """
    artwork: Optional[bytes] = None
    environment: Optional[bytes] = None
    environment_url: Optional[str] = None

    width: Optional[str] = None
    height: Optional[str] = None
    unit: Optional[str] = None
    scale: Optional[str] = None

    frame_style: Optional[str] = None
    ai_frame_image_url: Optional[str] = None
    ai_frame_border_width: Optional[str] = None

    mat_option: Optional[str] = None
    mat_width: Optional[str] = None

    pos_x: Optional[str] = None
    pos_y: Optional[str] = None

    @property
    def artwork_spec(self) -> ArtworkSpec:
        return ArtworkSpec(width=self.width, height=self.height, unit=self.unit, scale=self.scale)

    @property
    def frame_spec(self) -> FrameSpec:
        if self.ai_frame_image_url:
            return ExternalFrame(border_width=self.ai_frame_border_width)
        return PresetFrame(style=self.frame_style)

    @property
    def mat_spec(self) -> MatSpec:
        return MatSpec(option=self.mat_option, width=self.mat_width)

    @property
    def anchor(self) -> Anchor:
        return Anchor(x=self.pos_x, y=self.pos_y)


class StoredMockup(BaseModel):
    """A finished mockup written to the output store."""
    output_id: str
    filename: str
    url: str
    total_width: int
    total_height: int
    artwork_width: int
    artwork_height: int
