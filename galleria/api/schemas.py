"""API request/response schemas."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from galleria.models import FrameStyle


class CompositeDimensions(BaseModel):
    """Serialized with the studio client's key names."""
    model_config = ConfigDict(populate_by_name=True)

    total_width: int = Field(alias="totalW")
    total_height: int = Field(alias="totalH")
    artwork_width: int = Field(alias="artW")
    artwork_height: int = Field(alias="artH")


class CompositeResponse(BaseModel):
    """Response from the /generate/composite endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    mockup_url: str = Field(alias="mockupUrl")
    dimensions: CompositeDimensions


class MatOption(BaseModel):
    id: str
    color: Optional[str] = None


class StyleList(BaseModel):
    styles: list[FrameStyle]


class ErrorResponse(BaseModel):
    error: str
