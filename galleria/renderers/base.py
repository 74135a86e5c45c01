"""Abstract base class for frame renderers.

Every way of drawing a frame around artwork implements this interface.
Renderers are:
- Self-contained: each produces one complete framed-artwork raster
- Mutually exclusive: each decides if it handles the requested frame mode
- Stateless: all geometry comes from the LayoutPlan
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image

from galleria.models import FrameSpec, LayoutPlan


class FrameRenderer(ABC):
    """
    Base class for all frame renderers.

    Subclasses implement `applies()` and `render()`.
    The canvas builder asks each renderer in turn and uses the first
    one whose `applies()` returns True.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this renderer (e.g., 'frame.preset')."""
        ...

    @abstractmethod
    def applies(self, frame: FrameSpec) -> bool:
        """Return True if this renderer handles the given frame selection."""
        ...

    @abstractmethod
    def render(
        self,
        plan: LayoutPlan,
        artwork: Image.Image,
        frame_image: Optional[Image.Image] = None,
    ) -> Image.Image:
        """
        Draw frame, mat and artwork into one raster of `plan.total` size.
        """
        ...
