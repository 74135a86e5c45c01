from .geometry import Size, Placement
from .artwork import Unit, ArtworkSpec, MatSpec, Anchor
from .frame import FrameStyle, PresetFrame, ExternalFrame, FrameSpec
from .composite import LayoutPlan, CompositeRequest, CompositeResult
from .submission import CompositeSubmission, StoredMockup

__all__ = [
    "Size", "Placement",
    "Unit", "ArtworkSpec", "MatSpec", "Anchor",
    "FrameStyle", "PresetFrame", "ExternalFrame", "FrameSpec",
    "LayoutPlan", "CompositeRequest", "CompositeResult",
    "CompositeSubmission", "StoredMockup",
]
