"""Frame style registry — stores and resolves preset frame styles."""

from __future__ import annotations

from galleria.models import FrameStyle

FALLBACK_STYLE_ID = "none"


class FrameStyleRegistry:
    """
    Central registry for preset frame styles.

    Styles are registered at startup. During compositing, the registry
    resolves a style identifier to its rendering parameters; unknown
    identifiers resolve to the `none` style instead of failing.
    """

    def __init__(self) -> None:
        self._styles: dict[str, FrameStyle] = {}

    def register(self, style: FrameStyle) -> None:
        """Register (or replace) a frame style."""
        self._styles[style.id] = style

    def unregister(self, style_id: str) -> None:
        """Remove a style from the registry."""
        self._styles.pop(style_id, None)

    def get(self, style_id: str) -> FrameStyle | None:
        return self._styles.get(style_id)

    def list_styles(self) -> list[FrameStyle]:
        """Return all registered styles in registration order."""
        return list(self._styles.values())

    def resolve(self, style_id: str | None) -> FrameStyle:
        """Look up a style, falling back to `none` for anything unknown."""
        style = self._styles.get((style_id or "").strip().lower())
        if style is not None:
            return style
        fallback = self._styles.get(FALLBACK_STYLE_ID)
        if fallback is None:
            # A registry without `none` still never fails a lookup
            fallback = FrameStyle(id=FALLBACK_STYLE_ID, name="No Frame")
        return fallback


_DEFAULT_STYLES: list[FrameStyle] = [
    FrameStyle(id="none", name="No Frame"),
    FrameStyle(id="thin-black", name="Thin Black", border_width=4,
               color="#111111", has_shadow=True),
    FrameStyle(id="thin-white", name="Thin White", border_width=4,
               color="#f5f5f5", has_shadow=True),
    FrameStyle(id="classic-gold", name="Classic Gold", border_width=12,
               color="#b8860b", has_shadow=True),
    FrameStyle(id="classic-silver", name="Classic Silver", border_width=12,
               color="#c0c0c0", has_shadow=True),
    FrameStyle(id="ornate-gold", name="Ornate Gold", border_width=24,
               color="#a67c00", has_shadow=True, double_line=True,
               accent_color="#d4a844"),
    FrameStyle(id="ornate-dark", name="Ornate Dark", border_width=24,
               color="#2d2d2d", has_shadow=True, double_line=True),
    FrameStyle(id="natural-oak", name="Natural Oak", border_width=16,
               color="#c19a6b", has_shadow=True),
    FrameStyle(id="natural-walnut", name="Natural Walnut", border_width=16,
               color="#5c3317", has_shadow=True),
    FrameStyle(id="natural-maple", name="Natural Maple", border_width=16,
               color="#f2d2a9", has_shadow=True),
    FrameStyle(id="floating-white", name="Floating White", border_width=3,
               color="#f5f5f5", has_shadow=True),
    FrameStyle(id="floating-black", name="Floating Black", border_width=3,
               color="#111111", has_shadow=True),
    FrameStyle(id="shadow-box", name="Shadow Box", border_width=30,
               color="#1a1a1a", has_shadow=True),
    FrameStyle(id="canvas-wrap", name="Canvas Wrap", has_shadow=True),
    # Width comes from the external frame's own override
    FrameStyle(id="ai-generated", name="AI Generated", has_shadow=True),
]


def create_default_registry() -> FrameStyleRegistry:
    """Create a registry with all standard preset frame styles."""
    registry = FrameStyleRegistry()
    for style in _DEFAULT_STYLES:
        registry.register(style)
    return registry
