import pytest
from pydantic import ValidationError

from galleria.core.canvas import CanvasBuilder
from galleria.core.compositor import MockupCompositor
from galleria.core.registry import create_default_registry
from galleria.core.scene import anchor_offset, composite_scene
from galleria.models import (
    Anchor, ArtworkSpec, CompositeRequest, ExternalFrame, LayoutPlan,
    MatSpec, PresetFrame, Size,
)
from galleria.renderers.external import ExternalFrameRenderer
from galleria.renderers.preset import PresetFrameRenderer

from conftest import close_to, solid

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def _plan(style_id: str, artwork=(40, 60), border=None, mat=8, mat_color="#ffffff") -> LayoutPlan:
    style = create_default_registry().resolve(style_id)
    return LayoutPlan(
        pixels_per_unit=16.0,
        artwork=Size(width=artwork[0], height=artwork[1]),
        border_width=style.border_width if border is None else border,
        mat_width=mat,
        mat_color=mat_color,
        style=style,
    )


# ── Preset renderer ──────────────────────────────────────────────────────────

def test_preset_layers():
    plan = _plan("classic-gold")
    out = PresetFrameRenderer().render(plan, solid((10, 10), RED))

    assert out.mode == "RGB"
    assert out.size == (80, 100)
    assert close_to(out.getpixel((1, 1)), (184, 134, 11))        # border
    assert close_to(out.getpixel((14, 14)), WHITE)                # mat
    assert close_to(out.getpixel((40, 50)), RED)                  # artwork
    assert close_to(out.getpixel((20, 20)), RED)                  # artwork corner


def test_double_line_accent():
    plan = _plan("ornate-gold", artwork=(100, 100), mat=0, mat_color=None)
    out = PresetFrameRenderer().render(plan, solid((10, 10), RED))

    assert out.size == (148, 148)
    assert close_to(out.getpixel((8, 70)), (212, 168, 68))        # accent stroke
    assert close_to(out.getpixel((4, 70)), (166, 124, 0))         # border
    assert close_to(out.getpixel((74, 74)), RED)


def test_shadow_is_clipped_by_the_frame():
    plan = _plan("classic-gold")
    flat = plan.model_copy(update={"style": plan.style.model_copy(update={"has_shadow": False})})
    renderer = PresetFrameRenderer()

    assert plan.style.has_shadow
    shadowed = renderer.render(plan, solid((10, 10), RED))
    assert shadowed.size == (80, 100)
    assert shadowed.tobytes() == renderer.render(flat, solid((10, 10), RED)).tobytes()


def test_no_frame_is_just_the_artwork():
    plan = _plan("none", mat=0, mat_color=None)
    out = PresetFrameRenderer().render(plan, solid((4, 6), GREEN))

    assert out.size == (40, 60)
    assert out.mode == "RGB"
    assert close_to(out.getpixel((0, 0)), GREEN)
    assert close_to(out.getpixel((39, 59)), GREEN)


# ── External renderer ────────────────────────────────────────────────────────

def test_external_frame_letterboxes():
    plan = _plan("ai-generated", artwork=(384, 576), border=12, mat=32)
    frame = solid((800, 600), (0, 0, 255, 255), "RGBA")
    out = ExternalFrameRenderer().render(plan, solid((100, 100), GREEN), frame)

    assert out.mode == "RGBA"
    assert out.size == (472, 664)
    # Frame is fit to 472x354 at top 155; above it, outside the mat, stays clear
    assert out.getpixel((5, 10))[3] == 0
    assert close_to(out.getpixel((5, 200)), (0, 0, 255, 255))
    # Square artwork is fit to 384x384 inside the 384x576 opening
    assert close_to(out.getpixel((236, 332)), (0, 255, 0, 255))
    assert close_to(out.getpixel((236, 100)), (255, 255, 255, 255))


def test_external_renderer_requires_frame_image():
    with pytest.raises(ValueError):
        ExternalFrameRenderer().render(_plan("ai-generated"), solid((4, 4), RED))


def test_canvas_builder_dispatch():
    builder = CanvasBuilder()
    assert builder.renderer_for(PresetFrame(style="thin-black")).get_id() == "frame.preset"
    assert builder.renderer_for(ExternalFrame(border_width=5)).get_id() == "frame.external"


def test_canvas_builder_without_match():
    with pytest.raises(LookupError):
        CanvasBuilder(renderers=[]).renderer_for(PresetFrame())


# ── Scene ────────────────────────────────────────────────────────────────────

def test_reference_anchor_needs_no_clamping():
    placement = anchor_offset((1920, 1200), (472, 664), Anchor())
    assert (placement.left, placement.top) == (724, 208)


def test_anchor_clamped_at_edges():
    assert anchor_offset((1920, 1200), (472, 664), Anchor(x=0, y=0)).offset == (0, 0)
    assert anchor_offset((1920, 1200), (472, 664), Anchor(x=100, y=100)).offset == (1448, 536)


@pytest.mark.parametrize("overlay", [(1, 1), (472, 664), (1920, 1200), (1919, 3)])
def test_overlay_always_inside(overlay):
    for x in range(0, 101, 10):
        for y in range(0, 101, 10):
            p = anchor_offset((1920, 1200), overlay, Anchor(x=x, y=y))
            assert 0 <= p.left and p.left + p.width <= 1920
            assert 0 <= p.top and p.top + p.height <= 1200


def test_oversized_overlay_pins_to_origin():
    placement = anchor_offset((100, 100), (150, 50), Anchor(x=50, y=50))
    assert placement.offset == (0, 25)


def test_anchor_sanitizes():
    anchor = Anchor(x="abc", y="150")
    assert (anchor.x, anchor.y) == (50.0, 100.0)
    assert Anchor(x="-5").x == 0.0


def test_composite_scene_respects_alpha():
    overlay = solid((20, 10), (0, 0, 0, 0), "RGBA")
    overlay.paste((255, 0, 0, 255), (5, 0, 15, 10))
    scene, placement = composite_scene(solid((200, 100), WHITE), overlay, Anchor(x=50, y=50))

    assert scene.mode == "RGB"
    assert scene.size == (200, 100)
    assert placement.offset == (90, 45)
    assert scene.getpixel((92, 50)) == WHITE
    assert scene.getpixel((100, 50)) == RED


# ── Full pipeline ────────────────────────────────────────────────────────────

def test_compose_reference_scene():
    request = CompositeRequest(
        artwork=ArtworkSpec(width=24, height=36),
        frame=PresetFrame(style="classic-gold"),
        mat=MatSpec(option="white", width=2),
        artwork_image=solid((240, 360), RED),
        environment_image=solid((1920, 1200), (128, 128, 128)),
    )
    result = MockupCompositor(create_default_registry()).compose(request)

    assert (result.total_width, result.total_height) == (472, 664)
    assert (result.artwork_width, result.artwork_height) == (384, 576)
    assert result.placement.offset == (724, 208)
    assert result.image.size == (1920, 1200)
    assert close_to(result.image.getpixel((960, 540)), RED)
    assert close_to(result.image.getpixel((100, 100)), (128, 128, 128))
    assert result.to_jpeg()[:2] == b"\xff\xd8"


def test_compose_external_frame():
    request = CompositeRequest(
        artwork=ArtworkSpec(width=24, height=36),
        frame=ExternalFrame(border_width=12),
        mat=MatSpec(option="white", width=2),
        artwork_image=solid((240, 360), RED),
        environment_image=solid((1920, 1200), (128, 128, 128)),
        frame_image=solid((800, 600), (0, 0, 255, 255), "RGBA"),
    )
    result = MockupCompositor(create_default_registry()).compose(request)

    assert (result.total_width, result.total_height) == (472, 664)
    assert close_to(result.image.getpixel((960, 540)), RED)
    # Transparent corner of the framed canvas shows the wall
    assert close_to(result.image.getpixel((726, 212)), (128, 128, 128))


def test_external_request_requires_frame_image():
    with pytest.raises(ValidationError):
        CompositeRequest(
            frame=ExternalFrame(border_width=12),
            artwork_image=solid((4, 4), RED),
            environment_image=solid((40, 40), WHITE),
        )
