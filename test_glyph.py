"""
Glyph Engine Tests
==================

Geometry, stroke table, composition and drawing of Cistercian numerals.

Usage:
    pytest test_glyph.py
"""

import numpy as np
import pytest

from cistercian_glyph import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    Category,
    FrameSurface,
    GlyphRenderer,
    InvalidScaleError,
    OutOfRangeError,
    Quadrant,
    QuadrantBox,
    RecordingSurface,
    Segment,
    StemGeometry,
    compose,
    decompose,
    digit_segments,
    format_label,
    render,
)
from cistercian_glyph.rendering.palette import stroke_width_for

ORIGIN = (0.0, 0.0)
STEM = Segment((0.0, -16.0), (0.0, 16.0), Category.STEM)


def mirror_x(segment: Segment, cx: float) -> Segment:
    return Segment(
        (2 * cx - segment.start[0], segment.start[1]),
        (2 * cx - segment.end[0], segment.end[1]),
        segment.category,
    )


def mirror_y(segment: Segment, cy: float) -> Segment:
    return Segment(
        (segment.start[0], 2 * cy - segment.start[1]),
        (segment.end[0], 2 * cy - segment.end[1]),
        segment.category,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Digit decomposition
# ─────────────────────────────────────────────────────────────────────────────

def test_decompose_recomposes_every_value():
    for value in range(0, 10_000):
        digits = decompose(value)
        assert digits.value == value
        assert all(0 <= d <= 9 for d in digits.as_tuple())


def test_decompose_digits_and_magnitude():
    digits = decompose(1234)
    assert digits.as_tuple() == (4, 3, 2, 1)
    assert digits.magnitude == 4

    assert decompose(0).magnitude == 1
    assert decompose(9).magnitude == 1
    assert decompose(10).magnitude == 2
    assert decompose(99).magnitude == 2
    assert decompose(100).magnitude == 3
    assert decompose(999).magnitude == 3
    assert decompose(1000).magnitude == 4


@pytest.mark.parametrize("value", [-1, 10_000, 123_456, 2.5, "12", None, True])
def test_decompose_rejects_out_of_range(value):
    with pytest.raises(OutOfRangeError):
        decompose(value)


# ─────────────────────────────────────────────────────────────────────────────
# Stem and quadrant boxes
# ─────────────────────────────────────────────────────────────────────────────

def test_stem_geometry():
    stem = StemGeometry(center=(10, 20), scale=2.0)
    assert stem.half_height == 32.0
    assert stem.top == (10.0, -12.0)
    assert stem.bottom == (10.0, 52.0)
    assert stem.segment() == Segment((10.0, -12.0), (10.0, 52.0), Category.STEM)


@pytest.mark.parametrize("scale", [0, -1.0, float("nan"), float("inf"), "2", None])
def test_stem_rejects_invalid_scale(scale):
    with pytest.raises(InvalidScaleError):
        StemGeometry(center=ORIGIN, scale=scale)


def test_quadrant_boxes_at_unit_scale():
    stem = StemGeometry(center=ORIGIN, scale=1.0)

    units = QuadrantBox.from_stem(stem, Quadrant.UNITS)
    assert units == QuadrantBox(near=(0, -16), far=(10, -16), near_inset=(0, -6), far_inset=(10, -6))

    tens = QuadrantBox.from_stem(stem, Quadrant.TENS)
    assert tens == QuadrantBox(near=(0, -16), far=(-10, -16), near_inset=(0, -6), far_inset=(-10, -6))

    hundreds = QuadrantBox.from_stem(stem, Quadrant.HUNDREDS)
    assert hundreds == QuadrantBox(near=(0, 16), far=(10, 16), near_inset=(0, 6), far_inset=(10, 6))

    thousands = QuadrantBox.from_stem(stem, Quadrant.THOUSANDS)
    assert thousands == QuadrantBox(near=(0, 16), far=(-10, 16), near_inset=(0, 6), far_inset=(-10, 6))


# ─────────────────────────────────────────────────────────────────────────────
# Stroke table
# ─────────────────────────────────────────────────────────────────────────────

def test_digit_segment_counts():
    box = QuadrantBox.from_stem(StemGeometry(center=ORIGIN), Quadrant.UNITS)
    counts = {digit: len(digit_segments(box, digit)) for digit in range(10)}
    assert counts == {0: 0, 1: 1, 2: 1, 3: 1, 4: 1, 5: 2, 6: 1, 7: 2, 8: 2, 9: 3}


def test_digit_stroke_table():
    box = QuadrantBox(near="n", far="f", near_inset="ni", far_inset="fi")

    def pairs(digit):
        return [(s.start, s.end, s.category) for s in digit_segments(box, digit)]

    assert pairs(1) == [("n", "f", Category.CAT1)]
    assert pairs(2) == [("ni", "fi", Category.CAT2)]
    assert pairs(3) == [("n", "fi", Category.CAT3)]
    assert pairs(4) == [("ni", "f", Category.CAT4)]
    assert pairs(5) == [("n", "f", Category.CAT1), ("ni", "f", Category.CAT4)]
    assert pairs(6) == [("f", "fi", Category.CAT6)]
    assert pairs(7) == [("n", "f", Category.CAT1), ("f", "fi", Category.CAT6)]
    assert pairs(8) == [("ni", "fi", Category.CAT2), ("f", "fi", Category.CAT6)]
    assert pairs(9) == [
        ("n", "f", Category.CAT1),
        ("ni", "fi", Category.CAT2),
        ("f", "fi", Category.CAT6),
    ]


def test_digit_outside_table_rejected():
    box = QuadrantBox.from_stem(StemGeometry(center=ORIGIN), Quadrant.UNITS)
    with pytest.raises(ValueError):
        digit_segments(box, 10)


# ─────────────────────────────────────────────────────────────────────────────
# Composition
# ─────────────────────────────────────────────────────────────────────────────

def test_zero_is_only_the_stem():
    assert compose(0, ORIGIN) == [STEM]


def test_five_is_edge_plus_diagonal():
    assert compose(5, ORIGIN) == [
        STEM,
        Segment((0.0, -16.0), (10.0, -16.0), Category.CAT1),
        Segment((0.0, -6.0), (10.0, -16.0), Category.CAT4),
    ]


def test_1234_uses_all_four_quadrants():
    assert compose(1234, ORIGIN) == [
        STEM,
        Segment((0.0, -6.0), (10.0, -16.0), Category.CAT4),   # units 4
        Segment((0.0, -16.0), (-10.0, -6.0), Category.CAT3),  # tens 3
        Segment((0.0, 6.0), (10.0, 6.0), Category.CAT2),      # hundreds 2
        Segment((0.0, 16.0), (-10.0, 16.0), Category.CAT1),   # thousands 1
    ]


def test_9999_draws_three_strokes_per_quadrant():
    segments = compose(9999, ORIGIN)
    assert len(segments) == 13
    categories = [s.category for s in segments[1:]]
    assert categories == [Category.CAT1, Category.CAT2, Category.CAT6] * 4


def test_quadrants_mirror_each_other():
    center = (100.0, 50.0)
    stem = StemGeometry(center=center, scale=2.5)
    boxes = {q: QuadrantBox.from_stem(stem, q) for q in Quadrant}

    for digit in range(10):
        units = digit_segments(boxes[Quadrant.UNITS], digit)
        tens = digit_segments(boxes[Quadrant.TENS], digit)
        hundreds = digit_segments(boxes[Quadrant.HUNDREDS], digit)
        thousands = digit_segments(boxes[Quadrant.THOUSANDS], digit)

        assert tens == [mirror_x(s, center[0]) for s in units]
        assert thousands == [mirror_x(s, center[0]) for s in hundreds]
        assert hundreds == [mirror_y(s, center[1]) for s in units]
        assert thousands == [mirror_y(s, center[1]) for s in tens]


def test_compose_rejects_bad_input():
    with pytest.raises(OutOfRangeError):
        compose(10_000, ORIGIN)
    with pytest.raises(InvalidScaleError):
        compose(5, ORIGIN, scale=0)


# ─────────────────────────────────────────────────────────────────────────────
# Colors and stroke width
# ─────────────────────────────────────────────────────────────────────────────

def test_palette_lookup():
    assert DARK_PALETTE.color_for(Category.STEM) == DARK_PALETTE.colour_0
    assert DARK_PALETTE.color_for(Category.CAT1) == DARK_PALETTE.colour_1
    assert DARK_PALETTE.color_for(Category.CAT2) == DARK_PALETTE.colour_2
    assert DARK_PALETTE.color_for(Category.CAT3) == DARK_PALETTE.colour_3
    assert DARK_PALETTE.color_for(Category.CAT4) == DARK_PALETTE.colour_4
    assert DARK_PALETTE.color_for(Category.CAT6) == DARK_PALETTE.colour_6
    assert set(LIGHT_PALETTE.as_dict()) == {"stem", "cat1", "cat2", "cat3", "cat4", "cat6"}


def test_palette_overrides():
    palette = DARK_PALETTE.with_overrides({"cat1": "#00ff00"})
    assert (palette.colour_1.r, palette.colour_1.g, palette.colour_1.b) == (0, 255, 0)
    assert palette.colour_2 == DARK_PALETTE.colour_2

    with pytest.raises(ValueError):
        DARK_PALETTE.with_overrides({"cat5": "#00ff00"})


def test_stroke_width():
    assert stroke_width_for(1.0) == 2.0
    assert stroke_width_for(1.99) == 2.0
    assert stroke_width_for(2.0) == 2.0
    assert stroke_width_for(4.0) == 4.0


# ─────────────────────────────────────────────────────────────────────────────
# Rendering
# ─────────────────────────────────────────────────────────────────────────────

def test_render_five_draw_calls():
    surface = RecordingSurface()
    render(surface, ORIGIN, scale=1.0, palette=DARK_PALETTE, value=5)

    assert [(c.start, c.end) for c in surface.calls] == [
        ((0.0, -16.0), (0.0, 16.0)),
        ((0.0, -16.0), (10.0, -16.0)),
        ((0.0, -6.0), (10.0, -16.0)),
    ]
    assert [c.color for c in surface.calls] == [
        DARK_PALETTE.colour_0,
        DARK_PALETTE.colour_1,
        DARK_PALETTE.colour_4,
    ]
    assert all(c.stroke_width == 2.0 for c in surface.calls)
    assert surface.texts == []


@pytest.mark.parametrize("value", [-1, 10_000, 99_999])
def test_render_out_of_range_draws_nothing(value):
    surface = RecordingSurface()
    with pytest.raises(OutOfRangeError):
        render(surface, ORIGIN, value=value, show_label=True)
    assert surface.calls == []
    assert surface.texts == []


def test_render_invalid_scale_draws_nothing():
    surface = RecordingSurface()
    with pytest.raises(InvalidScaleError):
        render(surface, ORIGIN, scale=-2.0, value=42)
    assert surface.calls == []


def test_render_is_idempotent():
    first, second = RecordingSurface(), RecordingSurface()
    render(first, (30, 40), scale=3.0, palette=LIGHT_PALETTE, value=4567)
    render(second, (30, 40), scale=3.0, palette=LIGHT_PALETTE, value=4567)
    assert first.calls == second.calls


def test_render_label_does_not_change_segments():
    plain, labelled = RecordingSurface(), RecordingSurface()
    render(plain, ORIGIN, value=1234)
    render(labelled, ORIGIN, value=1234, show_label=True)

    assert plain.calls == labelled.calls
    assert len(labelled.texts) == 1
    assert labelled.texts[0].text == "1,234"
    assert labelled.texts[0].anchor == (0.0, 23.0)


def test_render_label_skipped_on_line_only_surface():
    class LineOnly:
        def __init__(self):
            self.count = 0

        def draw_line(self, start, end, stroke_width, color):
            self.count += 1

    surface = LineOnly()
    render(surface, ORIGIN, value=7, show_label=True)
    assert surface.count == 3


def test_format_label():
    assert format_label(0) == "0"
    assert format_label(999) == "999"
    assert format_label(1000) == "1,000"
    assert format_label(1234) == "1,234"
    assert format_label(9005) == "9,005"


def test_glyph_renderer_binds_palette_and_scale():
    renderer = GlyphRenderer(palette=LIGHT_PALETTE, scale=4.0)
    assert renderer.cell_size == 136.0

    surface = RecordingSurface()
    batch = renderer.draw(surface, (68, 68), 1)
    assert len(batch) == 2
    assert surface.calls[1].color == LIGHT_PALETTE.colour_1
    assert surface.calls[1].stroke_width == 4.0


def test_frame_surface_draws_pixels():
    frame = np.zeros((136, 136, 3), dtype=np.uint8)
    surface = FrameSurface(frame)
    render(surface, (68, 68), scale=4.0, palette=DARK_PALETTE, value=1)

    # stem at x=68, top edge at y=4 from x=68 to x=108
    assert tuple(surface.frame[68, 68]) == DARK_PALETTE.colour_0.as_bgr()
    assert tuple(surface.frame[4, 90]) == DARK_PALETTE.colour_1.as_bgr()
    # nothing in the tens quadrant
    assert tuple(surface.frame[4, 40]) == (0, 0, 0)


def test_frame_surface_rejects_bad_frames():
    with pytest.raises(TypeError):
        FrameSurface([[0, 0, 0]])
    with pytest.raises(ValueError):
        FrameSurface(np.zeros((10, 10), dtype=np.uint8))
