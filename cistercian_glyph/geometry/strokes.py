"""
Digit Strokes Module
====================

The stroke table shared by all four quadrants.

Digits 1, 2, 4 and 6 are elemental strokes (top edge, inset edge,
inset-to-far diagonal, outer edge). 5, 7, 8 and 9 are unions of
elementals. 3 is its own diagonal (near to far_inset), not a union.
"""

from typing import Dict, List, Tuple

from cistercian_glyph.geometry.shapes import Category, QuadrantBox, Segment

# (start corner, end corner, category)
Stroke = Tuple[str, str, Category]

EDGE: Stroke = ("near", "far", Category.CAT1)
INSET_EDGE: Stroke = ("near_inset", "far_inset", Category.CAT2)
DIAGONAL_DOWN: Stroke = ("near", "far_inset", Category.CAT3)
DIAGONAL_UP: Stroke = ("near_inset", "far", Category.CAT4)
OUTER_EDGE: Stroke = ("far", "far_inset", Category.CAT6)

DIGIT_STROKES: Dict[int, Tuple[Stroke, ...]] = {
    0: (),
    1: (EDGE,),
    2: (INSET_EDGE,),
    3: (DIAGONAL_DOWN,),
    4: (DIAGONAL_UP,),
    5: (EDGE, DIAGONAL_UP),
    6: (OUTER_EDGE,),
    7: (EDGE, OUTER_EDGE),
    8: (INSET_EDGE, OUTER_EDGE),
    9: (EDGE, INSET_EDGE, OUTER_EDGE),
}


def digit_segments(box: QuadrantBox, digit: int) -> List[Segment]:
    """
    Segments drawing one digit inside a quadrant box.

    Args:
        box: Quadrant geometry
        digit: Digit in [0, 9]

    Returns:
        0 to 3 segments, in table order

    Raises:
        ValueError: If digit is not in [0, 9]
    """
    try:
        strokes = DIGIT_STROKES[digit]
    except KeyError:
        raise ValueError(f"digit must be in [0, 9], got {digit!r}") from None

    return [
        Segment(box.corner(start), box.corner(end), category)
        for start, end, category in strokes
    ]
