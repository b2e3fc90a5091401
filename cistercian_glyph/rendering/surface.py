"""
Drawing Surfaces Module
=======================

Draw sink adapter plus the surfaces it can target.

Design:
- Surface is a Protocol: one draw_line operation, optional draw_text
- Adapter issues one draw_line per styled segment, no batching, no state
- FrameSurface draws on numpy images via supervision drawing utils
- RecordingSurface keeps the calls for inspection and tests

Dependencies:
- supervision (draw_line, draw_text, Point, Color)
- numpy (frames)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, runtime_checkable

import numpy as np
import supervision as sv

from cistercian_glyph.geometry.shapes import Point, Segment


@runtime_checkable
class DrawSurface(Protocol):
    """Anything that can draw a straight stroked line."""

    def draw_line(self, start: Point, end: Point, stroke_width: float, color: sv.Color) -> None:
        ...


@runtime_checkable
class TextSurface(Protocol):
    """Surface that can also place a short text label."""

    def draw_text(self, text: str, anchor: Point, color: sv.Color) -> None:
        ...


@dataclass(frozen=True)
class StyledSegment:
    """Segment with its resolved stroke width and color."""

    segment: Segment
    stroke_width: float
    color: sv.Color


def emit_segments(surface: DrawSurface, batch: Iterable[StyledSegment]) -> int:
    """
    Issue one draw_line call per styled segment, in batch order.

    Returns:
        Number of draw calls issued
    """
    count = 0
    for styled in batch:
        surface.draw_line(
            styled.segment.start,
            styled.segment.end,
            styled.stroke_width,
            styled.color,
        )
        count += 1
    return count


class FrameSurface:
    """
    Surface backed by a BGR numpy frame.

    Usage:
        frame = np.zeros((136, 136, 3), dtype=np.uint8)
        surface = FrameSurface(frame)
        render(surface, center=(68, 68), scale=4.0, value=1234)
        cv2.imwrite("glyph.png", surface.frame)
    """

    def __init__(
        self,
        frame: np.ndarray,
        text_scale: float = 0.5,
        text_thickness: int = 1,
        text_padding: int = 4,
    ):
        """
        Args:
            frame: HxWx3 uint8 image, drawn on in place
            text_scale: Scale factor for label text
            text_thickness: Thickness for label text
            text_padding: Padding around label text
        """
        if not isinstance(frame, np.ndarray):
            raise TypeError(f"frame must be np.ndarray, got {type(frame)}")
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"frame must be HxWx3 array, got shape {frame.shape}")

        self.frame = frame
        self.text_scale = text_scale
        self.text_thickness = text_thickness
        self.text_padding = text_padding

    @classmethod
    def blank(cls, width: int, height: int, background: sv.Color, **kwargs) -> "FrameSurface":
        """Create a surface over a new frame filled with background."""
        frame = np.full((height, width, 3), background.as_bgr(), dtype=np.uint8)
        return cls(frame, **kwargs)

    def draw_line(self, start: Point, end: Point, stroke_width: float, color: sv.Color) -> None:
        # cv2 thickness is whole pixels
        thickness = max(1, int(round(stroke_width)))
        self.frame = sv.draw_line(
            scene=self.frame,
            start=sv.Point(x=start[0], y=start[1]),
            end=sv.Point(x=end[0], y=end[1]),
            color=color,
            thickness=thickness,
        )

    def draw_text(self, text: str, anchor: Point, color: sv.Color) -> None:
        self.frame = sv.draw_text(
            scene=self.frame,
            text=text,
            text_anchor=sv.Point(x=anchor[0], y=anchor[1]),
            text_color=color,
            text_scale=self.text_scale,
            text_thickness=self.text_thickness,
            text_padding=self.text_padding,
        )


@dataclass(frozen=True)
class DrawCall:
    """One recorded draw_line call."""

    start: Point
    end: Point
    stroke_width: float
    color: sv.Color


@dataclass(frozen=True)
class TextCall:
    """One recorded draw_text call."""

    text: str
    anchor: Point
    color: sv.Color


@dataclass
class RecordingSurface:
    """Surface that only records what it is asked to draw."""

    calls: List[DrawCall] = field(default_factory=list)
    texts: List[TextCall] = field(default_factory=list)

    def draw_line(self, start: Point, end: Point, stroke_width: float, color: sv.Color) -> None:
        self.calls.append(DrawCall(start, end, stroke_width, color))

    def draw_text(self, text: str, anchor: Point, color: sv.Color) -> None:
        self.texts.append(TextCall(text, anchor, color))
