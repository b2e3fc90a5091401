"""
Glyph Errors
============

Validation failures raised before any geometry is computed or drawn.

Hierarchy:
    GlyphValidationError (ValueError)
    ├── OutOfRangeError     value not an integer in [0, 9999]
    └── InvalidScaleError   scale not a finite number > 0
"""


class GlyphValidationError(ValueError):
    """Base class for rejected render inputs."""
    pass


class OutOfRangeError(GlyphValidationError):
    """Raised when a numeral value is outside [0, 9999]."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Cistercian numerals cover 0..9999, got {value!r}")


class InvalidScaleError(GlyphValidationError):
    """Raised when the scale factor is zero, negative or not finite."""

    def __init__(self, scale):
        self.scale = scale
        super().__init__(f"scale must be a finite number > 0, got {scale!r}")
