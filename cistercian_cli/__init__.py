"""
Cistercian CLI - Command-line interface for the glyph engine and clock.

Usage:
    cistercian render 1234 --label --output glyph.png
    cistercian segments 9999
    cistercian clock --ticks 5 --output-dir runs/clock
"""

__version__ = "1.0.0"
