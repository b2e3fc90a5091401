"""
Cistercian CLI - Main entry point.

Renders single numerals or the reference chart to PNG, dumps segments, or runs the clock.
"""

import argparse
import json
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

from cistercian_glyph import FrameSurface, GlyphValidationError, compose, render
from cistercian_glyph.geometry.shapes import CELL_SIZE, validate_scale
from cistercian_glyph.rendering.composer import LABEL_GAP
from cistercian_clock import ClockConfig, ClockService, ReferenceChart, get_theme
from cistercian_clock.logging import LogEvent, StructuredLogger, create_logger
from utils import get_target_run_folder

# Room around a single glyph, in unscaled units
GLYPH_MARGIN = 4.0
LABEL_HEIGHT = 16.0


def setup_logging(verbose: bool = False) -> None:
    """Route library loggers (cistercian_glyph.*) to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def render_glyph_frame(
    value: int,
    scale: float = 4.0,
    theme_name: str = "dark",
    show_label: bool = False,
) -> np.ndarray:
    """
    Draw one numeral centered on its own frame.

    Returns:
        BGR frame sized to the glyph cell (plus label row if requested)
    """
    scale = validate_scale(scale)
    theme = get_theme(theme_name)
    side = int(np.ceil(scale * (CELL_SIZE + 2 * GLYPH_MARGIN)))
    extra = int(np.ceil(scale * (LABEL_GAP + LABEL_HEIGHT))) if show_label else 0

    surface = FrameSurface.blank(side, side + extra, theme.background)
    render(
        surface,
        center=(side / 2, side / 2),
        scale=scale,
        palette=theme.palette,
        value=value,
        show_label=show_label,
    )
    return surface.frame


def write_png(frame: np.ndarray, output: Optional[Path], application_name: str, file_name: str) -> Path:
    """Write frame to output, or to a new run folder when output is None."""
    if output is None:
        output = get_target_run_folder(application_name=application_name) / file_name
    else:
        output.parent.mkdir(parents=True, exist_ok=True)

    if not cv2.imwrite(str(output), frame):
        raise OSError(f"Could not write image: {output}")
    return output


def command_render(args: argparse.Namespace, logger: StructuredLogger) -> None:
    frame = render_glyph_frame(args.value, args.scale, args.theme, args.label)
    output = write_png(frame, args.output, "render", f"glyph_{args.value}.png")
    logger.info(
        event=LogEvent.GLYPH_RENDERED,
        message=f"Rendered {args.value}",
        metadata={'value': args.value, 'scale': args.scale, 'path': str(output)},
    )
    print(output)


def command_chart(args: argparse.Namespace, logger: StructuredLogger) -> None:
    chart = ReferenceChart(theme=get_theme(args.theme), scale=args.scale)
    frame = chart.draw()
    output = write_png(frame, args.output, "chart", "cistercian_numbers.png")
    logger.info(
        event=LogEvent.GLYPH_RENDERED,
        message="Rendered reference chart",
        metadata={'glyphs': sum(len(row) for row in chart.rows), 'path': str(output)},
    )
    print(output)


def command_segments(args: argparse.Namespace, logger: StructuredLogger) -> None:
    segments = compose(args.value, center=(0.0, 0.0), scale=args.scale)
    print(json.dumps([segment.to_dict() for segment in segments], indent=2))


def make_stop_handler(service: ClockService):
    """Signal handler that only asks the service to stop; run() logs the stop."""
    def _signal_handler(signum, frame):
        service.stop()
    return _signal_handler


def command_clock(args: argparse.Namespace, logger: StructuredLogger) -> None:
    config = ClockConfig.from_yaml(args.config) if args.config else ClockConfig()

    overrides = {}
    if args.ticks is not None:
        overrides['max_ticks'] = args.ticks
    if args.output_dir is not None:
        overrides['output_dir'] = args.output_dir
    if args.display:
        overrides['display'] = True
    if overrides:
        config = ClockConfig.from_dict({**_config_as_dict(config), **overrides})

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Clock configuration loaded",
        metadata={'source': str(args.config) if args.config else 'defaults'},
    )

    service = ClockService(config, logger=create_logger("clock"))

    handler = make_stop_handler(service)
    previous_term = signal.signal(signal.SIGTERM, handler)
    previous_int = signal.signal(signal.SIGINT, handler)
    try:
        service.run()
    finally:
        signal.signal(signal.SIGTERM, previous_term)
        signal.signal(signal.SIGINT, previous_int)


def _config_as_dict(config: ClockConfig) -> dict:
    return {
        'theme': config.theme,
        'clock_scale': config.clock_scale,
        'palette_overrides': dict(config.palette_overrides),
        'frame_resolution_wh': list(config.frame_resolution_wh),
        'tick_interval_s': config.tick_interval_s,
        'max_ticks': config.max_ticks,
        'output_dir': config.output_dir,
        'display': config.display,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cistercian",
        description="Cistercian CLI - Draw numbers 0..9999 as Cistercian numerals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render one numeral to PNG
  cistercian render 1234 --scale 4 --label --output glyph.png

  # Dump segment geometry as JSON
  cistercian segments 1993

  # Render the chart of 0-99, hundreds and thousands
  cistercian chart --theme light --output chart.png

  # Run the clock, saving 10 frames
  cistercian clock --config config/clock.yaml --ticks 10 --output-dir runs/clock

  # Run the clock in a window (press q to quit)
  cistercian clock --display
"""
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # render command
    render_cmd = subparsers.add_parser('render', help='Render one numeral to PNG')
    render_cmd.add_argument('value', type=int, help='Integer in [0, 9999]')
    render_cmd.add_argument('--scale', type=float, default=4.0, help='Scale factor (default: 4.0)')
    render_cmd.add_argument('--theme', choices=['dark', 'light'], default='dark', help='Color theme (default: dark)')
    render_cmd.add_argument('--label', action='store_true', help='Draw the base-10 label')
    render_cmd.add_argument('--output', type=Path, default=None, help='PNG path (default: runs/render/<timestamp>/)')
    render_cmd.set_defaults(handler=command_render)

    # segments command
    segments_cmd = subparsers.add_parser('segments', help='Print the segments of one numeral as JSON')
    segments_cmd.add_argument('value', type=int, help='Integer in [0, 9999]')
    segments_cmd.add_argument('--scale', type=float, default=1.0, help='Scale factor (default: 1.0)')
    segments_cmd.set_defaults(handler=command_segments)

    # chart command
    chart_cmd = subparsers.add_parser('chart', help='Render the labelled chart of numerals to PNG')
    chart_cmd.add_argument('--scale', type=float, default=2.0, help='Scale factor (default: 2.0)')
    chart_cmd.add_argument('--theme', choices=['dark', 'light'], default='dark', help='Color theme (default: dark)')
    chart_cmd.add_argument('--output', type=Path, default=None, help='PNG path (default: runs/chart/<timestamp>/)')
    chart_cmd.set_defaults(handler=command_chart)

    # clock command
    clock_cmd = subparsers.add_parser('clock', help='Run the Cistercian clock')
    clock_cmd.add_argument('--config', type=Path, default=None, help='Path to clock config YAML')
    clock_cmd.add_argument('--ticks', type=int, default=None, help='Stop after N frames')
    clock_cmd.add_argument('--output-dir', type=Path, default=None, help='Save frames as PNG here')
    clock_cmd.add_argument('--display', action='store_true', help='Show frames in a window')
    clock_cmd.set_defaults(handler=command_clock)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    logger = create_logger("cli")

    try:
        args.handler(args, logger)
    except GlyphValidationError as e:
        logger.error(
            event=LogEvent.GLYPH_REJECTED,
            message="Invalid numeral input",
            metadata={'command': args.command},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError, TypeError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR if args.command == 'clock' else LogEvent.RENDER_ERROR,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
