"""
Wind Directions Grid CLI - Main entry point.

Renders the compass grid to an image, or prints its RenderPlan as JSON.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import cv2
import numpy as np

from winddirections_grid.config import (
    GridConfig,
    InvalidConfigurationError,
    default_config,
    parse_color,
)
from winddirections_grid.geometry.layout import GridLayout
from winddirections_grid.geometry.shapes import SurfaceExtent
from winddirections_grid.logging import LogEvent, StructuredLogger, create_logger
from winddirections_grid.rendering.visualizer import GridVisualizer


def get_target_run_folder(application_name: str, root: str = "./runs") -> Path:
    """Create and return ./runs/<application_name>/<timestamp>."""
    folder = Path(root) / application_name / datetime.now().strftime('%Y%m%d_%H%M%S')
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def build_config(
    args: argparse.Namespace,
    logger: Optional[StructuredLogger] = None,
) -> GridConfig:
    """
    Build the grid configuration from --config plus style flags.

    Flags override values from the YAML file.

    Raises:
        FileNotFoundError: If --config doesn't exist
        InvalidConfigurationError: If any value is invalid
    """
    if args.config:
        config = GridConfig.from_yaml(Path(args.config))
        if logger is not None:
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message="Grid configuration loaded",
                metadata={'path': args.config, **config.to_dict()},
            )
    else:
        config = default_config()

    overrides: Dict[str, Any] = {
        'circle_count': args.circles,
        'grid_line_width': args.grid_line_width,
        'grid_color': args.grid_color,
        'label_text_size': args.label_text_size,
        'label_color': args.label_color,
        'label_stroke_width': args.label_stroke_width,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    return config.with_changes(**overrides) if overrides else config


def write_image(path: Path, image: np.ndarray) -> None:
    """
    Write a BGR image with OpenCV.

    Raises:
        OSError: If OpenCV cannot encode or write the file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"Could not write image: {path}")


def run_render(args: argparse.Namespace, config: GridConfig, logger: StructuredLogger) -> None:
    visualizer = GridVisualizer(background_color=parse_color(args.background))
    image = visualizer.render(args.width, args.height, config)

    if image.size == 0:
        logger.warning(
            event=LogEvent.GRID_DEGENERATE_SURFACE,
            message="Surface is empty, no image written",
            metadata={'width': args.width, 'height': args.height},
        )
        return

    output = Path(args.output) if args.output else get_target_run_folder("grid") / "grid.png"
    try:
        write_image(output, image)
    except OSError as e:
        logger.error(
            event=LogEvent.IMAGE_WRITE_ERROR,
            message="Failed to write grid image",
            metadata={'path': str(output)},
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.IMAGE_WRITTEN,
        message="Grid image written",
        metadata={'path': str(output), 'width': args.width, 'height': args.height},
    )
    print(output)


def run_plan(args: argparse.Namespace, config: GridConfig, logger: StructuredLogger) -> None:
    plan = GridLayout.plan(SurfaceExtent(width=args.width, height=args.height), config)
    print(json.dumps(plan.to_dict(), indent=2))

    logger.info(
        event=LogEvent.PLAN_EXPORTED,
        message="Render plan exported",
        metadata={'primitives': len(plan.primitives)},
    )


def _add_surface_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--width', type=float, required=True, help='Surface width')
    parser.add_argument('--height', type=float, required=True, help='Surface height')
    parser.add_argument('--config', help='Path to grid config YAML')
    parser.add_argument('--circles', type=int, help='Number of rings (>= 1)')
    parser.add_argument('--grid-line-width', type=float, help='Ring and axis stroke width')
    parser.add_argument('--grid-color', help='Ring and axis color (#RRGGBB)')
    parser.add_argument('--label-text-size', type=float, help='Cardinal label font size')
    parser.add_argument('--label-color', help='Cardinal label color (#RRGGBB)')
    parser.add_argument('--label-stroke-width', type=float, help='Cardinal label outline width')


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="winddirections-grid",
        description="Render the wind directions compass grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render with defaults (3 rings, black on white)
  winddirections-grid render --width 400 --height 400 --output grid.png

  # Style from YAML, ring count from the command line
  winddirections-grid render --width 400 --height 300 --config config/grid.yaml --circles 5

  # Print the render plan as JSON
  winddirections-grid plan --width 200 --height 200 --circles 2
"""
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for JSON logs on stderr (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    render_cmd = subparsers.add_parser('render', help='Render the grid to an image')
    _add_surface_arguments(render_cmd)
    render_cmd.add_argument('--background', default="#ffffff", help='Canvas color (default: #ffffff)')
    render_cmd.add_argument('--output', help='Output image path (default: ./runs/grid/<timestamp>/grid.png)')

    plan_cmd = subparsers.add_parser('plan', help='Print the render plan as JSON')
    _add_surface_arguments(plan_cmd)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logger = create_logger("cli", level=getattr(logging, args.log_level))

    try:
        config = build_config(args, logger)

        if args.command == 'render':
            run_render(args, config, logger)
        elif args.command == 'plan':
            run_plan(args, config, logger)

    except (InvalidConfigurationError, FileNotFoundError) as e:
        logger.error(
            event=LogEvent.CONFIG_INVALID,
            message="Grid configuration rejected",
            metadata={'config': args.config},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
