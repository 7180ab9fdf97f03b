"""
mensura CLI - Main entry point.

Provides command-line interface for computing shape areas.
"""

import argparse
import math
import sys
from typing import List, Optional

from mensura_shapes import (
    Shape,
    ShapeNotAvailableError,
    ShapeRegistry,
    Triangle,
    TriState,
    default_registry,
)
from mensura_shapes.logging import LogEvent, StructuredLogger

from .config import CalculatorConfig, VALID_LOG_LEVELS

RIGHT_TRIANGLE_LABELS = {
    TriState.TRUE: "yes",
    TriState.FALSE: "no",
    TriState.UNKNOWN: "unknown",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mensura",
        description="mensura - Validate shape measurements and compute areas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Circle area from radius
  mensura circle 2.5

  # Triangle area and right-triangle check
  mensura triangle 3 4 5

  # Settings from YAML, flags override the file
  mensura --config config/mensura.yaml --precision 3 triangle 2 3 4

  # List shape kinds
  mensura kinds
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to YAML config (precision, log_level, component)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Decimals printed for areas (default: 6)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Structured log level (default: WARNING)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    circle = subparsers.add_parser('circle', help='Area of a circle')
    circle.add_argument('radius', type=float, help='Circle radius')

    triangle = subparsers.add_parser(
        'triangle', help='Area of a triangle and right-triangle check'
    )
    triangle.add_argument('sides', type=float, nargs=3, metavar='SIDE',
                          help='Three side lengths')

    subparsers.add_parser('kinds', help='List available shape kinds')

    return parser


def load_config(args: argparse.Namespace) -> CalculatorConfig:
    """
    Resolve configuration: YAML file (if given), then command-line overrides.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config = CalculatorConfig.from_yaml(args.config) if args.config else CalculatorConfig()
    return config.with_overrides(precision=args.precision, log_level=args.log_level)


def format_area(area: float, precision: int) -> str:
    if math.isinf(area):
        return "inf"
    return f"{area:.{precision}f}"


def report_area(
    shape: Shape,
    kind: str,
    config: CalculatorConfig,
    logger: StructuredLogger
) -> List[str]:
    """Compute the area (and right-triangle check) and return output lines."""
    area = shape.area
    metadata = {'kind': kind, 'area': area}

    if math.isinf(area):
        logger.warning(
            event=LogEvent.AREA_OVERFLOW,
            message=f"{kind} area overflowed to infinity",
            metadata={'kind': kind, 'measurements': shape.measurements.tolist()}
        )
    else:
        logger.info(
            event=LogEvent.AREA_CALCULATED,
            message=f"{kind} area calculated",
            metadata=metadata
        )

    lines = [f"{kind.capitalize()} area: {format_area(area, config.precision)}"]

    if isinstance(shape, Triangle):
        result = shape.is_right_triangle()
        if result.is_known:
            logger.info(
                event=LogEvent.RIGHT_TRIANGLE_CLASSIFIED,
                message="Right-triangle check completed",
                metadata={'right': result.to_optional()}
            )
        else:
            logger.warning(
                event=LogEvent.RIGHT_TRIANGLE_UNKNOWN,
                message="Squared sides overflowed, right-triangle check undecided",
                metadata={'sides': list(shape.sides)}
            )
        lines.append(f"Right triangle: {RIGHT_TRIANGLE_LABELS[result]}")

    return lines


def run(
    args: argparse.Namespace,
    config: CalculatorConfig,
    registry: ShapeRegistry,
    logger: StructuredLogger
) -> List[str]:
    """Execute a parsed command and return the lines to print."""
    if args.command == 'kinds':
        return [f"{kind}: {description}" for kind, description in registry.get_help().items()]

    if args.command == 'circle':
        shape = registry.create('circle', [args.radius])
    else:  # triangle
        shape = registry.create('triangle', args.sides)

    return report_area(shape, args.command, config, logger)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        # No config yet, so report through a default "cli" logger
        StructuredLogger(component="cli").error(
            event=LogEvent.CLI_ERROR,
            message="Configuration failed",
            metadata={'source': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = StructuredLogger(component=config.component, level=config.log_level_value)
    logger.debug(
        event=LogEvent.CONFIG_LOADED,
        message="Configuration resolved",
        metadata={'source': args.config, **config.to_dict()}
    )

    registry = default_registry(logger=logger)

    try:
        lines = run(args, config, registry, logger)
    except (ValueError, ShapeNotAvailableError) as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"'{args.command}' failed",
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
