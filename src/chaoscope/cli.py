"""
CLI entry point for the attractor viewer.

Usage:
    chaoscope [options]
    python -m chaoscope [options]
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from chaoscope.config import ConfigError, ViewerConfig, load_config
from chaoscope.core.systems import SystemVariant
from chaoscope.utils.logging import (
    get_logger,
    resolve_log_level,
    set_component_context,
    setup_logging,
)
from chaoscope.viewer.app import AttractorViewer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chaoscope",
        description="Interactive real-time viewer for chaotic attractors",
    )

    # Simulation
    parser.add_argument(
        "-s", "--system", type=str, default=None,
        choices=[v.value for v in SystemVariant],
        help="Starting system (default: lorenz)",
    )
    parser.add_argument(
        "-n", "--particles", type=int, default=None,
        help="Number of particles, 5-200 (default: 50)",
    )
    parser.add_argument(
        "-t", "--time-scale", type=float, default=None,
        help="Simulation speed multiplier, 0.1-5.0 (default: 1.0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")

    # Window
    parser.add_argument("--width", type=int, default=None, help="Window width (default: 800)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: 600)")
    parser.add_argument("-f", "--fps", type=int, default=None, help="Frame rate cap (default: 60)")
    parser.add_argument("--no-trails", action="store_true", help="Start with trails hidden")
    parser.add_argument("--no-ui", action="store_true", help="Start with the overlay hidden")

    # Config file (individual flags override it)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (individual flags override its values)",
    )

    # Headless
    parser.add_argument(
        "--frames", type=int, default=None,
        help="Run headless for N frames, then exit",
    )
    parser.add_argument(
        "--screenshot", type=Path, default=None,
        help="Save the last headless frame to this PNG path",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    parser.add_argument("--debug", action="store_true", help="Log simulation details")
    return parser


def resolve_config(args: argparse.Namespace) -> ViewerConfig:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else ViewerConfig()

    overrides = {
        "system": args.system,
        "particle_count": args.particles,
        "time_scale": args.time_scale,
        "seed": args.seed,
        "width": args.width,
        "height": args.height,
        "fps": args.fps,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.no_trails:
        overrides["show_trails"] = False
    if args.no_ui:
        overrides["show_ui"] = False

    return replace(config, **overrides).validate()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(resolve_log_level(args.verbose, args.debug))

    if args.config and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    if args.screenshot and args.frames is None:
        print("Error: --screenshot requires --frames", file=sys.stderr)
        sys.exit(1)
    if args.frames is not None and args.frames < 1:
        print(f"Error: --frames must be at least 1, got {args.frames}", file=sys.stderr)
        sys.exit(1)

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    headless = args.frames is not None
    set_component_context("headless" if headless else "viewer")

    viewer = AttractorViewer(config)
    viewer.run(max_frames=args.frames, headless=headless, screenshot=args.screenshot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
