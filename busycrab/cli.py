"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .app import BusyCrab
from .config import BusyCrabConfig
from .errors import BusyCrabError
from .motion import get_available_motions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="busycrab",
        description="A utility that prevents sleep and fakes activity to keep your status green",
    )
    parser.add_argument("-i", "--interval", type=int, help="Interval between mouse movements in seconds (default 60)")
    parser.add_argument("-w", "--wiggle", type=int, help="Distance in pixels for mouse movement (default 3)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None,
        help="Display additional information during operation",
    )
    parser.add_argument(
        "-m", "--motion",
        help=f"Select motion animation type ({', '.join(get_available_motions())}; default crab)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> BusyCrabConfig:
    """Defaults, then the config file, then explicit flags."""
    base = BusyCrabConfig.load(args.config)
    return base.merged({
        "interval": args.interval,
        "wiggle": args.wiggle,
        "verbose": args.verbose,
        "motion": args.motion,
    })


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval is not None and args.interval < 0:
        parser.error("argument -i/--interval: must not be negative")
    config = load_config(args)

    logging.basicConfig(
        level=logging.INFO if config.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if config.verbose:
        print("Configuration:")
        print(f"  Interval: {config.interval} seconds")
        print(f"  Wiggle distance: {config.wiggle} pixels")
        print(f"  Motion type: {config.motion}", flush=True)

    try:
        BusyCrab(config).run()
    except BusyCrabError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
