"""Command-line palette explorer.

Generate a palette, relax it with springs, print gradients between two of
its colors, or search for a color at a given luminance.

Examples:
    luma-springs generate --output palette.txt
    luma-springs relax --input palette.txt --steps 200 --lock 0 30
    luma-springs gradient 0 29 --input palette.txt --policy opponent
    luma-springs luminance 240 0.216
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from ..color import SearchPolicy, find_hsl_for_luminance
from ..config import LumaSpringsConfig, load_config, save_config
from ..gradient import GradientPolicy, gradient
from ..logging_config import setup_logging
from ..palette import (
    PALETTE_SIZE,
    PaletteFormatError,
    format_palette,
    generate_palette,
    load_palette,
    save_palette,
)
from ..palette.text_format import format_color
from ..springs import SpringNetwork, connect_all

logger = logging.getLogger(__name__)


def _load_settings(args: argparse.Namespace) -> LumaSpringsConfig:
    if args.config:
        return load_config(Path(args.config))
    return LumaSpringsConfig()


def _load_or_generate(args: argparse.Namespace, config: LumaSpringsConfig):
    if getattr(args, "input", None):
        return load_palette(Path(args.input))
    return generate_palette(config.generator)


def _emit(colors, output: str | None) -> None:
    if output:
        save_palette(colors, Path(output))
        print(f"Saved {len(colors)} colors to {output}")
    else:
        print(format_palette(colors), end="")


def _parse_pair(text: str) -> tuple[int, int]:
    try:
        a, b = text.split(":")
        return int(a), int(b)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'i:j', got {text!r}")


def cmd_generate(args: argparse.Namespace) -> int:
    config = _load_settings(args)
    if args.reference:
        config.generator.target_luminance = None
    _emit(generate_palette(config.generator), args.output)
    return 0


def cmd_relax(args: argparse.Namespace) -> int:
    config = _load_settings(args)
    colors = _load_or_generate(args, config)

    network = SpringNetwork(config.springs)
    if not args.no_default_topology:
        network.build_default_topology()
    added = connect_all(network, args.connect or [])
    logger.info("Relaxing with %d springs (%d extra)", len(network.connections), added)

    locked = frozenset(args.lock or [])
    for index in locked:
        if not 0 <= index < PALETTE_SIZE:
            raise ValueError(f"Locked index out of range: {index}")

    fps = config.fps if args.fps is None else args.fps
    frame_time = 1.0 / fps if fps else 0.0
    for tick in range(args.steps):
        started = time.monotonic()
        colors = network.step(colors, locked)
        if args.verbose:
            print(f"[RELAX] step {tick + 1}/{args.steps}")
        if frame_time:
            time.sleep(max(0.0, frame_time - (time.monotonic() - started)))

    _emit(colors, args.output)
    return 0


def cmd_gradient(args: argparse.Namespace) -> int:
    config = _load_settings(args)
    colors = _load_or_generate(args, config)
    for index in (args.start, args.end):
        if not 0 <= index < len(colors):
            raise ValueError(f"Palette index out of range: {index}")

    steps = config.gradient.intermediate_steps if args.steps is None else args.steps
    policies = [GradientPolicy(args.policy)] if args.policy else list(GradientPolicy)
    for policy in policies:
        print(f"{policy.value}:")
        for color in gradient(colors[args.start], colors[args.end], policy, steps):
            print(f"  {color.rgb.to_hex()}  {format_color(color)}")
    return 0


def cmd_luminance(args: argparse.Namespace) -> int:
    policy = SearchPolicy.CLOSEST if args.closest else SearchPolicy.FIRST_ACCEPTABLE
    color = find_hsl_for_luminance(
        args.hue,
        args.target,
        tolerance=args.tolerance,
        start_saturation=args.start_saturation,
        policy=policy,
    )
    print(format_color(color))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    save_config(LumaSpringsConfig.with_defaults(), Path(args.path))
    print(f"Wrote default config to {args.path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luma-springs",
        description="Explore luminance relationships in a 60-color HSL palette",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("generate", help="Generate a palette")
    p.add_argument("--config", help="YAML config file")
    p.add_argument("--reference", action="store_true",
                   help="Ignore luminance targets and build the reference palette")
    p.add_argument("--output", help="Write the listing here instead of stdout")
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("relax", help="Run spring relaxation steps")
    p.add_argument("--config", help="YAML config file")
    p.add_argument("--input", help="Palette listing to start from")
    p.add_argument("--steps", type=int, default=100)
    p.add_argument("--fps", type=float,
                   help="Steps per second (default from config; 0 = no pacing)")
    p.add_argument("--lock", type=int, nargs="*", help="Indices to hold fixed")
    p.add_argument("--connect", type=_parse_pair, nargs="*", help="Extra springs as i:j")
    p.add_argument("--no-default-topology", action="store_true",
                   help="Start without the default slot chains")
    p.add_argument("--output", help="Write the listing here instead of stdout")
    p.set_defaults(func=cmd_relax)

    p = sub.add_parser("gradient", help="Print gradients between two palette indices")
    p.add_argument("start", type=int)
    p.add_argument("end", type=int)
    p.add_argument("--config", help="YAML config file")
    p.add_argument("--input", help="Palette listing to read colors from")
    p.add_argument("--steps", type=int, help="Intermediate colors")
    p.add_argument("--policy", choices=[policy.value for policy in GradientPolicy])
    p.set_defaults(func=cmd_gradient)

    p = sub.add_parser("luminance", help="Find a color at a hue with a target luminance")
    p.add_argument("hue", type=float)
    p.add_argument("target", type=float)
    p.add_argument("--tolerance", type=float, default=0.005)
    p.add_argument("--start-saturation", type=float, default=0.0)
    p.add_argument("--closest", action="store_true", help="Best match instead of first acceptable")
    p.set_defaults(func=cmd_luminance)

    p = sub.add_parser("config", help="Write a default config file")
    p.add_argument("path")
    p.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the luma-springs command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        return args.func(args)
    except (PaletteFormatError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
