"""Command-line entrypoint.

Owns argument parsing, logging setup and exit codes, then hands a validated
LightingConfiguration to the encoder and (unless dry-running) to the device
transport.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from ..core.backends import DeviceTransport, GkbblTransport, apply_frames
from ..core.colors import resolve_color
from ..core.config.defaults import DEFAULTS
from ..core.errors import PredatorRGBError
from ..core.lighting import Direction, LightingConfiguration, LightingMode, build_configuration
from ..core.preview import render_zone_preview
from ..core.profile import ProfileStore
from ..core.protocol import encode, format_frame
from .interactive import Ask, interactive_mode
from .startup import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    r, g, b = DEFAULTS["color"]
    parser = argparse.ArgumentParser(prog="predator-rgb", description="Control Predator keyboard RGB lighting")
    parser.add_argument(
        "-m",
        "--mode",
        type=str.lower,
        choices=[m.value for m in LightingMode],
        default=DEFAULTS["mode"],
        help="Lighting mode",
    )
    parser.add_argument(
        "-z",
        "--zones",
        default=DEFAULTS["zones"],
        help="Zones (0 for all, 1-4 for specific zones, comma-separated)",
    )
    parser.add_argument("-s", "--speed", type=int, default=DEFAULTS["speed"], help="Lighting speed (0-9)")
    parser.add_argument(
        "-y",
        "--brightness",
        type=int,
        default=DEFAULTS["brightness"],
        help="Brightness percentage (0-100)",
    )
    parser.add_argument(
        "-d",
        "--direction",
        type=str.lower,
        choices=[d.value for d in Direction],
        default=DEFAULTS["direction"],
        help="Lighting direction",
    )
    parser.add_argument("--color", help="Color in #rrggbb, #rgb, rrggbb, or r,g,b format. Overrides -r/-g/-b.")
    parser.add_argument("-r", "--red", type=int, default=r, help="Red component of the color (0-255)")
    parser.add_argument("-g", "--green", type=int, default=g, help="Green component of the color (0-255)")
    parser.add_argument("-b", "--blue", type=int, default=b, help="Blue component of the color (0-255)")
    parser.add_argument("--save", metavar="NAME", help="Save the current configuration as a profile")
    parser.add_argument("--load", metavar="NAME", help="Load a saved profile")
    parser.add_argument("--list", action="store_true", help="List saved profiles and exit")
    parser.add_argument("--dry-run", action="store_true", help="Print the frames instead of writing them")
    parser.add_argument("-i", "--interactive", action="store_true", help="Prompt for every setting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> LightingConfiguration:
    return build_configuration(
        mode=args.mode,
        zones=args.zones,
        speed=args.speed,
        brightness=args.brightness,
        color=resolve_color(args.color, args.red, args.green, args.blue),
        direction=args.direction,
    )


def _print_profiles(store: ProfileStore, out: TextIO) -> None:
    names = list(store.list())
    print("Saved profiles:", file=out)
    for name in names:
        print(f"\t{name}", file=out)


def _apply(
    config: LightingConfiguration,
    *,
    dry_run: bool,
    transport_factory: Callable[[], DeviceTransport],
    out: TextIO,
) -> None:
    print("Configuration:", file=out)
    for line in config.describe():
        print(line, file=out)

    frames = encode(config)

    if not dry_run:
        transport = transport_factory()
        try:
            written = apply_frames(transport, frames, device_name=getattr(transport, "path_for", None))
        finally:
            transport.close()
        logger.debug("Applied %d frame(s)", written)

    print("", file=out)
    print(render_zone_preview(config.zones, config.color), file=out)

    if dry_run:
        print("Device frames:", file=out)
        for frame in frames:
            print(format_frame(frame) + "\n", file=out)


def main(
    argv: Iterable[str] | None = None,
    *,
    transport_factory: Callable[[], DeviceTransport] = GkbblTransport,
    store: Optional[ProfileStore] = None,
    ask: Ask = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    out = out or sys.stdout
    err = err or sys.stderr

    configure_logging(verbose=args.verbose)

    try:
        store = store if store is not None else ProfileStore()

        if args.list:
            _print_profiles(store, out)
            return EXIT_OK

        dry_run = bool(args.dry_run)
        if args.load:
            config = store.load(args.load)
        elif args.interactive:
            result = interactive_mode(ask=ask, out=out, err=err)
            config = result.config
            dry_run = dry_run or result.dry_run
        else:
            config = config_from_args(args)

        if args.save:
            path = store.save(args.save, config)
            print(f"Saved profile '{path.name}'", file=out)

        _apply(config, dry_run=dry_run, transport_factory=transport_factory, out=out)
        return EXIT_OK

    except PredatorRGBError as exc:
        logger.debug("Command failed", exc_info=exc)
        print(f"error: {exc}", file=err)
        return EXIT_ERROR
    except (KeyboardInterrupt, EOFError):
        print("\naborted", file=err)
        return EXIT_INTERRUPTED


def run() -> None:
    sys.exit(main())
