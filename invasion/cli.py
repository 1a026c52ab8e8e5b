"""Command-line driver for the invasion.

Example usage:

    invasion 1748
    invasion -i 12
    invasion --seed 42 --world-in world.txt --world-out after.txt 5

Reads the world, runs the invasion printing every event (pausing after each
one in interactive mode) and writes what is left of the world.
"""

from __future__ import annotations

import argparse
import random
from typing import Callable, List, Optional

from .config import Config
from .engine import Invasion
from .logging_utils import (
    Color,
    MARKER_OFF,
    MARKER_ON,
    colored,
    log_error,
    log_event,
    log_info,
    log_success,
)
from .world import WorldFormatError, read_world, write_world

EXIT_BAD_ALIEN_COUNT = 1
EXIT_WORLD_READ_FAILED = 2
EXIT_STDIN_FAILED = 3
EXIT_INVASION_INVALID = 4
EXIT_WORLD_WRITE_FAILED = 5


class StdinUnavailableError(Exception):
    """Raised when interactive mode cannot read the confirmation from stdin."""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="invasion",
        description="Mad aliens invade a world of cities.",
        epilog="Examples:\n  invasion 1748\n  invasion -i 12",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("aliens", nargs="?", help="Number of aliens (prompted for when omitted)")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Run the invasion interactively, step by step",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--world-in", default=None, help=f"World file to read (default: {Config.WORLD_IN})")
    parser.add_argument("--world-out", default=None, help=f"World file to write (default: {Config.WORLD_OUT})")
    parser.add_argument("--show-config", action="store_true", help="Print the configuration and exit")
    return parser.parse_args(argv)


def _read_alien_count(raw: Optional[str], prompt: Callable[[str], str]) -> int:
    if raw is None:
        raw = prompt("Please specify the number of 👽 aliens: ")
    return int(raw.strip())


def _event_sink(interactive: bool, prompt: Callable[[str], str]) -> Callable[[str], None]:
    def on_event(event: str) -> None:
        log_event(event)
        if interactive:
            try:
                prompt(colored("↵ Press 'Enter' to continue ...", Color.GREEN))
            except (EOFError, OSError) as exc:
                raise StdinUnavailableError(f"Failed to read from stdin: {exc}") from exc

    return on_event


def run_cli(args: argparse.Namespace, prompt: Callable[[str], str] = input) -> int:
    """Run the invasion described by ``args``; return the process exit code."""
    if args.show_config:
        log_info(Config.display())
        return 0

    try:
        number_of_aliens = _read_alien_count(args.aliens, prompt)
    except (ValueError, EOFError) as exc:
        log_error(f"Failed to read the number of 👽 aliens: {exc}")
        return EXIT_BAD_ALIEN_COUNT

    if number_of_aliens == 0:
        print("Zero 👽 aliens => no invasion! 🎉")
        return 0

    mode = colored(MARKER_ON, Color.GREEN) if args.interactive else colored(MARKER_OFF, Color.RED)
    print(f"Interactive mode: {mode}")

    world_in = args.world_in or Config.WORLD_IN
    try:
        world = read_world(world_in)
    except (OSError, WorldFormatError) as exc:
        log_error(f"Failed to read world from file '{world_in}': {exc}")
        return EXIT_WORLD_READ_FAILED

    try:
        seed = args.seed if args.seed is not None else Config.seed()
        invasion = Invasion(
            world,
            number_of_aliens,
            _event_sink(args.interactive, prompt),
            rng=random.Random(seed),
        )
    except ValueError as exc:
        # Invalid invasion arguments and a malformed INVASION_SEED both land here.
        log_error(f"Failed to create invasion: {exc}")
        return EXIT_INVASION_INVALID

    try:
        invasion.run()
    except StdinUnavailableError as exc:
        log_error(str(exc))
        return EXIT_STDIN_FAILED

    world_out = args.world_out or Config.WORLD_OUT
    try:
        write_world(invasion.world, world_out)
    except OSError as exc:
        log_error(f"Failed to write world to file '{world_out}': {exc}")
        return EXIT_WORLD_WRITE_FAILED

    log_success("🏁 The End.")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(run_cli(parse_args(argv)))


if __name__ == "__main__":
    main()
