"""Command-line entry point for gridtactics.

Examples:

    gridtactics list
    gridtactics render corner --from 0,0 --to 3,3
    gridtactics check corner --to 3,3 --distance 100

``check`` exits 0 when the move is legal, 1 when it is not and 2 on errors.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from gridtactics.config import Config
from gridtactics.environment import (
    GridCoordinate,
    OutOfBoundsError,
    render_level_ascii,
    validate_grid_move,
)
from gridtactics.level import LevelLoader
from gridtactics.logging_utils import log_error, log_info, log_success
from gridtactics.movement_rules import MovementRules


def parse_cell(text: str) -> GridCoordinate:
    """Parse ``"row,col"`` into a coordinate."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL but got '{text}'")
    try:
        return GridCoordinate(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid cell '{text}': {exc}") from exc


def non_negative_int(text: str) -> int:
    """Parse a movement budget, which can never be negative."""
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid budget '{text}'") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"Budget must be non-negative, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gridtactics",
        description="Tactical movement checks on square grid levels",
    )
    parser.add_argument(
        "--levels-dir",
        type=Path,
        default=None,
        help=f"Directory holding level JSON files (default: {Config.LEVELS_DIR})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available levels")

    render = sub.add_parser("render", help="Print a level as an ASCII grid")
    render.add_argument("level", help="Level name (file name without .json)")
    render.add_argument("--from", dest="start", type=parse_cell, default=None, help="Mark a start cell")
    render.add_argument("--to", dest="destination", type=parse_cell, default=None, help="Mark a destination cell")

    check = sub.add_parser("check", help="Check whether a move is legal")
    check.add_argument("level", help="Level name (file name without .json)")
    check.add_argument(
        "--from",
        dest="start",
        type=parse_cell,
        default=None,
        help="Start cell ROW,COL (default: the player's position)",
    )
    check.add_argument("--to", dest="destination", type=parse_cell, required=True, help="Destination cell ROW,COL")
    check.add_argument(
        "--distance",
        type=non_negative_int,
        default=None,
        help="Movement budget (default: the player's movement + movement_mod)",
    )

    return parser.parse_args(argv)


def _run_check(args: argparse.Namespace, loader: LevelLoader) -> int:
    level = loader.load(args.level)
    grid = level.to_grid()
    start = args.start or GridCoordinate.coerce(level.player.position)
    budget = args.distance
    if budget is None:
        budget = MovementRules().movement_budget(level.player)

    if not grid.in_bounds(start):
        raise OutOfBoundsError(f"Start {start} is outside the {grid.dimension}x{grid.dimension} grid")

    if validate_grid_move(grid, start, args.destination, max_distance=budget):
        log_success(f"{start} -> {args.destination} within {budget}: reachable")
        print("reachable")
        return 0

    log_info(f"{start} -> {args.destination} within {budget}: unreachable")
    print("unreachable")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    loader = LevelLoader(args.levels_dir)

    try:
        if args.command == "list":
            for name in loader.list_levels():
                print(name)
            return 0

        if args.command == "render":
            level = loader.load(args.level)
            print(render_level_ascii(level.to_grid(), start=args.start, destination=args.destination))
            return 0

        return _run_check(args, loader)
    except (FileNotFoundError, ValueError, ValidationError, json.JSONDecodeError) as exc:
        log_error(str(exc))
        return 2


if __name__ == "__main__":
    sys.exit(main())
