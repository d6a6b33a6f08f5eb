"""Headless ASCII demo for the simulation.

Run with: `python -m blockfall`

The simulation is stepped for a number of frames at a fixed frame time and
the resulting board is printed: ``#`` marks fixed cells, ``@`` the falling
block and ``.`` empty squares.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from . import SimulationConfig, SimulationContext, board_snapshot, step
from .config import FALL_INTERVAL


LOGGER = logging.getLogger(__name__)


def format_board(ctx: SimulationContext) -> List[str]:
    """Return the board as one string per row, top row first."""

    height = ctx.config.height
    falling = set(ctx.active.positions) if ctx.active is not None else set()
    lines: List[str] = []
    for r, row in enumerate(board_snapshot(ctx)):
        y = height - 1 - r
        chars = []
        for x, value in enumerate(row):
            if (x, y) in falling:
                chars.append("@")
            else:
                chars.append("#" if value else ".")
        lines.append("".join(chars))
    return lines


def run(frames: int, frame_time: float, config: SimulationConfig, seed: Optional[int]) -> SimulationContext:
    ctx = SimulationContext.start(config, seed)
    for _ in range(frames):
        step(ctx, frame_time)
    LOGGER.info(
        "Ran %d frames: %d block(s) fixed, %d cell(s) occupied",
        ctx.frames,
        len(ctx.fixed),
        ctx.board.occupied_count,
    )
    return ctx


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return value


def _positive_float(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--frames", type=_non_negative_int, default=200, help="frames to simulate")
    parser.add_argument(
        "--frame-time", type=_non_negative_float, default=1 / 60, help="seconds per frame"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--interval", type=_positive_float, default=FALL_INTERVAL, help="seconds between falls"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every spawn and fix")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = SimulationConfig(fall_interval=args.interval)
    ctx = run(args.frames, args.frame_time, config, args.seed)
    for line in format_board(ctx):
        print(line)


if __name__ == "__main__":
    main()
