"""Simulation context and the per-frame step.

A frame runs three sub-steps in a fixed order:

1. the fall timer is advanced by the frame's elapsed time,
2. pending spawn events are drained and, if there were any, a new falling
   block is created,
3. if no block was spawned and the timer completed an interval, the falling
   block either moves down one row or is fixed into the board, which queues
   the next spawn.

All mutable state lives in a single :class:`SimulationContext` passed to each
step.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from .block import Block, Cell
from .board import BoardGrid
from .catalog import RandomSelector
from .config import SimulationConfig
from .events import SpawnQueue
from .timer import FallTimer
from .utils import can_fall, render_grid


LOGGER = logging.getLogger(__name__)


@dataclass
class SimulationContext:
    """Mutable state for one simulation run."""

    config: SimulationConfig = field(default_factory=SimulationConfig)
    selector: RandomSelector = field(default_factory=RandomSelector)
    board: BoardGrid = field(init=False)
    timer: FallTimer = field(init=False)
    spawns: SpawnQueue = field(default_factory=SpawnQueue)
    active: Optional[Block] = None
    fixed: List[Block] = field(default_factory=list)
    frames: int = 0

    def __post_init__(self) -> None:
        self.board = BoardGrid(self.config.storage_width, self.config.storage_height)
        self.timer = FallTimer(self.config.fall_interval)

    @classmethod
    def start(
        cls,
        config: Optional[SimulationConfig] = None,
        rng: Union[random.Random, int, None] = None,
    ) -> "SimulationContext":
        """Return a fresh context with the initial spawn event queued."""

        ctx = cls(config=config or SimulationConfig(), selector=RandomSelector(rng))
        ctx.spawns.push()
        return ctx


def spawn_step(ctx: SimulationContext) -> Optional[Block]:
    """Create a falling block if any spawn event is pending.

    Every pending event is drained but only one block results.  While a block
    is still falling the events stay queued.
    """

    if not ctx.spawns:
        return None
    if ctx.active is not None and ctx.active.falling:
        LOGGER.debug("Deferring %d spawn event(s) behind falling block", ctx.spawns.pending)
        return None

    drained = ctx.spawns.drain()
    shape = ctx.selector.next_shape()
    color = ctx.selector.next_color()
    block = Block.spawn(shape, color, ctx.config.spawn_origin)
    ctx.active = block
    LOGGER.debug(
        "Spawned %s at %s (drained %d event(s))",
        shape.kind.value,
        ctx.config.spawn_origin,
        drained,
    )
    return block


def fix_block(ctx: SimulationContext, block: Block) -> Block:
    """Commit ``block`` to the board and queue the next spawn."""

    fixed = block.fixed()
    for pos in fixed.positions:
        ctx.board.mark_occupied(pos)
    ctx.fixed.append(fixed)
    ctx.active = None
    ctx.spawns.push()
    LOGGER.debug("Fixed %s at %s", fixed.kind.value, list(fixed.positions))
    return fixed


def fall_step(ctx: SimulationContext) -> Optional[Block]:
    """Advance the falling block if the timer has completed an interval.

    Returns the block in its new state, or ``None`` when nothing happened.
    """

    block = ctx.active
    if block is None or not block.falling:
        return None
    if not ctx.timer.consume_if_ready():
        return None

    cfg = ctx.config
    if can_fall(ctx.board, block, cfg.width, cfg.height):
        ctx.active = block.moved_down()
        return ctx.active
    return fix_block(ctx, block)


def step(ctx: SimulationContext, elapsed: float) -> None:
    """Run one frame of the simulation covering ``elapsed`` seconds."""

    ctx.timer.tick(elapsed)
    if spawn_step(ctx) is None:
        fall_step(ctx)
    ctx.frames += 1


def live_cells(ctx: SimulationContext) -> Iterator[Cell]:
    """Yield every fixed cell followed by the falling block's cells."""

    for block in ctx.fixed:
        yield from block.cells()
    if ctx.active is not None:
        yield from ctx.active.cells()


def board_snapshot(ctx: SimulationContext) -> List[List[int]]:
    """Return the logical board as colour numbers, top row first."""

    return render_grid(
        live_cells(ctx), ctx.config.width, ctx.config.height, ctx.selector.colors
    )
