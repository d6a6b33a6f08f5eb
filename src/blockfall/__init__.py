"""Falling-block puzzle simulation core."""

from .block import Block, BlockState, Cell
from .board import BoardGrid
from .catalog import COLORS, SHAPES, RandomSelector, Shape, ShapeKind, shape_for
from .config import SimulationConfig
from .events import SpawnQueue
from .simulation import (
    SimulationContext,
    board_snapshot,
    fall_step,
    live_cells,
    spawn_step,
    step,
)
from .timer import FallTimer
from .utils import can_fall, is_cell_blocked, render_grid

__all__ = [
    "Block",
    "BlockState",
    "BoardGrid",
    "Cell",
    "COLORS",
    "FallTimer",
    "RandomSelector",
    "SHAPES",
    "Shape",
    "ShapeKind",
    "SimulationConfig",
    "SimulationContext",
    "SpawnQueue",
    "board_snapshot",
    "can_fall",
    "fall_step",
    "is_cell_blocked",
    "live_cells",
    "render_grid",
    "shape_for",
    "spawn_step",
    "step",
]
