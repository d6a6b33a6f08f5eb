"""Collision and rendering helpers for the simulation."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .block import Block, Cell
from .board import BoardGrid, GridPosition
from .catalog import Color


def is_cell_blocked(board: BoardGrid, pos: GridPosition, width: int, height: int) -> bool:
    """Return ``True`` if the cell at ``pos`` cannot drop any further.

    Cells outside the ``width`` x ``height`` board never block; there is no
    wall collision.  Inside the board a cell is blocked when it rests on the
    floor (``y == 0``) or directly on an occupied position.
    """

    x, y = pos
    if not (0 <= x < width and 0 <= y < height):
        return False
    return y == 0 or board.is_occupied((x, y - 1))


def can_fall(board: BoardGrid, block: Block, width: int, height: int) -> bool:
    """Return ``True`` unless any one of ``block``'s cells is blocked.

    Only the square directly below each cell is inspected, so a single blocked
    cell halts the whole block.
    """

    return not any(
        is_cell_blocked(board, pos, width, height) for pos in block.positions
    )


def render_grid(
    cells: Iterable[Cell],
    width: int,
    height: int,
    colors: Sequence[Color],
) -> List[List[int]]:
    """Return a ``height`` x ``width`` grid of colour numbers, top row first.

    Each cell receives ``1 + colors.index(color)``; empty squares are ``0``.
    Cells outside the board are skipped; later cells overwrite earlier ones.
    """

    grid = [[0] * width for _ in range(height)]
    for cell in cells:
        x, y = cell.position
        if 0 <= x < width and 0 <= y < height:
            grid[height - 1 - y][x] = colors.index(cell.color) + 1
    return grid
