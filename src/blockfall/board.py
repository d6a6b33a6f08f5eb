"""Occupancy grid for fixed cells."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import STORAGE_HEIGHT, STORAGE_WIDTH


GridPosition = Tuple[int, int]

# Indexed ``[x, y]`` so positions read the same way as on the board.
Grid = NDArray[np.bool_]


def create_empty_grid(width: int = STORAGE_WIDTH, height: int = STORAGE_HEIGHT) -> Grid:
    """Return a new storage array with every cell unoccupied."""

    return np.zeros((width, height), dtype=np.bool_)


class BoardGrid:
    """Record of every position a fixed block has covered.

    The storage area is usually larger than the logical board; positions
    inside the storage but outside the logical board are still recorded.
    Once a position is marked it stays occupied.
    """

    def __init__(self, width: int = STORAGE_WIDTH, height: int = STORAGE_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Storage dimensions must be positive")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def _check(self, pos: GridPosition) -> None:
        x, y = pos
        # NumPy would wrap negative indices, so bounds are checked explicitly.
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Position {pos} outside storage {self.width}x{self.height}")

    def is_occupied(self, pos: GridPosition) -> bool:
        """Return ``True`` if a fixed cell was recorded at ``pos``.

        Raises:
            IndexError: If ``pos`` lies outside the allocated storage.
        """

        self._check(pos)
        return bool(self.grid[pos[0], pos[1]])

    def mark_occupied(self, pos: GridPosition) -> None:
        """Mark ``pos`` as occupied.  Marking twice is harmless.

        Raises:
            IndexError: If ``pos`` lies outside the allocated storage.
        """

        self._check(pos)
        self.grid[pos[0], pos[1]] = True

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def occupied_positions(self) -> List[GridPosition]:
        """Return every occupied position sorted by ``(x, y)``."""

        xs, ys = np.nonzero(self.grid)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]
