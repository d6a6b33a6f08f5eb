"""Blocks: a placed shape instance with a colour and a lifecycle state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Tuple

from .board import GridPosition
from .catalog import Color, Shape, ShapeKind


class BlockState(str, Enum):
    FALLING = "falling"
    FIXED = "fixed"


@dataclass(frozen=True)
class Cell:
    """One grid square belonging to a block."""

    position: GridPosition
    color: Color


@dataclass(frozen=True)
class Block:
    """Four cells sharing a colour.

    Blocks are immutable; moving or fixing one returns a replacement so a
    transition either happens to all four cells or to none of them.
    """

    kind: ShapeKind
    color: Color
    positions: Tuple[GridPosition, GridPosition, GridPosition, GridPosition]
    state: BlockState = BlockState.FALLING

    @classmethod
    def spawn(cls, shape: Shape, color: Color, origin: GridPosition) -> "Block":
        """Place ``shape`` at ``origin`` as a new falling block."""

        ox, oy = origin
        positions = tuple((ox + dx, oy + dy) for dx, dy in shape.offsets)
        return cls(shape.kind, color, positions)  # type: ignore[arg-type]

    @property
    def falling(self) -> bool:
        return self.state is BlockState.FALLING

    def cells(self) -> Iterator[Cell]:
        for pos in self.positions:
            yield Cell(pos, self.color)

    def moved_down(self) -> "Block":
        """Return this block one row lower."""

        if not self.falling:
            raise ValueError("Fixed blocks cannot move")
        lowered = tuple((x, y - 1) for x, y in self.positions)
        return replace(self, positions=lowered)

    def fixed(self) -> "Block":
        """Return this block in the fixed state."""

        return replace(self, state=BlockState.FIXED)
