"""Configuration values for the block-fall simulation."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import SHAPES


# Logical dimensions of the playfield.
BOARD_WIDTH = 10
BOARD_HEIGHT = 18

# Size of the occupancy storage.  It is allocated larger than the logical
# board so the cells of a spawned block that poke past the top edge can still
# be recorded when the block fixes.
STORAGE_WIDTH = 25
STORAGE_HEIGHT = 25

# Seconds between automatic downward moves
FALL_INTERVAL = 0.4

# Rows below the top edge where new blocks are centred
SPAWN_DEPTH = 4


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings shared by every simulation step.

    Raises:
        ValueError: If the dimensions are not positive, the storage area is
            smaller than the logical board, the fall interval is not
            positive, the spawn origin lies outside the board or a freshly
            spawned block would have cells outside the storage area.
    """

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    storage_width: int = STORAGE_WIDTH
    storage_height: int = STORAGE_HEIGHT
    fall_interval: float = FALL_INTERVAL
    spawn_depth: int = SPAWN_DEPTH

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.storage_width < self.width or self.storage_height < self.height:
            raise ValueError(
                f"Storage {self.storage_width}x{self.storage_height} is smaller "
                f"than the board {self.width}x{self.height}"
            )
        if self.fall_interval <= 0:
            raise ValueError("Fall interval must be positive")

        ox, oy = self.spawn_origin
        if not 0 <= oy < self.height:
            raise ValueError(
                f"Spawn depth {self.spawn_depth} puts the spawn row {oy} outside "
                f"the board height {self.height}"
            )
        xs = [ox + dx for shape in SHAPES for dx, _ in shape.offsets]
        ys = [oy + dy for shape in SHAPES for _, dy in shape.offsets]
        if min(xs) < 0 or max(xs) >= self.storage_width:
            raise ValueError(
                f"Spawned columns {min(xs)}..{max(xs)} do not fit storage width "
                f"{self.storage_width}"
            )
        if min(ys) < 0 or max(ys) >= self.storage_height:
            raise ValueError(
                f"Spawned rows {min(ys)}..{max(ys)} do not fit storage height "
                f"{self.storage_height}"
            )

    @property
    def spawn_origin(self) -> tuple[int, int]:
        """Return the ``(x, y)`` grid position new blocks are centred on."""

        return self.width // 2, self.height - self.spawn_depth
