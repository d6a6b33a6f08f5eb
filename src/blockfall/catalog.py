"""Shape and colour catalogs plus the random selector drawing from them.

Every block is one of seven four-cell shapes.  A shape is stored as the
``(dx, dy)`` offsets of its cells relative to the block's origin, with ``y``
pointing up the board.  Colours are plain RGB triples so front-ends can hand
them straight to their drawing API.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

Offset = Tuple[int, int]
Color = Tuple[int, int, int]


class ShapeKind(str, Enum):
    """Names of the seven catalog shapes."""

    I = "I"
    L = "L"
    MIRRORED_L = "mirrored-L"
    Z = "Z"
    MIRRORED_Z = "mirrored-Z"
    SQUARE = "square"
    T = "T"


@dataclass(frozen=True)
class Shape:
    """Four relative cell offsets making up a block."""

    kind: ShapeKind
    offsets: Tuple[Offset, Offset, Offset, Offset]

    def __post_init__(self) -> None:
        if len(self.offsets) != 4 or len(set(self.offsets)) != 4:
            raise ValueError(f"{self.kind.value} needs four distinct offsets")


SHAPES: Tuple[Shape, ...] = (
    Shape(ShapeKind.I, ((0, 0), (0, -1), (0, 1), (0, 2))),
    Shape(ShapeKind.L, ((0, 0), (0, -1), (0, 1), (-1, 1))),
    Shape(ShapeKind.MIRRORED_L, ((0, 0), (0, -1), (0, 1), (1, 1))),
    Shape(ShapeKind.Z, ((0, 0), (0, -1), (1, 0), (1, 1))),
    Shape(ShapeKind.MIRRORED_Z, ((0, 0), (1, 0), (0, 1), (1, -1))),
    Shape(ShapeKind.SQUARE, ((0, 0), (0, 1), (1, 0), (1, 1))),
    Shape(ShapeKind.T, ((0, 0), (-1, 0), (1, 0), (0, 1))),
)

SHAPES_BY_KIND = {shape.kind: shape for shape in SHAPES}

COLORS: Tuple[Color, ...] = (
    (64, 230, 100),
    (220, 64, 90),
    (70, 150, 210),
    (220, 230, 70),
    (35, 220, 241),
    (240, 140, 70),
)


def shape_for(kind: ShapeKind) -> Shape:
    """Return the catalog shape named ``kind``."""

    return SHAPES_BY_KIND[kind]


class RandomSelector:
    """Draw shapes and colours uniformly, with replacement.

    Parameters
    ----------
    rng:
        Either a ready ``random.Random`` (or anything with a compatible
        ``choice`` method) or an integer seed.  ``None`` seeds from the
        operating system.
    shapes, colors:
        Catalogs to draw from.  Both must be non-empty.
    """

    def __init__(
        self,
        rng: Union[random.Random, int, None] = None,
        *,
        shapes: Sequence[Shape] = SHAPES,
        colors: Sequence[Color] = COLORS,
    ) -> None:
        if not shapes or not colors:
            raise ValueError("Catalogs must not be empty")
        if rng is None or isinstance(rng, int):
            rng = random.Random(rng)
        self._rng = rng
        self.shapes = tuple(shapes)
        self.colors = tuple(colors)

    def next_shape(self) -> Shape:
        return self._rng.choice(self.shapes)

    def next_color(self) -> Color:
        return self._rng.choice(self.colors)
