"""Simple pygame front-end for the simulation.

Opens a window sized to the board, feeds each frame's elapsed time into
:func:`blockfall.simulation.step` and draws every live cell.  There is no
player input; Escape or closing the window quits.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

from .board import GridPosition
from .config import BOARD_HEIGHT, BOARD_WIDTH, SimulationConfig
from .simulation import SimulationContext, live_cells, step

# Size of a single board cell in pixels
UNIT_WIDTH = 40
UNIT_HEIGHT = 40
# Frames per second to run the game loop at
FPS = 60

SCREEN_WIDTH = UNIT_WIDTH * BOARD_WIDTH
SCREEN_HEIGHT = UNIT_HEIGHT * BOARD_HEIGHT

BACKGROUND = (0, 0, 0)
OUTLINE = (50, 50, 50)


LOGGER = logging.getLogger(__name__)


def cell_to_pixel(
    pos: GridPosition,
    screen_size: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
) -> Tuple[int, int]:
    """Return the top-left pixel of the square drawn for grid ``pos``.

    Grid ``y`` grows upwards while screen ``y`` grows downwards.  The cell
    centre sits at ``origin + pos * unit`` with the origin half a unit in from
    the bottom-left corner.
    """

    x, y = pos
    _, screen_h = screen_size
    centre_x = UNIT_WIDTH // 2 + x * UNIT_WIDTH
    centre_y = UNIT_HEIGHT // 2 + y * UNIT_HEIGHT
    return centre_x - UNIT_WIDTH // 2, screen_h - centre_y - UNIT_HEIGHT // 2


def draw_cells(screen: pygame.Surface, ctx: SimulationContext) -> None:
    """Render every fixed and falling cell."""

    size = screen.get_size()
    for cell in live_cells(ctx):
        left, top = cell_to_pixel(cell.position, size)
        rect = pygame.Rect(left, top, UNIT_WIDTH, UNIT_HEIGHT)
        pygame.draw.rect(screen, cell.color, rect)
        pygame.draw.rect(screen, OUTLINE, rect, 1)


def main(config: Optional[SimulationConfig] = None, seed: Optional[int] = None) -> None:
    """Open the window and run until it is closed."""

    config = config or SimulationConfig()
    pygame.init()
    screen = pygame.display.set_mode((UNIT_WIDTH * config.width, UNIT_HEIGHT * config.height))
    pygame.display.set_caption("Tetris!")
    clock = pygame.time.Clock()

    ctx = SimulationContext.start(config, seed)
    LOGGER.info("Simulation started")

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        step(ctx, dt)

        screen.fill(BACKGROUND)
        draw_cells(screen, ctx)
        pygame.display.flip()

    pygame.quit()
    LOGGER.info("Simulation stopped after %d frames", ctx.frames)


def cli() -> None:
    """Console entry point: configure logging, then run the window."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    main()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    cli()
