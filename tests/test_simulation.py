from blockfall.block import BlockState
from blockfall.catalog import COLORS, ShapeKind, shape_for
from blockfall.config import SimulationConfig
from blockfall.simulation import (
    SimulationContext,
    board_snapshot,
    live_cells,
    step,
)

INTERVAL = 0.4


def test_i_block_lands_on_floor_then_next_block_spawns(scripted_ctx):
    i_shape = shape_for(ShapeKind.I)
    ctx = scripted_ctx(i_shape, COLORS[0], i_shape, COLORS[1])
    step(ctx, 0.0)
    # lowest cell starts at y=13, so 13 moves reach the floor
    for _ in range(13):
        step(ctx, INTERVAL)
    assert ctx.active.positions == ((5, 1), (5, 0), (5, 2), (5, 3))

    step(ctx, INTERVAL)
    assert ctx.active is None
    assert ctx.spawns.pending == 1
    assert ctx.board.occupied_positions() == [(5, 0), (5, 1), (5, 2), (5, 3)]

    step(ctx, INTERVAL)
    assert ctx.active.color == COLORS[1]
    assert ctx.active.positions == ((5, 14), (5, 13), (5, 15), (5, 16))
    assert ctx.spawns.pending == 0


def test_spawned_block_is_not_moved_in_its_spawn_tick(scripted_ctx):
    ctx = scripted_ctx(shape_for(ShapeKind.T), COLORS[4])
    step(ctx, INTERVAL * 2)
    spawned = ctx.active.positions
    assert ctx.timer.ready
    # the pending interval is picked up on the following frame
    step(ctx, 0.0)
    assert ctx.active.positions == tuple((x, y - 1) for x, y in spawned)


def test_second_block_stacks_on_first(scripted_ctx):
    square = shape_for(ShapeKind.SQUARE)
    ctx = scripted_ctx(square, COLORS[0], square, COLORS[1])
    step(ctx, 0.0)
    while ctx.active is not None:
        step(ctx, INTERVAL)
    step(ctx, 0.0)
    while ctx.active is not None:
        step(ctx, INTERVAL)
    assert set(ctx.board.occupied_positions()) == {
        (5, 0), (5, 1), (6, 0), (6, 1),
        (5, 2), (5, 3), (6, 2), (6, 3),
    }


def test_long_run_invariants():
    ctx = SimulationContext.start(rng=2024)
    occupied: set = set()
    for _ in range(3000):
        step(ctx, INTERVAL)
        falling = [b for b in ctx.fixed if b.state is not BlockState.FIXED]
        assert falling == []
        if ctx.active is not None:
            assert ctx.active.falling
            assert len(set(ctx.active.positions)) == 4
        now = set(ctx.board.occupied_positions())
        assert occupied <= now
        occupied = now
    assert len(ctx.fixed) > 10
    for block in ctx.fixed:
        assert len(set(block.positions)) == 4
        assert all(ctx.board.is_occupied(pos) for pos in block.positions)


def test_live_cells_include_fixed_and_falling():
    ctx = SimulationContext.start(rng=5)
    for _ in range(40):
        step(ctx, INTERVAL)
    cells = list(live_cells(ctx))
    expected = 4 * len(ctx.fixed) + (4 if ctx.active is not None else 0)
    assert len(cells) == expected


def test_board_snapshot_orientation(scripted_ctx):
    ctx = scripted_ctx(shape_for(ShapeKind.I), COLORS[2])
    step(ctx, 0.0)
    grid = board_snapshot(ctx)
    assert len(grid) == 18 and all(len(row) == 10 for row in grid)
    # top row is y=17, the I block covers y=13..16 in column 5
    assert grid[0][5] == 0
    assert [grid[17 - y][5] for y in range(13, 17)] == [3, 3, 3, 3]
    assert sum(value != 0 for row in grid for value in row) == 4


def test_custom_config_flows_into_context():
    config = SimulationConfig(width=6, height=8, storage_width=8, storage_height=10, fall_interval=1.0)
    ctx = SimulationContext.start(config, rng=1)
    assert ctx.board.width == 8 and ctx.board.height == 10
    assert ctx.timer.interval == 1.0
    step(ctx, 0.0)
    assert ctx.active is not None
    origin = (3, 4)
    assert origin in ctx.active.positions
    assert ctx.frames == 1
