import itertools

from puyo_rl.game.grid import Color, GameGrid, create_empty_grid
from puyo_rl.game.movement import is_valid_move
from puyo_rl.game.pieces import PuyoPair


def test_validator_matches_bounds_and_occupancy():
    grid = create_empty_grid()
    grid.set(3, 6, Color.RED)
    grid.set(0, 11, Color.GREEN)
    for x, y, orientation in itertools.product(range(-1, 7), range(-1, 13), range(4)):
        pair = PuyoPair(Color.BLUE, Color.YELLOW, x, y, orientation)
        expected = all(
            grid.is_inside(cx, cy) and grid.is_empty(cx, cy) for cx, cy in pair.positions()
        )
        assert is_valid_move(grid, pair) == expected


def test_spawn_orientation_pokes_above_the_grid():
    grid = create_empty_grid()
    assert not is_valid_move(grid, PuyoPair(Color.RED, Color.RED, 2, 0, 0))
    assert is_valid_move(grid, PuyoPair(Color.RED, Color.RED, 2, 1, 0))


def test_rotation_has_no_wall_kick():
    grid = create_empty_grid()
    against_wall = PuyoPair(Color.RED, Color.GREEN, 5, 5, 0)
    assert is_valid_move(grid, against_wall)
    assert not is_valid_move(grid, against_wall.rotated(1))


def test_occupied_second_cell_blocks():
    grid = GameGrid.from_rows(["......"] * 11 + ["..R..."])
    assert not is_valid_move(grid, PuyoPair(Color.BLUE, Color.BLUE, 2, 10, 2))
    assert is_valid_move(grid, PuyoPair(Color.BLUE, Color.BLUE, 2, 10, 0))
