from puyo_rl.game.grid import Color, GameGrid
from puyo_rl.game.resolver import find_groups, resolve_chains
from puyo_rl.game.rules import ScoringRules


EMPTY_ROW = "......"


def board(*bottom_rows):
    """Grid whose last rows are ``bottom_rows``; everything above is empty."""
    return GameGrid.from_rows([EMPTY_ROW] * (12 - len(bottom_rows)) + list(bottom_rows))


def test_score_formula():
    rules = ScoringRules()
    assert rules.score_for_pass(4, 1) == 40
    assert rules.score_for_pass(5, 2) == 105
    assert rules.score_for_pass(8, 3) == 8 * 10 * 4 + 4 * 5
    assert rules.score_for_pass(0, 1) == 0


def test_find_groups_is_orthogonal_only():
    grid = board(
        "R.....",
        ".R....",
        "RR.GG.",
    )
    groups = sorted(sorted(g) for g in find_groups(grid))
    assert sorted(len(g) for g in groups) == [1, 2, 3]
    assert [(0, 9)] in groups
    assert sorted([(1, 10), (1, 11), (0, 11)]) in groups


def test_find_groups_visits_in_row_major_order():
    grid = board("GGRR..")
    groups = find_groups(grid)
    assert groups[0][0] == (0, 11)
    assert groups[1][0] == (2, 11)


def test_l_shape_of_four_clears():
    grid = board(
        "B.....",
        "B.....",
        "BB....",
    )
    result = resolve_chains(grid)
    assert result.grid.occupied_count() == 0
    assert result.chain_depth == 1
    assert result.score_delta == 40
    # caller's grid is not modified
    assert grid.occupied_count() == 4


def test_group_of_three_never_clears():
    grid = board(
        "Y.....",
        "YY....",
    )
    result = resolve_chains(grid)
    assert result.grid == grid
    assert result.chain_depth == 0
    assert result.score_delta == 0
    assert result.steps == []


def test_separate_groups_clear_in_one_pass():
    grid = board(
        "R...G.",
        "R...G.",
        "RR.GG.",
    )
    result = resolve_chains(grid)
    assert result.chain_depth == 1
    assert result.steps[0].cleared == 8
    assert result.score_delta == 8 * 10 + 4 * 5
    assert len(result.steps[0].groups) == 2


def test_gravity_after_clear():
    grid = board(
        ".B....",
        "RRRR..",
    )
    result = resolve_chains(grid)
    assert result.grid.to_rows()[-1] == ".B...."
    assert result.grid.occupied_count() == 1


def test_cascade_resolves_two_chains():
    grid = board(
        ".G....",
        ".R....",
        "GR....",
        "GR....",
        "GR....",
    )
    seen = []
    result = resolve_chains(grid, on_pass=seen.append)
    assert result.chain_depth == 2
    assert [step.chain for step in result.steps] == [1, 2]
    assert [step.cleared for step in result.steps] == [4, 4]
    assert result.score_delta == 40 + 80
    assert result.grid.occupied_count() == 0
    assert seen == result.steps


def test_cascade_with_group_bonus_in_second_chain():
    grid = board(
        ".Y....",
        ".B....",
        "YB....",
        "YB....",
        "YBY...",
    )
    result = resolve_chains(grid)
    # pass 1: four blues; pass 2: yellow drops in, joining five yellows
    assert [step.cleared for step in result.steps] == [4, 5]
    assert result.steps[1].points == 105
    assert result.score_delta == 145
    assert result.cleared_total == 9
