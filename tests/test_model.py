import random

import pytest

from wuziqi.model import (
    BLACK,
    BOARD_SIZE,
    EMPTY,
    WHITE,
    GameModel,
    GameStatus,
    GameType,
    Move,
)


def _model(game_type=GameType.PERSON, seed=1):
    model = GameModel(random.Random(seed))
    model.start_game(game_type)
    return model


def _fill_playable(model):
    for r in range(1, BOARD_SIZE):
        for c in range(1, BOARD_SIZE):
            model.board[r][c] = WHITE if (r + c) % 2 else BLACK


def test_start_game_clears_board_and_gives_white_the_turn():
    model = _model()
    model.action_by_person(3, 3)
    model.start_game(GameType.BOT)
    assert model.player_flag is True
    assert model.game_type is GameType.BOT
    assert all(cell == EMPTY for line in model.board for cell in line)
    assert len(model.board) == BOARD_SIZE


def test_moves_alternate_colours_and_are_recorded():
    model = _model()
    model.action_by_person(7, 7)
    model.action_by_person(7, 8)
    assert model.board[7][7] == WHITE
    assert model.board[7][8] == BLACK
    assert model.move_history == [
        Move(7, 7, WHITE, False),
        Move(7, 8, BLACK, False),
    ]
    assert model.last_move == (7, 8)
    assert model.player_flag is True


def test_off_board_move_raises():
    model = _model()
    with pytest.raises(IndexError):
        model.update_game_map(BOARD_SIZE, 2)


def test_undo_restores_cell_and_turn():
    model = _model()
    model.action_by_person(4, 4)
    model.action_by_person(5, 5)
    model.game_status = GameStatus.WIN
    move = model.undo()
    assert move == Move(5, 5, BLACK, False)
    assert model.board[5][5] == EMPTY
    assert model.player_flag is False
    assert model.game_status is GameStatus.PLAYING
    model.undo()
    assert model.player_flag is True
    assert model.move_history == []


def test_undo_without_history_raises():
    model = _model()
    with pytest.raises(IndexError):
        model.undo()


def test_horizontal_five_wins_and_four_does_not():
    model = _model()
    for c in range(3, 7):
        model.board[7][c] = WHITE
    assert not model.is_win(7, 5)
    model.board[7][7] = WHITE
    assert all(model.is_win(7, c) for c in range(3, 8))


def test_mixed_line_is_not_a_win():
    model = _model()
    for c in range(3, 8):
        model.board[7][c] = WHITE
    model.board[7][5] = BLACK
    assert not model.is_win(7, 3)


@pytest.mark.parametrize("dr,dc", [(1, 0), (1, 1), (1, -1)])
def test_vertical_and_diagonal_fives_win(dr, dc):
    model = _model()
    cells = [(5 + k * dr, 7 + k * dc) for k in range(5)]
    for r, c in cells:
        model.board[r][c] = BLACK
    assert all(model.is_win(r, c) for r, c in cells)


def test_horizontal_five_touching_column_zero_is_not_a_win():
    model = _model()
    for c in range(0, 5):
        model.board[7][c] = WHITE
    assert not model.is_win(7, 2)


def test_dead_game_needs_every_playable_point():
    model = _model()
    assert not model.is_dead_game()
    _fill_playable(model)
    assert model.is_dead_game()
    model.board[BOARD_SIZE - 1][BOARD_SIZE - 1] = EMPTY
    assert not model.is_dead_game()


def test_empty_board_scores_are_uniform_and_edge_is_zero():
    model = _model(GameType.BOT)
    model.calculate_score()
    interior = {model.scores[r][c] for r in range(1, BOARD_SIZE) for c in range(1, BOARD_SIZE)}
    assert len(interior) == 1
    assert interior.pop() > 0
    assert model.scores[0] == [0] * BOARD_SIZE
    assert all(model.scores[r][0] == 0 for r in range(BOARD_SIZE))


def test_ai_move_lands_on_empty_playable_point():
    model = _model(GameType.BOT, seed=3)
    model.action_by_person(7, 7)
    row, col = model.action_by_ai()
    assert (row, col) != (7, 7)
    assert 0 < row < BOARD_SIZE and 0 < col < BOARD_SIZE
    assert model.board[row][col] == BLACK
    assert model.move_history[-1] == Move(row, col, BLACK, True)
    assert model.player_flag is True
    assert model.last_move == (row, col)


def test_ai_blocks_open_four():
    model = _model(GameType.BOT, seed=5)
    for c in range(3, 7):
        model.board[7][c] = WHITE
    model.player_flag = False
    assert model.action_by_ai() in {(7, 2), (7, 7)}


def test_ai_completes_its_own_four():
    model = _model(GameType.BOT, seed=9)
    for c in range(3, 7):
        model.board[5][c] = BLACK
    model.player_flag = False
    assert model.action_by_ai() in {(5, 2), (5, 7)}


def test_ai_choice_is_reproducible_with_same_seed():
    first = _model(GameType.BOT, seed=42)
    second = _model(GameType.BOT, seed=42)
    first.action_by_person(7, 7)
    second.action_by_person(7, 7)
    assert first.action_by_ai() == second.action_by_ai()


def test_ai_on_full_board_raises():
    model = _model(GameType.BOT)
    _fill_playable(model)
    model.player_flag = False
    with pytest.raises(RuntimeError):
        model.action_by_ai()