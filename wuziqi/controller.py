"""Turn handling, pointer hit-testing, undo and end-of-game checks for the board window."""

from __future__ import annotations

from enum import Enum

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

BOARD_MARGIN = 30
RADIUS = 15
MARK_SIZE = 6
BLOCK_SIZE = 40
POS_DELTA = 20
AI_DELAY_MS = 700
WINDOW_SIZE = BOARD_MARGIN * 2 + BLOCK_SIZE * BOARD_SIZE


class Outcome(Enum):
    """How a game ended; the value is the message shown to the players."""

    WHITE_WINS = "white player win!"
    BLACK_WINS = "black player win!"
    DRAW = "dead game!"


class UndoError(Exception):
    """Raised when a move cannot be taken back."""


def _in_playing_area(x: int, y: int) -> bool:
    return (
        BOARD_MARGIN + BLOCK_SIZE // 2 <= x < WINDOW_SIZE - BOARD_MARGIN
        and BOARD_MARGIN + BLOCK_SIZE // 2 <= y < WINDOW_SIZE - BOARD_MARGIN
    )


def hit_test(x: int, y: int) -> tuple[int, int] | None:
    """Return the intersection (row, col) close enough to a pixel, if any."""
    if not _in_playing_area(x, y):
        return None
    col = x // BLOCK_SIZE
    row = y // BLOCK_SIZE
    left = BOARD_MARGIN + BLOCK_SIZE * col
    top = BOARD_MARGIN + BLOCK_SIZE * row
    found = None
    for dr, dc in ((0, 0), (0, 1), (1, 0), (1, 1)):
        dx = x - left - dc * BLOCK_SIZE
        dy = y - top - dr * BLOCK_SIZE
        if dx * dx + dy * dy < POS_DELTA * POS_DELTA:
            found = (row + dr, col + dc)
    return found


def _on_board(point: tuple[int, int]) -> bool:
    row, col = point
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Controller:
    """Connects pointer input to a game model and decides when a game is over."""

    def __init__(self, model: GameModel | None = None) -> None:
        self.model = model if model is not None else GameModel()
        self.game_type = GameType.PERSON
        self.hover_point: tuple[int, int] | None = None
        self.start_pvp()

    def _start(self, game_type: GameType) -> None:
        self.game_type = game_type
        self.model.game_status = GameStatus.PLAYING
        self.model.start_game(game_type)

    def start_pvp(self) -> None:
        """Start a game between two people."""
        self._start(GameType.PERSON)

    def start_pve(self) -> None:
        """Start a game against the computer, which plays black."""
        self._start(GameType.BOT)

    def hover(self, x: int, y: int) -> tuple[int, int] | None:
        """Track the pointer; outside the playing area the last point is kept."""
        if _in_playing_area(x, y):
            self.hover_point = hit_test(x, y)
        return self.hover_point

    def _ai_to_move(self) -> bool:
        return self.model.game_type is GameType.BOT and not self.model.player_flag

    def release(self) -> bool:
        """Place the person's stone at the hovered point; tell whether the computer moves next."""
        if self.game_type is GameType.BOT and not self.model.player_flag:
            return False
        point = self.hover_point
        if point is not None and _on_board(point):
            row, col = point
            if self.model.board[row][col] == EMPTY:
                self.model.action_by_person(row, col)
        return self._ai_to_move()

    def play_ai(self) -> tuple[int, int]:
        """Let the computer move; its point becomes the point checked for a win."""
        point = self.model.action_by_ai()
        self.hover_point = point
        return point

    def undo(self) -> list[Move]:
        """Take back one move between people, or the last pair against the computer."""
        if self.model.game_status is not GameStatus.PLAYING:
            raise UndoError("the game has not started or is already over")
        steps = 1 if self.game_type is GameType.PERSON else 2
        undone: list[Move] = []
        for _ in range(steps):
            if not self.model.move_history:
                break
            undone.append(self.model.undo())
        if not undone:
            raise UndoError("nothing to undo: there are no moves in the history")
        return undone

    def _restart(self) -> None:
        self.model.start_game(self.game_type)
        self.model.game_status = GameStatus.PLAYING

    def check_outcome(self) -> Outcome | None:
        """Detect a win at the checked point or a full board, and start over if so."""
        outcome = None
        point = self.hover_point
        if point is not None:
            row, col = point
            if 0 < row < BOARD_SIZE and 0 < col < BOARD_SIZE:
                stone = self.model.board[row][col]
                if (
                    stone in (WHITE, BLACK)
                    and self.model.is_win(row, col)
                    and self.model.game_status is GameStatus.PLAYING
                ):
                    self.model.game_status = GameStatus.WIN
                    outcome = Outcome.WHITE_WINS if stone == WHITE else Outcome.BLACK_WINS
                    self._restart()
        if self.model.is_dead_game():
            self.model.game_status = GameStatus.DEAD
            outcome = Outcome.DRAW
            self._restart()
        return outcome