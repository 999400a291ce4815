"""Game state, move history, win detection and the scoring AI for gomoku."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 15

EMPTY = 0
WHITE = 1
BLACK = -1

_DIRECTIONS = [(y, x) for y in (-1, 0, 1) for x in (-1, 0, 1) if (y, x) != (0, 0)]
_WIN_LINES = [(0, 1), (1, 0), (-1, 1), (1, 1)]


class GameType(Enum):
    """Two people at one board, or a person against the computer."""

    PERSON = "person"
    BOT = "bot"


class GameStatus(Enum):
    """Whether a game is running, has been won or has ended in a draw."""

    PLAYING = "playing"
    WIN = "win"
    DEAD = "dead"


@dataclass(frozen=True)
class Move:
    """One stone placed on the board."""

    row: int
    col: int
    color: int
    is_ai: bool


def _playable(row: int, col: int) -> bool:
    return 0 < row < BOARD_SIZE and 0 < col < BOARD_SIZE


class GameModel:
    """Board of stones (0 empty, 1 white, -1 black) and the rules around it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.game_type = GameType.PERSON
        self.game_status = GameStatus.PLAYING
        self.player_flag = True
        self.board: list[list[int]] = self._empty_grid()
        self.scores: list[list[int]] = self._empty_grid()
        self.move_history: list[Move] = []
        self.last_move: tuple[int, int] | None = None

    @staticmethod
    def _empty_grid() -> list[list[int]]:
        return [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def start_game(self, game_type: GameType) -> None:
        """Clear the board and give the first move to white."""
        self.game_type = game_type
        self.board = self._empty_grid()
        if game_type is GameType.BOT:
            self.scores = self._empty_grid()
        self.player_flag = True

    def update_game_map(self, row: int, col: int) -> None:
        """Place the current player's stone, record it and pass the turn."""
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"point ({row}, {col}) is off the board")
        color = WHITE if self.player_flag else BLACK
        is_ai = self.game_type is GameType.BOT and not self.player_flag
        self.move_history.append(Move(row, col, color, is_ai))
        self.board[row][col] = color
        self.player_flag = not self.player_flag
        self.last_move = (row, col)

    def undo(self) -> Move:
        """Take back the last stone and return it."""
        if not self.move_history:
            raise IndexError("no moves to undo")
        move = self.move_history.pop()
        self.board[move.row][move.col] = EMPTY
        self.player_flag = move.color == WHITE
        self.game_status = GameStatus.PLAYING
        return move

    def action_by_person(self, row: int, col: int) -> None:
        """Place a stone for the person whose turn it is."""
        self.update_game_map(row, col)

    def action_by_ai(self) -> tuple[int, int]:
        """Place the computer's stone on a best-scoring point and return it."""
        self.calculate_score()
        max_score = 0
        best: list[tuple[int, int]] = []
        for row in range(1, BOARD_SIZE):
            for col in range(1, BOARD_SIZE):
                if self.board[row][col] != EMPTY:
                    continue
                score = self.scores[row][col]
                if score > max_score:
                    max_score = score
                    best = [(row, col)]
                elif score == max_score:
                    best.append((row, col))
        if not best:
            raise RuntimeError("no empty point left for the computer")
        row, col = self.rng.choice(best)
        self.update_game_map(row, col)
        return row, col

    def _run(self, row: int, col: int, dy: int, dx: int, stone: int) -> tuple[int, int]:
        """Count stones of one colour along a ray, and whether it ends on an empty point."""
        count = 0
        for i in range(1, 5):
            r, c = row + i * dy, col + i * dx
            if not _playable(r, c):
                break
            value = self.board[r][c]
            if value == stone:
                count += 1
            elif value == EMPTY:
                return count, 1
            else:
                break
        return count, 0

    def calculate_score(self) -> None:
        """Rate every empty point by the lines it blocks and the lines it extends."""
        self.scores = self._empty_grid()
        for row in range(1, BOARD_SIZE):
            for col in range(1, BOARD_SIZE):
                if self.board[row][col] != EMPTY:
                    continue
                total = 0
                for y, x in _DIRECTIONS:
                    ahead, open_ahead = self._run(row, col, y, x, WHITE)
                    behind, open_behind = self._run(row, col, -y, -x, WHITE)
                    total += self._block_score(ahead + behind, open_ahead + open_behind)

                    # The forward ray of the computer's own line counts white stones.
                    ahead, open_ahead = self._run(row, col, y, x, WHITE)
                    behind, open_behind = self._run(row, col, -y, -x, BLACK)
                    total += self._extend_score(ahead + behind, open_ahead + open_behind)
                self.scores[row][col] = total

    @staticmethod
    def _block_score(count: int, empty: int) -> int:
        if count == 1:
            return 10
        if count == 2:
            return {1: 30, 2: 40}.get(empty, 0)
        if count == 3:
            return {1: 60, 2: 110}.get(empty, 0)
        if count == 4:
            return 10100
        return 0

    @staticmethod
    def _extend_score(count: int, empty: int) -> int:
        if count == 0:
            return 5
        if count == 1:
            return 10
        if count == 2:
            return {1: 25, 2: 50}.get(empty, 0)
        if count == 3:
            return {1: 55, 2: 100}.get(empty, 0)
        return 10000

    def is_win(self, row: int, col: int) -> bool:
        """Tell whether five equal stones in a line pass through the point."""
        for dr, dc in _WIN_LINES:
            for i in range(5):
                start_r, start_c = row - i * dr, col - i * dc
                cells = [(start_r + k * dr, start_c + k * dc) for k in range(5)]
                if dr and not all(0 < r < BOARD_SIZE for r, _ in cells):
                    continue
                if dc and not all(0 < c < BOARD_SIZE for _, c in cells):
                    continue
                first = self.board[cells[0][0]][cells[0][1]]
                if all(self.board[r][c] == first for r, c in cells[1:]):
                    return True
        return False

    def is_dead_game(self) -> bool:
        """Tell whether every playable point holds a stone."""
        return all(
            self.board[r][c] in (WHITE, BLACK)
            for r in range(1, BOARD_SIZE)
            for c in range(1, BOARD_SIZE)
        )