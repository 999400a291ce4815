"""Board window: draws the game and feeds pointer and menu input to the controller."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from wuziqi.controller import (
    AI_DELAY_MS,
    BLOCK_SIZE,
    BOARD_MARGIN,
    MARK_SIZE,
    RADIUS,
    WINDOW_SIZE,
    Controller,
    UndoError,
)
from wuziqi.model import BLACK, BOARD_SIZE, EMPTY, WHITE, GameType


@dataclass(frozen=True)
class Shape:
    """One drawing primitive in canvas coordinates (x0, y0, x1, y1)."""

    kind: str
    coords: tuple[int, int, int, int]
    fill: str | None = None
    outline: str = "black"
    width: int = 1


def _center(row: int, col: int) -> tuple[int, int]:
    return BOARD_MARGIN + BLOCK_SIZE * col, BOARD_MARGIN + BLOCK_SIZE * row


def build_scene(controller: Controller) -> list[Shape]:
    """Describe the grid, hover mark, stones and last-move cross to draw."""
    model = controller.model
    far = WINDOW_SIZE - BOARD_MARGIN
    shapes: list[Shape] = []
    for i in range(BOARD_SIZE + 1):
        offset = BOARD_MARGIN + BLOCK_SIZE * i
        shapes.append(Shape("line", (offset, BOARD_MARGIN, offset, far)))
        shapes.append(Shape("line", (BOARD_MARGIN, offset, far, offset)))

    point = controller.hover_point
    if point is not None:
        row, col = point
        if 0 < row < BOARD_SIZE and 0 < col < BOARD_SIZE and model.board[row][col] == EMPTY:
            cx, cy = _center(row, col)
            half = MARK_SIZE // 2
            colour = "white" if model.player_flag else "black"
            shapes.append(
                Shape("rect", (cx - half, cy - half, cx - half + MARK_SIZE, cy - half + MARK_SIZE), fill=colour)
            )

    for row, line in enumerate(model.board):
        for col, stone in enumerate(line):
            if stone in (WHITE, BLACK):
                cx, cy = _center(row, col)
                colour = "white" if stone == WHITE else "black"
                shapes.append(
                    Shape("oval", (cx - RADIUS, cy - RADIUS, cx + RADIUS, cy + RADIUS), fill=colour)
                )

    if model.last_move is not None:
        row, col = model.last_move
        cx, cy = _center(row, col)
        colour = "white" if model.board[row][col] == BLACK else "black"
        arm = RADIUS // 2
        shapes.append(Shape("line", (cx - arm, cy, cx + arm, cy), outline=colour, width=2))
        shapes.append(Shape("line", (cx, cy - arm, cx, cy + arm), outline=colour, width=2))
    return shapes


class BoardWindow:
    """A fixed-size canvas with game-mode and undo menus."""

    def __init__(self, root, controller: Controller) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self.root = root
        self.controller = controller
        self._messagebox = messagebox
        root.title("Wuziqi")
        root.resizable(False, False)

        menubar = tk.Menu(root)
        mode_menu = tk.Menu(menubar, tearoff=False)
        mode_menu.add_command(label="人人对战", command=self._start_pvp)
        mode_menu.add_command(label="人机对战", command=self._start_pve)
        menubar.add_cascade(label="游戏模式切换", menu=mode_menu)
        undo_menu = tk.Menu(menubar, tearoff=False)
        undo_menu.add_command(label="悔棋 (Ctrl+Z)", command=self._undo, accelerator="Ctrl+Z")
        menubar.add_cascade(label="悔棋", menu=undo_menu)
        root.config(menu=menubar)
        root.bind("<Control-z>", lambda _event: self._undo())

        self.canvas = tk.Canvas(root, width=WINDOW_SIZE, height=WINDOW_SIZE, highlightthickness=0)
        self.canvas.pack()
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.redraw()

    def _draw(self) -> None:
        self.canvas.delete("all")
        for shape in build_scene(self.controller):
            if shape.kind == "line":
                self.canvas.create_line(*shape.coords, fill=shape.outline, width=shape.width)
            elif shape.kind == "rect":
                self.canvas.create_rectangle(*shape.coords, fill=shape.fill, outline=shape.outline)
            else:
                self.canvas.create_oval(*shape.coords, fill=shape.fill, outline=shape.outline)

    def redraw(self) -> None:
        """Draw the board, then announce and reset a finished game."""
        self._draw()
        outcome = self.controller.check_outcome()
        if outcome is not None:
            title = "oops" if outcome.name == "DRAW" else "congratulations"
            self._messagebox.showinfo(title, outcome.value, parent=self.root)
            self._draw()

    def _start_pvp(self) -> None:
        self.controller.start_pvp()
        self.redraw()

    def _start_pve(self) -> None:
        self.controller.start_pve()
        self.redraw()

    def _on_motion(self, event) -> None:
        self.controller.hover(event.x, event.y)
        self.redraw()

    def _on_release(self, _event) -> None:
        ai_next = self.controller.release()
        self.redraw()
        if ai_next:
            self.root.after(AI_DELAY_MS, self._ai_turn)

    def _ai_turn(self) -> None:
        model = self.controller.model
        if model.game_type is GameType.BOT and not model.player_flag:
            self.controller.play_ai()
            self.redraw()

    def _undo(self) -> None:
        try:
            self.controller.undo()
        except UndoError as error:
            self._messagebox.showinfo("提示", str(error), parent=self.root)
            return
        self.redraw()


def main(argv: list[str] | None = None) -> int:
    """Open the board window and run until it is closed."""
    argparse.ArgumentParser(prog="wuziqi", description="Play gomoku on a 15x15 board.").parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    BoardWindow(root, Controller())
    root.mainloop()
    return 0