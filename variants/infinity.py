"""
Infinity Tic-Tac-Toe: marks do not stay forever.

After move ``n`` (``n > 1`` and ``(n - 1) % 3 == 0``, i.e. moves 4, 7, 10, ...) the
oldest mark still on the board disappears, whichever symbol it belongs to.
"""

from collections import deque
from typing import Deque, Tuple

from game import Board, Move, Player, has_run
from logger import get_logger
from ui import UI

log = get_logger(__name__)


class InfinityBoard(Board):

    def __init__(self):
        super().__init__(3, 3)
        # Live marks in placement order
        self.placements: Deque[Tuple[int, int]] = deque()

    def update_board(self, move: Move) -> bool:
        if move.is_undo or not self.is_empty(move.row, move.col):
            return False

        self.grid[move.row, move.col] = move.symbol.upper()
        self.move_count += 1
        self.placements.append((move.row, move.col))

        if self.move_count > 1 and (self.move_count - 1) % 3 == 0:
            row, col = self.placements.popleft()
            log.debug("Removing oldest mark %s at (%d, %d)", self.grid[row, col], row, col)
            self.grid[row, col] = self.blank
        return True

    def is_win(self, player: Player) -> bool:
        return has_run(self.grid, player.symbol, 3)

    def is_draw(self, player: Player) -> bool:
        return self.move_count >= 9 and not self.is_win(player)


class InfinityUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Infinity Tic-Tac-Toe", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.ask_coordinates(player, 2)
            return Move(row, col, player.symbol)
        return self.random_move(player)
