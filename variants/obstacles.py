"""
Obstacles Tic-Tac-Toe on a 6x6 grid.

After every placement two random free cells turn into permanent obstacles.
Four in a row through the last played cell wins.
"""

from typing import List, Optional, Tuple

from game import Board, Move, Player, RandomSource
from logger import get_logger
from ui import UI

OBSTACLE = '#'
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

log = get_logger(__name__)


class ObstaclesBoard(Board):

    def __init__(self, rng: Optional[RandomSource] = None, obstacles_per_move: int = 2,
                 win_length: int = 4):
        super().__init__(6, 6)
        self.rng = rng or RandomSource()
        self.obstacles_per_move = obstacles_per_move
        self.win_length = win_length
        # Cells that are neither played nor blocked
        self.available: List[Tuple[int, int]] = [
            (r, c) for r in range(self.rows) for c in range(self.cols)]
        self.last_move: Optional[Tuple[int, int]] = None

    def update_board(self, move: Move) -> bool:
        if move.is_undo or not self.is_empty(move.row, move.col):
            return False

        self.grid[move.row, move.col] = move.symbol.upper()
        self.move_count += 1
        self.available.remove((move.row, move.col))
        self.last_move = (move.row, move.col)
        self.place_obstacles()
        return True

    def place_obstacles(self):
        for _ in range(self.obstacles_per_move):
            if not self.available:
                break
            row, col = self.available.pop(self.rng.next_in_range(len(self.available)))
            self.grid[row, col] = OBSTACLE
            log.debug("Obstacle placed at (%d, %d)", row, col)

    def count_direction(self, row: int, col: int, dr: int, dc: int, symbol: str) -> int:
        """Consecutive ``symbol`` cells starting one step away from (row, col)"""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.grid[r, c] == symbol:
            count += 1
            r, c = r + dr, c + dc
        return count

    def is_win(self, player: Player) -> bool:
        if self.last_move is None:
            return False
        row, col = self.last_move
        symbol = player.symbol
        if self.grid[row, col] != symbol:
            return False
        for dr, dc in DIRECTIONS:
            length = (1 + self.count_direction(row, col, dr, dc, symbol)
                      + self.count_direction(row, col, -dr, -dc, symbol))
            if length >= self.win_length:
                return True
        return False

    def is_draw(self, player: Player) -> bool:
        return self.is_full() and not self.is_win(player)


class ObstaclesUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Obstacles Tic-Tac-Toe", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.ask_coordinates(player, 5)
            return Move(row, col, player.symbol)
        return self.random_move(player)
