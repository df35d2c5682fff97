"""
Diamond Tic-Tac-Toe.

Played on the 13 cells of a 5x5 grid with ``|r - 2| + |c - 2| <= 2``. A player
wins by owning, at the same time, a full line of length 3 and a full line of
length 4 that run in different directions. The two lines may share one cell.
"""

from dataclasses import dataclass
from typing import List, Tuple

from game import VOID, Board, Move, Player
from ui import UI

# Direction ids: 0 horizontal, 1 vertical, 2 main diagonal, 3 anti diagonal
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
CENTER = 2
RADIUS = 2


@dataclass(frozen=True)
class Line:
    coords: Tuple[Tuple[int, int], ...]
    direction: int


def is_diamond_cell(row: int, col: int) -> bool:
    return abs(row - CENTER) + abs(col - CENTER) <= RADIUS


class DiamondBoard(Board):

    def __init__(self):
        super().__init__(5, 5)
        for r in range(self.rows):
            for c in range(self.cols):
                if not is_diamond_cell(r, c):
                    self.grid[r, c] = VOID
        self.valid_cell_count = sum(
            1 for r in range(self.rows) for c in range(self.cols) if is_diamond_cell(r, c))
        self.lines3 = self._precompute_lines(3)
        self.lines4 = self._precompute_lines(4)

    def is_playable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and is_diamond_cell(row, col)

    def _precompute_lines(self, length: int) -> List[Line]:
        """Every line of ``length`` diamond cells, deduplicated, in scan order"""
        lines: List[Line] = []
        seen = set()
        for r in range(self.rows):
            for c in range(self.cols):
                for direction, (dr, dc) in enumerate(DIRECTIONS):
                    coords = tuple((r + k * dr, c + k * dc) for k in range(length))
                    if not all(self.is_playable(rr, cc) for rr, cc in coords):
                        continue
                    line = Line(coords, direction)
                    if line not in seen:
                        seen.add(line)
                        lines.append(line)
        return lines

    def update_board(self, move: Move) -> bool:
        return self.place_or_undo(move)

    def _owns(self, line: Line, symbol: str) -> bool:
        return all(self.grid[r, c] == symbol for r, c in line.coords)

    def has_winning_pair(self, symbol: str) -> bool:
        three_dirs = {line.direction for line in self.lines3 if self._owns(line, symbol)}
        four_dirs = {line.direction for line in self.lines4 if self._owns(line, symbol)}
        return any(d3 != d4 for d3 in three_dirs for d4 in four_dirs)

    def is_win(self, player: Player) -> bool:
        return self.has_winning_pair(player.symbol)

    def is_draw(self, player: Player) -> bool:
        if self.move_count < self.valid_cell_count:
            return False
        return not self.has_winning_pair('X') and not self.has_winning_pair('O')


class DiamondUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Diamond Tic-Tac-Toe", 3, **kwargs)

    def display_matrix(self, matrix):
        """Borderless rendering, so the void corners leave a diamond of cells"""
        lines = ["", "    " + " ".join(str(c).center(self.cell_width) for c in range(len(matrix[0])))]
        for r, row in enumerate(matrix):
            cells = " ".join(cell.center(self.cell_width) for cell in row)
            lines.append(f"{r:>3} {cells}")
        self.display_message("\n".join(lines))

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.read_ints(f"{player.name} ({player.symbol}) enter move (row col): ")
            return Move(row, col, player.symbol)
        return self.random_move(player)
