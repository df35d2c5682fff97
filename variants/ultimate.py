"""
Ultimate Tic-Tac-Toe.

A 9x9 grid made of nine 3x3 sub-boards, addressed with global coordinates 0..8.
Winning a sub-board claims its square on the 3x3 ``winners`` grid; a sub-board
that fills up without a line is marked drawn and takes no further moves. Three
claimed squares in a row on ``winners`` win the game.
"""

import numpy as np

from game import Board, Move, Player, has_run
from logger import get_logger
from ui import UI

DRAWN = 'D'
SUB = 3

log = get_logger(__name__)


class UltimateBoard(Board):

    def __init__(self):
        super().__init__(9, 9)
        self.winners = np.full((SUB, SUB), self.blank, dtype='<U1')

    def sub_board(self, br: int, bc: int) -> np.ndarray:
        return self.grid[br * SUB:(br + 1) * SUB, bc * SUB:(bc + 1) * SUB]

    def is_decided(self, br: int, bc: int) -> bool:
        return self.winners[br, bc] != self.blank

    def update_board(self, move: Move) -> bool:
        if move.is_undo or not self.is_empty(move.row, move.col):
            return False
        br, bc = move.row // SUB, move.col // SUB
        if self.is_decided(br, bc):
            return False

        symbol = move.symbol.upper()
        self.grid[move.row, move.col] = symbol
        self.move_count += 1

        cells = self.sub_board(br, bc)
        if has_run(cells, symbol, SUB):
            self.winners[br, bc] = symbol
            log.debug("%s takes sub-board (%d, %d)", symbol, br, bc)
        elif not (cells == self.blank).any():
            self.winners[br, bc] = DRAWN
            log.debug("Sub-board (%d, %d) drawn", br, bc)
        return True

    def available_moves(self, symbol: str):
        return [Move(r, c, symbol) for r, c in self.empty_cells()
                if not self.is_decided(r // SUB, c // SUB)]

    def claims_line(self, symbol: str) -> bool:
        if symbol in (self.blank, DRAWN):
            return False
        return has_run(self.winners, symbol, SUB)

    def is_win(self, player: Player) -> bool:
        return self.claims_line(player.symbol)

    def is_lose(self, player: Player) -> bool:
        opponent = 'O' if player.symbol == 'X' else 'X'
        return self.claims_line(opponent)

    def is_draw(self, player: Player) -> bool:
        if self.claims_line('X') or self.claims_line('O'):
            return False
        return bool((self.winners != self.blank).all())


class UltimateUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Ultimate Tic-Tac-Toe", 1, **kwargs)

    def display_board(self, board: Board):
        """9x9 grid with heavier separators between sub-boards, then the winners grid"""
        matrix = board.cells()
        header = "    " + "".join(
            f"{c:>2}" + (" |" if c % SUB == SUB - 1 and c != board.cols - 1 else " ")
            for c in range(board.cols))
        lines = ["", header]
        for r, row in enumerate(matrix):
            cells = "".join(
                f" {cell}" + (" |" if c % SUB == SUB - 1 and c != board.cols - 1 else " ")
                for c, cell in enumerate(row))
            lines.append(f"{r:>3} {cells}")
            if r % SUB == SUB - 1 and r != board.rows - 1:
                lines.append("    " + "-" * (board.cols * 3 + 4))
        lines.append("Sub-board winners:")
        lines.extend("  " + " ".join(row) for row in board.winners.tolist())
        self.display_message("\n".join(lines))

    def get_move(self, player: Player) -> Move:
        if not player.is_human:
            return self.random_move(player)
        while True:
            row, col = self.read_ints(f"{player.name} ({player.symbol}) enter move (row col) [0-8]: ")
            if 0 <= row <= 8 and 0 <= col <= 8:
                return Move(row, col, player.symbol)
            self.display_message("Coordinates out of range. Use values 0..8.")
