"""
Numerical Tic-Tac-Toe.

Players write digits instead of marks. The first player uses the odd digits
(1, 3, 5, 7, 9), the second the even ones (2, 4, 6, 8); each digit can be played
once per game. A full line whose digits add up to 15 wins.
"""

from typing import List, Set

from game import Board, Move, Player, full_lines
from ui import UI

ODD_DIGITS = "13579"
EVEN_DIGITS = "2468"
TARGET_SUM = 15


class NumericalBoard(Board):
    """
    Whose turn it is follows from the move counter: even counts are the odd-digit
    player's turn. Used digits are read back from the grid, so undo frees a digit.
    """

    def __init__(self):
        super().__init__(3, 3)

    def used_digits(self) -> Set[str]:
        return {str(cell) for cell in self.grid.flat if cell != self.blank}

    def allowed_digits(self) -> List[str]:
        """Digits the player to move may still write"""
        pool = ODD_DIGITS if self.move_count % 2 == 0 else EVEN_DIGITS
        used = self.used_digits()
        return [d for d in pool if d not in used]

    def update_board(self, move: Move) -> bool:
        if not move.is_undo and move.symbol not in self.allowed_digits():
            return False
        return self.place_or_undo(move)

    def available_moves(self, symbol: str) -> List[Move]:
        return [Move(r, c, digit)
                for r, c in self.empty_cells()
                for digit in self.allowed_digits()]

    def is_win(self, player: Player) -> bool:
        for line in full_lines(self.grid):
            if self.blank in line:
                continue
            if sum(int(cell) for cell in line) == TARGET_SUM:
                return True
        return False

    def is_draw(self, player: Player) -> bool:
        return self.move_count == 9 and not self.is_win(player)


class NumericalUI(UI):
    """
    Player 1 (odd digits) is shown as O, player 2 (even digits) as X.
    ``used_digits`` mirrors the digits already on the board for input validation.
    """

    player_symbols = ('O', 'X')

    def __init__(self, **kwargs):
        super().__init__("Welcome to Numerical Tic-Tac-Toe", 3, **kwargs)
        self.used_digits: Set[str] = set()

    def get_move(self, player: Player) -> Move:
        board = player.board
        self.used_digits = board.used_digits()

        if not player.is_human:
            return self.random_move(player)

        pool = ODD_DIGITS if player.symbol == self.player_symbols[0] else EVEN_DIGITS
        allowed = [d for d in pool if d not in self.used_digits]
        row, col = self.ask_coordinates(player, 2)
        digit = self.read_token(f"Please enter a number ({', '.join(allowed)}): ", allowed)
        return Move(row, col, digit)
