"""
Inverse (misere) Tic-Tac-Toe.

Completing three in a row loses. ``is_lose(p)`` is true when ``p`` has a line,
``is_win(p)`` when the opponent has one. A full board without lines is a draw.
"""

from game import Board, Move, Player, has_run
from ui import UI


class InverseBoard(Board):

    def __init__(self):
        super().__init__(3, 3)

    def update_board(self, move: Move) -> bool:
        return self.place_or_undo(move)

    def has_three(self, symbol: str) -> bool:
        return symbol != self.blank and has_run(self.grid, symbol, 3)

    def opponent_symbol(self, symbol: str) -> str:
        """The other symbol on the board, falling back to the X/O pairing"""
        for cell in self.grid.flat:
            if cell != symbol and cell != self.blank:
                return str(cell)
        return 'O' if symbol == 'X' else 'X'

    def would_complete_line(self, symbol: str, row: int, col: int) -> bool:
        """Whether placing ``symbol`` at (row, col) would give it three in a row"""
        trial = self.grid.copy()
        trial[row, col] = symbol
        return has_run(trial, symbol, 3)

    def is_win(self, player: Player) -> bool:
        return self.has_three(self.opponent_symbol(player.symbol))

    def is_lose(self, player: Player) -> bool:
        return self.has_three(player.symbol)

    def is_draw(self, player: Player) -> bool:
        if self.has_three('X') or self.has_three('O'):
            return False
        return self.move_count >= self.rows * self.cols


class InverseUI(UI):
    """Warns humans before a losing move; computers prefer moves that do not lose."""

    def __init__(self, **kwargs):
        super().__init__("Inverse (Misere) Tic-Tac-Toe: avoid three in a row, you lose if you make one.",
                         3, **kwargs)

    def get_move(self, player: Player) -> Move:
        board = player.board
        if not player.is_human:
            moves = board.available_moves(player.symbol)
            safe = [m for m in moves if not board.would_complete_line(player.symbol, m.row, m.col)]
            return self.rng.choice(safe or moves)

        while True:
            row, col = self.ask_coordinates(player, 2)
            if not board.is_empty(row, col):
                self.display_message("Cell occupied or out of range. Try again.")
                continue
            if board.would_complete_line(player.symbol, row, col):
                self.display_message(
                    f"Warning: placing '{player.symbol}' at ({row}, {col}) WILL create "
                    f"three-in-a-row and you will lose.")
                answer = self.read_line("Make this move anyway? (y/n): ")
                if answer.lower() != 'y':
                    self.display_message("Choose a different move.")
                    continue
            return Move(row, col, player.symbol)