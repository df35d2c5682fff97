"""
5x5 Tic-Tac-Toe scored by sequences.

The game stops after 24 moves (one cell stays empty). Each maximal run of three
or more identical symbols, in any of the four directions, scores ``length - 2``
for its owner. The higher tally wins; equal tallies draw.
"""

from typing import Dict

from game import Board, Move, Player, iter_lines, run_lengths
from ui import UI

FINAL_MOVE = 24
MIN_RUN = 3


class FiveByFiveBoard(Board):

    def __init__(self):
        super().__init__(5, 5)

    def update_board(self, move: Move) -> bool:
        if not move.is_undo and self.move_count >= FINAL_MOVE:
            return False
        return self.place_or_undo(move)

    def tally(self, symbol: str) -> int:
        """Sum of (run length - 2) over every run of ``symbol`` of length 3 or more"""
        return sum(run - (MIN_RUN - 1)
                   for line in iter_lines(self.grid)
                   for run in run_lengths(line, symbol)
                   if run >= MIN_RUN)

    def tallies(self) -> Dict[str, int]:
        return {'X': self.tally('X'), 'O': self.tally('O')}

    def _scores(self, player: Player):
        opponent = 'O' if player.symbol == 'X' else 'X'
        return self.tally(player.symbol), self.tally(opponent)

    def is_win(self, player: Player) -> bool:
        if self.move_count < FINAL_MOVE:
            return False
        mine, theirs = self._scores(player)
        return mine > theirs

    def is_lose(self, player: Player) -> bool:
        if self.move_count < FINAL_MOVE:
            return False
        mine, theirs = self._scores(player)
        return mine < theirs

    def is_draw(self, player: Player) -> bool:
        if self.move_count < FINAL_MOVE:
            return False
        mine, theirs = self._scores(player)
        return mine == theirs


class FiveByFiveUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to 5x5 Tic-Tac-Toe", 3, **kwargs)

    def display_board(self, board: Board):
        super().display_board(board)
        if board.move_count >= FINAL_MOVE:
            for symbol, count in board.tallies().items():
                self.display_message(f"{symbol} has {count} three-in-a-row sequence(s)")

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.ask_coordinates(player, 4)
            return Move(row, col, player.symbol)
        return self.random_move(player)
