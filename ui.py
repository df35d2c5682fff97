"""
Console UI base class. Each variant pairs its board with a UI subclass that knows
how to ask for that variant's moves.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TextIO, Tuple

from game import Board, Move, Player, PlayerType, RandomSource


class UI(ABC):
    """
    Renders boards, reads moves and sets up players.

    Input and output streams are injectable so games can be scripted in tests.
    """

    player_symbols: Tuple[str, str] = ('X', 'O')
    type_options = (PlayerType.HUMAN, PlayerType.COMPUTER)

    def __init__(self, title: str, cell_width: int = 3,
                 rng: Optional[RandomSource] = None,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        self.title = title
        self.cell_width = cell_width
        self.rng = rng or RandomSource()
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    # ------------------------------------------------------------------ output

    def display_message(self, message: str):
        print(message, file=self.output_stream)

    def display_board(self, board: Board):
        """Display the board with row and column indices"""
        self.display_matrix(board.cells())

    def display_matrix(self, matrix: List[List[str]]):
        if not matrix or not matrix[0]:
            return
        width = self.cell_width
        cols = len(matrix[0])
        header = "   " + "".join(str(j).center(width + 1) for j in range(cols))
        separator = "   " + "-" * ((width + 1) * cols + 1)

        lines = ["", header, separator]
        for i, row in enumerate(matrix):
            lines.append(f"{i:>2} |" + "".join(cell.center(width) + "|" for cell in row))
            lines.append(separator)
        self.display_message("\n".join(lines))

    # ------------------------------------------------------------------- input

    def read_line(self, prompt: str) -> str:
        """Prompt and read one line. Raises EOFError when input is exhausted."""
        print(prompt, end="", file=self.output_stream, flush=True)
        line = self.input_stream.readline()
        if line == "":
            raise EOFError("input exhausted")
        return line.strip()

    def read_ints(self, prompt: str, count: int = 2) -> Tuple[int, ...]:
        """Read ``count`` whitespace-separated integers, re-prompting on bad input"""
        while True:
            tokens = self.read_line(prompt).split()
            try:
                if len(tokens) < count:
                    raise ValueError(f"expected {count} numbers")
                return tuple(int(token) for token in tokens[:count])
            except ValueError:
                noun = "a number" if count == 1 else f"{count} numbers"
                self.display_message(f"Invalid input! Please enter {noun}.")

    def read_token(self, prompt: str, allowed: Sequence[str]) -> str:
        """Read a single upper-cased character from ``allowed``"""
        while True:
            token = self.read_line(prompt).upper()
            if len(token) == 1 and token in allowed:
                return token
            self.display_message("Please enter a valid input.")

    # ----------------------------------------------------------------- players

    def get_player_name(self, label: str) -> str:
        name = self.read_line(f"Enter {label} name: ")
        return name or label

    def get_player_type_choice(self, label: str) -> PlayerType:
        menu = "\n".join(f"{i}. {option.value.capitalize()}"
                         for i, option in enumerate(self.type_options, start=1))
        self.display_message(f"Choose {label} type:\n{menu}")
        while True:
            (choice,) = self.read_ints("Choice: ", 1)
            if 1 <= choice <= len(self.type_options):
                return self.type_options[choice - 1]
            self.display_message("Invalid choice. Try again.")

    def create_player(self, name: str, symbol: str, player_type: PlayerType) -> Player:
        self.display_message(f"Creating {player_type.value} player: {name} ({symbol})")
        return Player(name, symbol, player_type)

    def setup_players(self) -> List[Player]:
        """Ask for both players' names and types and hand out this variant's symbols"""
        players = []
        for i, symbol in enumerate(self.player_symbols, start=1):
            label = f"Player {i}"
            name = self.get_player_name(label)
            player_type = self.get_player_type_choice(label)
            players.append(self.create_player(name, symbol, player_type))
        return players

    # ------------------------------------------------------------------- moves

    def ask_coordinates(self, player: Player, upper: int) -> Tuple[int, int]:
        row, col = self.read_ints(
            f"\n{player.name} ({player.symbol}), please enter your move x and y (0 to {upper}): ")
        return row, col

    def random_move(self, player: Player) -> Move:
        """Uniformly random legal move for a computer player"""
        moves = player.board.available_moves(player.symbol)
        if not moves:
            raise RuntimeError(f"No legal moves left for {player.name}")
        return self.rng.choice(moves)

    @abstractmethod
    def get_move(self, player: Player) -> Move:
        """Produce the next move for ``player``"""
