"""
Word Tic-Tac-Toe: both players place letters, and the first full line that spells
a dictionary word (read forwards or backwards) wins.
"""

import string
from typing import List

from dictionary import WordDictionary
from game import Board, Move, Player, full_lines
from ui import UI

LETTERS = string.ascii_uppercase


class WordBoard(Board):

    def __init__(self, dictionary: WordDictionary):
        super().__init__(3, 3)
        self.dictionary = dictionary

    @classmethod
    def from_file(cls, path) -> 'WordBoard':
        """Build a board backed by a word list file; raises DictionaryLoadError"""
        return cls(WordDictionary.from_file(path))

    def update_board(self, move: Move) -> bool:
        if not move.is_undo and (len(move.symbol) != 1 or move.symbol.upper() not in LETTERS):
            return False
        return self.place_or_undo(move)

    def available_moves(self, symbol: str) -> List[Move]:
        return [Move(r, c, letter) for r, c in self.empty_cells() for letter in LETTERS]

    def completed_words(self) -> List[str]:
        """Every full line, read forwards"""
        return [''.join(line) for line in full_lines(self.grid) if self.blank not in line]

    def is_win(self, player: Player) -> bool:
        return any(word in self.dictionary for word in self.completed_words())

    def is_draw(self, player: Player) -> bool:
        return self.move_count == 9 and not self.is_win(player)


class WordUI(UI):

    player_symbols = ('-', '-')

    def __init__(self, **kwargs):
        super().__init__("Welcome to Word Tic-Tac-Toe", 3, **kwargs)

    def create_player(self, name, symbol, player_type):
        self.display_message(f"Creating {player_type.value} player: {name}")
        return Player(name, symbol, player_type)

    def get_move(self, player: Player) -> Move:
        if not player.is_human:
            return self.random_move(player)
        row, col = self.read_ints(f"\n{player.name}, please enter your move x and y (0 to 2): ")
        letter = self.read_token("Enter a letter between (A-Z): ", LETTERS)
        return Move(row, col, letter)
