"""
Shared game engine: moves, players, the abstract board contract and the turn loop
that drives every Tic-Tac-Toe variant.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from logger import get_logger

BLANK = '.'
VOID = ' '

log = get_logger(__name__)


@dataclass(frozen=True)
class Move:
    """A single placement request. A ``None`` symbol asks the board to undo a cell."""
    row: int
    col: int
    symbol: Optional[str]

    @classmethod
    def undo(cls, row: int, col: int) -> 'Move':
        return cls(row, col, None)

    @property
    def is_undo(self) -> bool:
        return self.symbol is None


class PlayerType(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class Player:
    """A participant in one game. ``board`` is attached by the GameManager."""

    def __init__(self, name: str, symbol: str, player_type: PlayerType = PlayerType.HUMAN):
        self.name = name
        self.symbol = symbol
        self.player_type = player_type
        self.board: Optional['Board'] = None

    @property
    def is_human(self) -> bool:
        return self.player_type == PlayerType.HUMAN

    def __repr__(self):
        return (f"{self.__class__.__name__}(name={self.name}, symbol={self.symbol}, "
                f"type={self.player_type.value})")


class RandomSource:
    """
    Injectable random generator used by computer players and random board events.
    Tests subclass it to return scripted values.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_in_range(self, upper: int) -> int:
        """Return an integer in ``[0, upper)``"""
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        return int(self._rng.integers(upper))

    def choice(self, items: Sequence[Any]) -> Any:
        """Pick one element uniformly"""
        return items[self.next_in_range(len(items))]


def iter_lines(grid: np.ndarray) -> Iterator[np.ndarray]:
    """Yield every row, column and diagonal (both directions) of the grid."""
    yield from grid
    yield from grid.T
    flipped = np.fliplr(grid)
    rows, cols = grid.shape
    for offset in range(-rows + 1, cols):
        yield grid.diagonal(offset)
        yield flipped.diagonal(offset)


def run_lengths(line: Sequence[str], symbol: str) -> List[int]:
    """Lengths of the maximal runs of ``symbol`` along a line"""
    return [len(list(group)) for value, group in groupby(line) if value == symbol]


def has_run(grid: np.ndarray, symbol: str, length: int) -> bool:
    """Check whether ``symbol`` has ``length`` consecutive cells in any direction"""
    return any(run >= length
               for line in iter_lines(grid)
               for run in run_lengths(line, symbol))


def full_lines(grid: np.ndarray) -> List[np.ndarray]:
    """Rows, columns and the two main diagonals of a square grid"""
    return [*grid, *grid.T, grid.diagonal(), np.fliplr(grid).diagonal()]


class Board(ABC):
    """
    Abstract board shared by all variants.

    Owns the grid and the move counter. Variants implement ``update_board`` and the
    outcome predicates; rejected moves must leave every piece of state untouched.
    """

    def __init__(self, rows: int, cols: int, blank: str = BLANK):
        self.rows = rows
        self.cols = cols
        self.blank = blank
        self.grid = np.full((rows, cols), blank, dtype='<U1')
        self.move_count = 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_playable(self, row: int, col: int) -> bool:
        """Whether the cell belongs to the board's shape"""
        return self.in_bounds(row, col)

    def get_cell(self, row: int, col: int) -> str:
        return str(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.is_playable(row, col) and self.grid[row, col] == self.blank

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All playable blank cells in row-major order"""
        return [(r, c) for r in range(self.rows) for c in range(self.cols)
                if self.is_empty(r, c)]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def available_moves(self, symbol: str) -> List[Move]:
        """Moves ``symbol`` may legally submit right now"""
        return [Move(r, c, symbol) for r, c in self.empty_cells()]

    def place_or_undo(self, move: Move) -> bool:
        """
        Base placement rule: bounds and shape check, then either write the symbol
        into a blank cell or, for the undo sentinel, clear an occupied cell.
        """
        if not self.is_playable(move.row, move.col):
            return False
        current = self.grid[move.row, move.col]
        if move.is_undo:
            if current == self.blank:
                return False
            self.grid[move.row, move.col] = self.blank
            self.move_count -= 1
            return True
        if current != self.blank:
            return False
        self.grid[move.row, move.col] = move.symbol.upper()
        self.move_count += 1
        return True

    @abstractmethod
    def update_board(self, move: Move) -> bool:
        """Validate and apply a move. Returns False without mutating on rejection."""

    @abstractmethod
    def is_win(self, player: Player) -> bool:
        pass

    def is_lose(self, player: Player) -> bool:
        return False

    @abstractmethod
    def is_draw(self, player: Player) -> bool:
        pass

    def game_is_over(self, player: Player) -> bool:
        return self.is_win(player) or self.is_lose(player) or self.is_draw(player)

    def cells(self) -> List[List[str]]:
        """Copy of the grid as nested lists, for rendering"""
        return self.grid.tolist()

    def to_string(self) -> str:
        """Get string representation of board state"""
        return ''.join(''.join(row) for row in self.cells())

    def __repr__(self):
        return f"{self.__class__.__name__}({self.rows}x{self.cols}, moves={self.move_count})"


class GameManager:
    """
    Turn engine. Alternates players, asks each player's UI for a move, applies it
    and stops once the board reports a terminal state.
    """

    def __init__(self, board: Board, players: Sequence[Player], ui, logger=None):
        if len(players) != 2:
            raise ValueError(f"Expected 2 players, got {len(players)}")
        self.board = board
        self.players = list(players)
        self.ui = ui
        self.logger = logger
        for player in self.players:
            player.board = board

    def run(self) -> Dict[str, Any]:
        """
        Play the game to completion.
        Returns a result dict with the winner's name (None on a draw).
        """
        self.ui.display_board(self.board)
        current_idx = 0

        while True:
            player = self.players[current_idx]
            opponent = self.players[1 - current_idx]

            move = self.ui.get_move(player)
            while not self.board.update_board(move):
                log.debug("Rejected %s from %s", move, player.name)
                if player.is_human:
                    self.ui.display_message("Invalid move! Try again.")
                move = self.ui.get_move(player)

            self.ui.display_board(self.board)

            result = self._check_outcome(player, opponent)
            if result is not None:
                self._announce(result)
                return result

            current_idx = 1 - current_idx

    def _check_outcome(self, mover: Player, opponent: Player) -> Optional[Dict[str, Any]]:
        """Evaluate the board from the mover's side, then the opponent's"""
        if self.board.is_win(mover):
            return self._result(mover)
        if self.board.is_lose(mover):
            return self._result(opponent)
        if self.board.is_draw(mover):
            return self._result(None)
        if self.board.is_win(opponent):
            return self._result(opponent)
        return None

    def _result(self, winner: Optional[Player]) -> Dict[str, Any]:
        return {
            'winner': winner.name if winner else None,
            'symbol': winner.symbol if winner else None,
            'draw': winner is None,
            'moves': self.board.move_count,
            'final_board': self.board.to_string()
        }

    def _announce(self, result: Dict[str, Any]):
        if result['draw']:
            self.ui.display_message("Draw!")
        else:
            self.ui.display_message(f"{result['winner']} wins!")
        log.info("Game over after %d moves: %s", result['moves'],
                 'draw' if result['draw'] else result['winner'])


class GameSession:
    """
    Owns the board, UI and players for one menu selection.

    Usage:
        with GameSession(board, ui, logger, variant="classic") as session:
            result = session.run()
    """

    def __init__(self, board: Board, ui, logger=None, variant: str = ""):
        self.board = board
        self.ui = ui
        self.logger = logger
        self.variant = variant or board.__class__.__name__
        self.players: List[Player] = []

    def __enter__(self) -> 'GameSession':
        self.ui.display_message(self.ui.title)
        self.players = self.ui.setup_players()
        return self

    def run(self) -> Dict[str, Any]:
        manager = GameManager(self.board, self.players, self.ui, self.logger)
        result = manager.run()
        if self.logger:
            self.logger.log_game_result(self.variant, result)
        return result

    def __exit__(self, exc_type, exc, tb):
        for player in self.players:
            player.board = None
        self.players = []
        self.board = None
        self.ui = None
        return False
