"""
Registry of every playable variant, in menu order.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from config import Config
from game import Board, RandomSource
from ui import UI

from variants.classic import ClassicBoard, ClassicUI
from variants.connect_four import ConnectFourBoard, ConnectFourUI
from variants.diamond import DiamondBoard, DiamondUI
from variants.five_by_five import FiveByFiveBoard, FiveByFiveUI
from variants.four_by_four import FourByFourBoard, FourByFourUI
from variants.infinity import InfinityBoard, InfinityUI
from variants.inverse import InverseBoard, InverseUI
from variants.memory import MemoryBoard, MemoryUI
from variants.numerical import NumericalBoard, NumericalUI
from variants.obstacles import ObstaclesBoard, ObstaclesUI
from variants.pyramid import PyramidBoard, PyramidUI
from variants.sus import SUSBoard, SUSUI
from variants.ultimate import UltimateBoard, UltimateUI
from variants.word import WordBoard, WordUI


@dataclass(frozen=True)
class Variant:
    key: str
    title: str
    # Builds a fresh board; may raise (e.g. DictionaryLoadError for Word)
    make_board: Callable[[Config, RandomSource], Board]
    ui_class: Type[UI]


VARIANTS: List[Variant] = [
    Variant("infinity", "Infinity Tic-Tac-Toe", lambda config, rng: InfinityBoard(), InfinityUI),
    Variant("word", "Word Tic-Tac-Toe",
            lambda config, rng: WordBoard.from_file(config.game.dictionary_path), WordUI),
    Variant("obstacles", "Obstacles Tic-Tac-Toe",
            lambda config, rng: ObstaclesBoard(rng, config.game.obstacles_per_move), ObstaclesUI),
    Variant("inverse", "Inverse Tic-Tac-Toe", lambda config, rng: InverseBoard(), InverseUI),
    Variant("sus", "SUS Game", lambda config, rng: SUSBoard(), SUSUI),
    Variant("4x4", "4x4 Tic-Tac-Toe", lambda config, rng: FourByFourBoard(), FourByFourUI),
    Variant("numerical", "Numerical Tic-Tac-Toe", lambda config, rng: NumericalBoard(), NumericalUI),
    Variant("5x5", "5x5 Tic-Tac-Toe", lambda config, rng: FiveByFiveBoard(), FiveByFiveUI),
    Variant("classic", "Classic Tic-Tac-Toe", lambda config, rng: ClassicBoard(), ClassicUI),
    Variant("pyramid", "Pyramid Tic-Tac-Toe", lambda config, rng: PyramidBoard(), PyramidUI),
    Variant("diamond", "Diamond Tic-Tac-Toe", lambda config, rng: DiamondBoard(), DiamondUI),
    Variant("connect4", "Connect 4", lambda config, rng: ConnectFourBoard(), ConnectFourUI),
    Variant("ultimate", "Ultimate Tic-Tac-Toe", lambda config, rng: UltimateBoard(), UltimateUI),
    Variant("memory", "Memory Tic-Tac-Toe", lambda config, rng: MemoryBoard(), MemoryUI),
]

VARIANTS_BY_KEY: Dict[str, Variant] = {variant.key: variant for variant in VARIANTS}


def get_variant(key: str) -> Variant:
    """Look up a variant by key"""
    try:
        return VARIANTS_BY_KEY[key.lower()]
    except KeyError:
        raise ValueError(f"Unknown variant: {key}. "
                         f"Choose from: {', '.join(VARIANTS_BY_KEY)}") from None
