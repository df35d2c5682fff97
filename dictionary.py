"""
Word list used by Word Tic-Tac-Toe.
"""

from pathlib import Path
from typing import FrozenSet, Iterable, Union

from logger import get_logger

log = get_logger(__name__)


class DictionaryLoadError(RuntimeError):
    """The word list could not be read"""


class WordDictionary:
    """
    Read-only, upper-cased set of words.

    A candidate matches when it, or its reversal, is in the set.
    """

    def __init__(self, words: Iterable[str]):
        self.words: FrozenSet[str] = frozenset(
            word.strip().upper() for word in words if word.strip())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WordDictionary':
        """Load a newline-delimited word list"""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                dictionary = cls(f)
        except OSError as e:
            raise DictionaryLoadError(f"{path} not found!") from e
        log.info("Loaded %d words from %s", len(dictionary), path)
        return dictionary

    def contains(self, word: str) -> bool:
        word = word.upper()
        return word in self.words or word[::-1] in self.words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self):
        return len(self.words)
