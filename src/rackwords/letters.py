"""Letter normalization, canonical anagram keys and letter multisets."""

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from typing import TypeAlias

Letters: TypeAlias = str | Iterable[str]
"""A rack or candidate word, either as a string or as a sequence of single characters."""

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
"""Letters tried in place of a wildcard tile, in substitution order."""


def normalize(letters: Letters) -> str:
    """Join `letters` into a single lowercase string."""
    text = letters if isinstance(letters, str) else "".join(letters)
    return text.lower()


def canonical(letters: Letters) -> str:
    """Canonical anagram key: the lowercased letters sorted by code point.

    Two letter sequences share a key exactly when one is a permutation of the other.
    The same function is used to build dictionaries and to query them.
    """
    return "".join(sorted(normalize(letters)))


@lru_cache(maxsize=300_000)
def get_letter_counter(word: str) -> Counter[str]:
    """Return a cached Counter for a word.

    Note: the returned Counter must be treated as immutable.
    """
    return Counter(word)


def is_playable(to_play: Counter[str], tiles: Counter[str]) -> bool:
    """Returns whether the tiles to play can be formed from the available tiles.

    Args:
        to_play (Counter[str]): A counter of the tiles needed to play.
        tiles (Counter[str]): A counter of the available tiles.
    """
    return all(to_play[ch] <= tiles[ch] for ch in to_play)
