"""Filtering of candidate words against fixed board letters and a letter pool."""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TypeAlias

from rackwords.letters import Letters, get_letter_counter, is_playable, normalize

FixedLetters: TypeAlias = Mapping[int, str]
"""Zero-based word position -> letter already placed in that position.

Positions that are not present are unconstrained.
"""


def matches_fixed(word: str, fixed: FixedLetters) -> bool:
    """Returns whether every fixed position inside `word` holds the required letter.

    Fixed positions beyond the end of the word do not constrain it.
    """
    for pos, ch in enumerate(word):
        required = fixed.get(pos)
        if required is not None and ch != required.lower():
            return False
    return True


def matches(word: str, letters: Letters, fixed: FixedLetters | None = None) -> bool:
    """Returns whether `word` fits the fixed letters and can be spelled from `letters`.

    The letters form a multiset: a word needing two 'a's is rejected by a pool with a
    single 'a'.  The pool may be a superset of the word.

    Args:
        word (str): Candidate word.
        letters (Letters): Available letters, including any fixed ones.
        fixed (FixedLetters | None): Required letters by position.
    """
    word = normalize(word)
    if fixed and not matches_fixed(word, fixed):
        return False
    return is_playable(get_letter_counter(word), Counter(normalize(letters)))


def filter_words(
    words: Iterable[str], letters: Letters, fixed: FixedLetters | None = None
) -> list[str]:
    """Return the words that pass `matches`, keeping their order."""
    pool = normalize(letters)
    return [w for w in words if matches(w, pool, fixed)]
