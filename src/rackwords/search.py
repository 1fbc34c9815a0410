"""Rack searches: every dictionary word spelled by a subset of the rack, by length."""

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from sortedcontainers import SortedSet

from rackwords.combinations import combinations
from rackwords.config import config as rackwords_config
from rackwords.index import Lookup
from rackwords.letters import ALPHABET, canonical, normalize


class Combination(NamedTuple):
    """All words of one length found for a rack."""

    length: int
    words: list[str]


def total_words(buckets: Iterable[Combination]) -> int:
    """Number of words over all buckets of a search result."""
    return sum(len(bucket.words) for bucket in buckets)


class CombinationSearch:
    """Words spelled by any subset of a rack, bucketed by length.

    Iterating yields one Combination per length that has matches, longest first.  Buckets
    are computed as they are consumed, so stopping early skips the shorter lengths, and
    each iteration recomputes from the same inputs.
    """

    def __init__(self, query: str, dictionary: Lookup, *, min_length: int | None = None) -> None:
        self.letters = normalize(query)
        self.dictionary = dictionary
        self.min_length = rackwords_config.min_word_length if min_length is None else min_length

    def words_of_length(self, length: int) -> list[str]:
        """Sorted words of exactly `length` letters spelled by the rack."""
        # Distinct subsets by position may share a key (e.g. "aab"), look each key up once
        keys = {canonical(subset) for subset in combinations(self.letters, length)}
        words: list[str] = []
        for key in keys:
            anagrams = self.dictionary.get(key)
            if anagrams:
                words.extend(w for w in anagrams if w)
        words.sort()
        return words

    def lengths(self) -> range:
        """Word lengths searched, longest first."""
        return range(len(self.letters), max(self.min_length, 1) - 1, -1)

    def __iter__(self) -> Iterator[Combination]:
        for length in self.lengths():
            words = self.words_of_length(length)
            if words:
                yield Combination(length, words)

    def __repr__(self) -> str:
        return f"CombinationSearch({self.letters!r})"


def expand_wildcards(query: str, wildcard: str) -> Iterator[str]:
    """Yield every query obtained by replacing each wildcard with a letter.

    Wildcards are resolved left to right; the first one takes each letter of the alphabet
    in turn, and the rest are expanded recursively.  A query without wildcards is yielded
    unchanged.
    """
    pos = query.find(wildcard)
    if pos == -1:
        yield query
        return
    for ch in ALPHABET:
        yield from expand_wildcards(query[:pos] + ch + query[pos + 1 :], wildcard)


class WildcardSearch:
    """Rack search where a wildcard tile may stand for any letter.

    Buckets of the same length found through different substitutions are merged into one
    sorted bucket.  Words found through several substitutions are kept once per
    substitution unless `dedupe` is set.
    """

    def __init__(
        self,
        query: str,
        dictionary: Lookup,
        wildcard: str | None = None,
        *,
        dedupe: bool | None = None,
        min_length: int | None = None,
    ) -> None:
        wildcard = rackwords_config.wildcard if wildcard is None else wildcard
        if len(wildcard) != 1:
            raise ValueError(f"Wildcard must be a single character, got {wildcard!r}.")
        if wildcard.lower() in ALPHABET:
            raise ValueError(f"Wildcard must not be a letter, got {wildcard!r}.")
        self.query = query
        self.wildcard = wildcard
        self.dictionary = dictionary
        self.dedupe = rackwords_config.dedupe_wildcard_words if dedupe is None else dedupe
        self.min_length = rackwords_config.min_word_length if min_length is None else min_length

    def searches(self) -> Iterator[CombinationSearch]:
        """One plain search per concrete substitution of the wildcards."""
        for concrete in expand_wildcards(self.query, self.wildcard):
            yield CombinationSearch(concrete, self.dictionary, min_length=self.min_length)

    def __iter__(self) -> Iterator[Combination]:
        if self.wildcard not in self.query:
            yield from CombinationSearch(self.query, self.dictionary, min_length=self.min_length)
            return

        # Substitutions never change the rack length
        lengths = CombinationSearch(self.query, self.dictionary, min_length=self.min_length)
        for length in lengths.lengths():
            words: list[str] = []
            for search in self.searches():
                words.extend(search.words_of_length(length))
            if not words:
                continue
            words = list(SortedSet(words)) if self.dedupe else sorted(words)
            yield Combination(length, words)

    def __repr__(self) -> str:
        return f"WildcardSearch({self.query!r}, wildcard={self.wildcard!r})"


def find_combinations(query: str, dictionary: Lookup) -> CombinationSearch:
    """All words spelled by subsets of `query`, as length buckets, longest first."""
    return CombinationSearch(query, dictionary)


def find_combinations_with_wildcard(
    query: str,
    dictionary: Lookup,
    wildcard: str | None = None,
    *,
    dedupe: bool | None = None,
) -> WildcardSearch:
    """Like `find_combinations`, with `wildcard` standing for any letter.

    Args:
        query (str): The rack, possibly containing wildcard characters.
        dictionary (Lookup): Dictionary to search.
        wildcard (str | None): The wildcard character; defaults to the configured one.
        dedupe (bool | None): Drop duplicate words across substitutions; defaults to the
            configured `dedupe_wildcard_words`.
    """
    return WildcardSearch(query, dictionary, wildcard, dedupe=dedupe)
