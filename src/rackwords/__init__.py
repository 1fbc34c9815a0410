"""Rackwords: anagram lookups for word-game racks.

Finds every dictionary word that can be spelled from a subset of a rack of letters,
grouped by word length, longest first.  Racks may contain wildcard tiles, and single
lookups may be constrained by letters already fixed in board positions.
"""

from .catalog import DictionaryCatalog, load_catalog
from .combinations import combinations
from .index import (
    LoadError,
    Lookup,
    WordIndex,
    build_anagram_map,
    dump_index,
    load_index,
    load_index_file,
    load_word_list,
    lookup,
)
from .letters import canonical
from .matcher import FixedLetters, matches
from .search import (
    Combination,
    CombinationSearch,
    WildcardSearch,
    find_combinations,
    find_combinations_with_wildcard,
    total_words,
)

__all__ = [
    "Combination",
    "CombinationSearch",
    "DictionaryCatalog",
    "FixedLetters",
    "LoadError",
    "Lookup",
    "WildcardSearch",
    "WordIndex",
    "build_anagram_map",
    "canonical",
    "combinations",
    "dump_index",
    "find_combinations",
    "find_combinations_with_wildcard",
    "load_catalog",
    "load_index",
    "load_index_file",
    "load_word_list",
    "lookup",
    "matches",
    "total_words",
]
