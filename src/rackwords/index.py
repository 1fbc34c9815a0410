"""Immutable anagram dictionaries keyed by canonical letter keys."""

import json
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping, Sequence
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, TextIO, TypeAlias

from sortedcontainers import SortedSet

from rackwords.letters import Letters, canonical
from rackwords.matcher import FixedLetters, filter_words

Anagrams: TypeAlias = Sequence[str]
AnagramMap: TypeAlias = Mapping[str, Sequence[str]]


class LoadError(Exception):
    """Raised when a dictionary resource cannot be turned into a WordIndex."""


class Lookup(Protocol):
    """Anything that maps canonical keys to the words spelled by those letters."""

    def get(self, key: str) -> Anagrams | None:
        """Exact lookup of a canonical key; None when the key is absent."""
        ...

    def lookup(self, letters: Letters, fixed: FixedLetters | None = None) -> list[str] | None:
        """Anagrams of `letters` that fit the fixed letters; None when the key is absent."""
        ...


def lookup(
    letters: Letters, fixed: FixedLetters | None, dictionary: Lookup
) -> list[str] | None:
    """Look up the anagrams of `letters`, keeping those that fit the fixed letters.

    Args:
        letters (Letters): Letters to use in anagrams (including fixed letters).
        fixed (FixedLetters | None): Position -> letter for all slots already filled.
        dictionary (Lookup): Dictionary to search.

    Returns:
        None if the canonical key of `letters` is absent, else the (possibly empty) list of
        words matching the fixed letters and the letter pool.
    """
    words = dictionary.get(canonical(letters))
    if words is None:
        return None
    return filter_words(words, letters, fixed)


class WordIndex:
    """Read-only mapping from canonical key to the words with that key.

    Built once and never mutated, so a single instance can be shared by any number of
    concurrent searches.
    """

    def __init__(self, words: AnagramMap) -> None:
        self._words: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {key: tuple(anagrams) for key, anagrams in words.items()}
        )
        self.word_count: int = sum(len(anagrams) for anagrams in self._words.values())
        """Total number of words over all keys."""

    def get(self, key: str) -> tuple[str, ...] | None:
        """Exact lookup of a canonical key; None when the key is absent."""
        return self._words.get(key)

    def lookup(self, letters: Letters, fixed: FixedLetters | None = None) -> list[str] | None:
        """Anagrams of `letters` that fit `fixed`; see the module-level `lookup`."""
        return lookup(letters, fixed, self)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, key: object) -> bool:
        return key in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordIndex(keys={len(self)}, words={self.word_count})"


def load_index(data: bytes | str) -> WordIndex:
    """Deserialize a dictionary resource into a WordIndex.

    The resource is a JSON object mapping canonical keys to arrays of words.

    Raises:
        LoadError: If the data is not valid JSON of that shape.
    """
    try:
        words = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise LoadError(f"Dictionary resource is not valid JSON: {e}") from e

    if not isinstance(words, dict):
        raise LoadError(f"Expected a JSON object, got {type(words).__name__}.")
    for key, anagrams in words.items():
        if not isinstance(anagrams, list) or not all(isinstance(w, str) for w in anagrams):
            raise LoadError(f"Entry {key!r} is not a list of strings.")

    return WordIndex(words)


def load_index_file(path: str | PathLike, *, out: TextIO | None = None) -> WordIndex:
    """Load a WordIndex from a dictionary resource file.

    Args:
        path (str | PathLike): Path to the resource.
        out (TextIO | None): Stream for progress messages, or None for silence.

    Raises:
        LoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f"Cannot read dictionary resource {path}: {e}") from e

    index = load_index(data)
    if out is not None:
        print(
            f"Loaded {len(index):,} keys ({index.word_count:,} words) from {path}",
            file=out,
            flush=True,
        )
    return index


def dump_index(index: WordIndex) -> bytes:
    """Serialize a WordIndex into the resource format read by `load_index`."""
    payload = {key: list(index.get(key) or ()) for key in index}
    return json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")


def load_word_list(
    path: str | PathLike, *, min_len: int = 2, out: TextIO | None = None
) -> set[str]:
    """Load a plain word list, one word per line.

    Words are lowercased; blank lines, words shorter than `min_len` and words containing
    anything but ASCII letters are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words: set[str] = set()
        for line in f:
            word = line.strip().lower()
            if len(word) < min_len:
                continue
            if not (word.isascii() and word.isalpha()):
                continue
            words.add(word)

    if out is not None:
        print(f"Loaded {len(words):,} words from {word_list_path}", file=out, flush=True)
    return words


def build_anagram_map(words: Iterable[str]) -> dict[str, list[str]]:
    """Group words by canonical key.

    Each entry lists its words alphabetically and without duplicates.
    """
    groups: defaultdict[str, SortedSet] = defaultdict(SortedSet)
    for word in words:
        word = word.strip().lower()
        if word:
            groups[canonical(word)].add(word)
    return {key: list(group) for key, group in groups.items()}
