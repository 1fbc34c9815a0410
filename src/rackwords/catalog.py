"""Named collections of dictionaries, loaded together before searching."""

from collections.abc import Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path
from typing import TextIO

from rackwords.config import config as rackwords_config
from rackwords.index import LoadError, WordIndex, load_index_file
from rackwords.search import (
    CombinationSearch,
    WildcardSearch,
    find_combinations,
    find_combinations_with_wildcard,
    total_words,
)


class DictionaryCatalog:
    """An ordered, read-only set of named dictionaries (e.g. one per word game)."""

    def __init__(self, dictionaries: Mapping[str, WordIndex]) -> None:
        self._dictionaries = dict(dictionaries)

    @property
    def names(self) -> list[str]:
        """Dictionary names, in catalog order."""
        return list(self._dictionaries)

    def __getitem__(self, name: str) -> WordIndex:
        return self._dictionaries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._dictionaries

    def __len__(self) -> int:
        return len(self._dictionaries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._dictionaries)

    def combinations(self, query: str, name: str) -> CombinationSearch:
        """Search the named dictionary for words spelled by `query`."""
        return find_combinations(query, self[name])

    def combinations_with_wildcard(
        self, query: str, name: str, wildcard: str | None = None, *, dedupe: bool | None = None
    ) -> WildcardSearch:
        """Wildcard search of the named dictionary."""
        return find_combinations_with_wildcard(query, self[name], wildcard, dedupe=dedupe)

    def counts(
        self, query: str, wildcard: str | None = None, *, dedupe: bool | None = None
    ) -> dict[str, int]:
        """Number of words found for `query` in each dictionary, in catalog order."""
        return {
            name: total_words(
                find_combinations_with_wildcard(query, index, wildcard, dedupe=dedupe)
            )
            for name, index in self._dictionaries.items()
        }


def dictionary_path(name: str, directory: str | PathLike | None = None) -> Path:
    """Path of the resource file for the named dictionary."""
    directory = rackwords_config.dictionary_dir if directory is None else directory
    return Path(directory) / rackwords_config.dictionary_file_pattern.format(name=name)


def load_catalog(
    names: Sequence[str] | None = None,
    directory: str | PathLike | None = None,
    *,
    n_workers: int | None = None,
    out: TextIO | None = None,
) -> DictionaryCatalog:
    """Load several dictionaries concurrently into a catalog.

    Args:
        names (Sequence[str] | None): Dictionaries to load, in catalog order.  Defaults to
            the configured `dictionary_names`.
        directory (str | PathLike | None): Directory holding the resources.  Defaults to the
            configured `dictionary_dir`.
        n_workers (int | None): Loader threads.  Defaults to the configured `max_workers`,
            or one thread per dictionary.
        out (TextIO | None): Stream for progress messages, or None for silence.

    Raises:
        LoadError: If any dictionary fails to load.  No partial catalog is returned.
    """
    names = list(rackwords_config.dictionary_names if names is None else names)
    if n_workers is None:
        n_workers = rackwords_config.max_workers
    if n_workers is None:
        n_workers = max(1, len(names))

    paths = [dictionary_path(name, directory) for name in names]
    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        futures = [executor.submit(load_index_file, path, out=out) for path in paths]

        dictionaries: dict[str, WordIndex] = {}
        for name, future in zip(names, futures):
            try:
                dictionaries[name] = future.result()
            except LoadError as e:
                if out is not None:
                    print(f"Failed to load dictionary '{name}': {e}", file=out, flush=True)
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    if out is not None:
        print(f"Loaded {len(dictionaries)} dictionaries: {', '.join(names)}", file=out, flush=True)
    return DictionaryCatalog(dictionaries)
