import json
import sys

import pytest

from rackwords.index import (
    LoadError,
    WordIndex,
    build_anagram_map,
    dump_index,
    load_index,
    load_index_file,
    load_word_list,
    lookup,
)


def test_build_anagram_map_groups_by_key() -> None:
    words = build_anagram_map(["tea", "Eat", "ate", "tea", "at"])
    assert words == {"aet": ["ate", "eat", "tea"], "at": ["at"]}


def test_exact_lookup(index: WordIndex) -> None:
    assert index.get("aet") == ("ate", "eat", "tea")
    assert index.get("xyz") is None
    assert "aet" in index
    assert "tea" not in index


def test_lookup_with_fixed_letters(index: WordIndex) -> None:
    assert index.lookup("eat", {0: "t"}) == ["tea"]
    assert index.lookup("EAT") == ["ate", "eat", "tea"]
    assert index.lookup(["e", "a", "t"], {1: "a"}) == ["eat"]


def test_lookup_absent_key_is_none_and_filtered_out_is_empty(index: WordIndex) -> None:
    assert index.lookup("xyz", {}) is None
    assert index.lookup("eat", {0: "z"}) == []


def test_lookup_works_with_any_mapping_like_dictionary() -> None:
    class Plain:
        def get(self, key: str) -> list[str] | None:
            return {"at": ["at", "ta"]}.get(key)

        def lookup(self, letters: str, fixed: dict[int, str] | None = None) -> list[str] | None:
            return lookup(letters, fixed, self)

    assert lookup("ta", {0: "t"}, Plain()) == ["ta"]
    assert Plain().lookup("at", {1: "a"}) == ["ta"]
    assert lookup("zz", None, Plain()) is None


def test_index_is_read_only(index: WordIndex) -> None:
    with pytest.raises(TypeError):
        index._words["new"] = ("wen",)  # type: ignore[index]


def test_sizes(index: WordIndex) -> None:
    assert len(index) == 7
    assert index.word_count == 14


def test_load_index_from_bytes() -> None:
    index = load_index(json.dumps({"aet": ["eat", "tea"], "at": ["at"]}).encode())
    assert index.get("aet") == ("eat", "tea")
    assert len(index) == 2


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"\xff\xfe\x00garbage",
        b'["aet", "eat"]',
        b'{"aet": "eat"}',
        b'{"aet": ["eat", 3]}',
        b"[" * 200_000,
    ],
)
def test_load_index_rejects_bad_resources(data: bytes) -> None:
    with pytest.raises(LoadError):
        load_index(data)


def test_load_index_file(tmp_path, capsys) -> None:
    path = tmp_path / "small_anagrams.json"
    path.write_bytes(dump_index(WordIndex({"aet": ["eat", "tea"]})))

    index = load_index_file(path)
    assert index.get("aet") == ("eat", "tea")
    assert capsys.readouterr().out == ""

    load_index_file(path, out=sys.stdout)
    assert "Loaded 1 keys (2 words)" in capsys.readouterr().out


def test_load_index_file_missing(tmp_path) -> None:
    with pytest.raises(LoadError):
        load_index_file(tmp_path / "missing.json")


def test_dump_then_load_keeps_entries(index: WordIndex) -> None:
    reloaded = load_index(dump_index(index))
    assert sorted(reloaded) == sorted(index)
    assert reloaded.get("ant") == index.get("ant")


def test_load_word_list(tmp_path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("Tea\n\neat\na\ncan't\nEAT\nzebra\n", encoding="utf-8")
    assert load_word_list(path) == {"tea", "eat", "zebra"}
    assert load_word_list(path, min_len=4) == {"zebra"}


def test_load_word_list_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "nope.txt")
