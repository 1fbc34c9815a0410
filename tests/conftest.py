import pytest

from rackwords.index import WordIndex, build_anagram_map

WORDS = [
    "at", "an", "ta", "eat", "tea", "ate", "tan",
    "ant", "nat", "net", "ten", "neat", "ante", "letter",
]


@pytest.fixture
def index() -> WordIndex:
    return WordIndex(build_anagram_map(WORDS))
