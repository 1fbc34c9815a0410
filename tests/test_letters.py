import random
from collections import Counter

from rackwords.letters import canonical, get_letter_counter, is_playable, normalize


def test_canonical_sorts_and_lowercases() -> None:
    assert canonical("Tea") == "aet"
    assert canonical(["T", "e", "a"]) == "aet"
    assert canonical("letter") == "eelrtt"
    assert canonical("") == ""


def test_canonical_is_idempotent() -> None:
    assert canonical(canonical("Listen")) == canonical("listen")


def test_shuffled_letters_share_a_key() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        word = "".join(rng.choice("abcdeXYZ") for _ in range(rng.randint(0, 10)))
        shuffled = list(word)
        rng.shuffle(shuffled)
        assert canonical(shuffled) == canonical(word)


def test_equal_keys_only_for_equal_multisets() -> None:
    rng = random.Random(99)
    for _ in range(300):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 5)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 5)))
        assert (canonical(a) == canonical(b)) == (Counter(a) == Counter(b))


def test_normalize_joins_sequences() -> None:
    assert normalize(["A", "b"]) == "ab"
    assert normalize("QuErY") == "query"


def test_is_playable_respects_multiplicity() -> None:
    assert is_playable(get_letter_counter("tea"), get_letter_counter("eatx"))
    assert not is_playable(get_letter_counter("letter"), get_letter_counter("letr"))
