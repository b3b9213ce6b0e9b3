import pytest
from inline_snapshot import snapshot

from wordgrid.dictionary import Dictionary, is_grid_word, normalize_word


def all_prefixes(words):
    return {w[:i] for w in words for i in range(1, len(w) + 1)}


def test_dictionary():
    d = Dictionary.build(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert d.size() == 6
    assert len(d) == 6
    assert d.contains_word("agriculture")
    assert d.contains_word("teapot")
    assert "tea" in d

    assert not d.contains_word("teap")
    assert not d.contains_word("random")
    assert not d.contains_word("cultur")
    assert not d.contains_word("")

    assert d.is_viable_prefix("teap")
    assert d.is_viable_prefix("cultur")
    assert d.is_viable_prefix("t")
    assert d.is_viable_prefix("teapot")
    assert not d.is_viable_prefix("teapots")
    assert not d.is_viable_prefix("x")
    assert not d.is_viable_prefix("")


def test_prefixes_are_exact():
    words = ["cat", "cats", "catalog", "dog", "do", "doge"]
    d = Dictionary.build(words)
    kept = {w for w in words if len(w) >= 3}
    assert d.words == kept
    assert d.prefixes == all_prefixes(kept)
    assert d.words <= d.prefixes
    assert d.num_prefixes() == len(all_prefixes(kept))


def test_prefix_insertion_order():
    # Shorter word first: the longer one only adds its new tail.
    a = Dictionary()
    a.add_word("cat")
    a.add_word("catalog")
    b = Dictionary()
    b.add_word("catalog")
    b.add_word("cat")
    assert a.words == b.words
    assert a.prefixes == b.prefixes == all_prefixes(["catalog"])


def test_build_filters():
    d = Dictionary.build(
        ["Bad", "be", "QUIZ", "dab", "cab", "bed\n", "dabble", ""],
        alphabet="abde",
    )
    assert sorted(d.words) == snapshot(["bad", "bed", "dab"])


def test_build_min_length():
    d = Dictionary.build(["be", "bed", "beds"], min_length=4)
    assert d.words == {"beds"}


def test_build_empty():
    d = Dictionary.build([], alphabet="abc")
    assert d.size() == 0
    assert d.num_prefixes() == 0
    assert not d.is_viable_prefix("a")


def test_build_from_generator():
    d = Dictionary.build((w for w in ["tea", "sea"]), alphabet=iter("taes"))
    assert d.words == {"tea", "sea"}


def test_load_file():
    d = Dictionary.create_from_file("testdata/words.txt")
    assert d.contains_word("cat")
    assert d.contains_word("zebra")
    assert not d.contains_word("be")
    assert not d.contains_word("hi")

    d = Dictionary.create_from_file("testdata/words.txt", alphabet="abcdef")
    assert sorted(d.words) == snapshot(
        ["bad", "bead", "bed", "beef", "cab", "dab", "deb", "fee", "feed"]
    )


def test_load_missing_file():
    with pytest.raises(OSError):
        Dictionary.create_from_file("testdata/no-such-file.txt")


@pytest.mark.parametrize(
    "word, alphabet, expected",
    [
        ("cat", None, True),
        ("ca", None, False),
        ("cat", frozenset("act"), True),
        ("cats", frozenset("act"), False),
        ("", frozenset(), False),
    ],
)
def test_is_grid_word(word, alphabet, expected):
    assert is_grid_word(word, alphabet) == expected


def test_normalize_word():
    assert normalize_word("  Zebra\n") == "zebra"
