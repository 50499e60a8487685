#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Tests for the Kurdish alphabet table and collator.
"""

from itertools import product

import pytest

from kurdish_sorter.core.alphabet import AlphabetTable, KURDISH_ALPHABET, KURDISH_LETTERS
from kurdish_sorter.core.collation import Collator, Ordering, SortOrder, compare

WORDS = ["ئاسۆ", "باران", "ژیان", "زانا", "هەولێر", "ب", "با", "وو", "و", "ۆ", "ڕۆژ", "ران"]


def test_alphabet_ranks_are_dense():
    assert len(KURDISH_ALPHABET) == 34
    assert [KURDISH_ALPHABET.rank(g) for g in KURDISH_LETTERS] == list(range(34))
    assert KURDISH_ALPHABET.rank("ئ") == 0
    assert KURDISH_ALPHABET.rank("ێ") == 33


def test_alphabet_has_one_double_letter():
    assert KURDISH_ALPHABET.multi_char_graphemes() == ["وو"]
    assert KURDISH_ALPHABET.max_grapheme_length == 2
    assert KURDISH_ALPHABET.rank("وو") == 29


def test_alphabet_rejects_duplicates_and_empty():
    with pytest.raises(ValueError):
        AlphabetTable(["a", "b", "a"])
    with pytest.raises(ValueError):
        AlphabetTable(["a", ""])


def test_alphabet_match_prefers_longest():
    assert KURDISH_ALPHABET.match("ووا", 0) == ("وو", 29)
    assert KURDISH_ALPHABET.match("وا", 0) == ("و", 27)
    assert KURDISH_ALPHABET.match("x", 0) is None


def test_alphabet_with_several_multi_char_graphemes():
    table = AlphabetTable(["a", "ch", "c", "sch", "s"])
    assert table.match("schs", 0) == ("sch", 3)
    assert table.match("chs", 0) == ("ch", 1)
    assert table.match("cs", 0) == ("c", 2)


def test_greedy_double_waw():
    """وو followed by a lone و is two letters, not three."""
    tokens = Collator().tokenize("ووو")
    assert [t.rank for t in tokens] == [29, 27]
    assert [t.grapheme for t in tokens] == ["وو", "و"]


def test_unmapped_token_carries_code_point():
    tokens = Collator().tokenize("بx")
    assert tokens[0].mapped
    assert not tokens[1].mapped
    assert tokens[1].rank is None
    assert tokens[1].code_point == ord("x")


def test_ranks_none_when_unmapped():
    collator = Collator()
    assert collator.ranks("باران") == [2, 1, 10, 1, 26]
    assert collator.ranks("باران 2") is None
    assert collator.ranks("") == []


def test_higher_rank_sorts_first():
    assert compare("ب", "ئ") == Ordering.LESS
    assert compare("ئ", "ب") == Ordering.GREATER
    # ڕ (11) comes after ر (10) in the alphabet, so it sorts first
    assert compare("ڕۆژ", "ران") == Ordering.LESS


def test_double_waw_is_one_letter():
    # وو (29) outranks و (27) followed by anything
    assert compare("وو", "وێ") == Ordering.LESS
    assert compare("ۆ", "وو") == Ordering.GREATER


def test_prefix_sorts_after_extension():
    for s, x in [("ب", "ا"), ("باران", "ی"), ("", "ئ"), ("ه", "ئ")]:
        assert compare(s, s + x) == Ordering.GREATER
        assert compare(s + x, s) == Ordering.LESS


def test_equal_strings():
    assert compare("باران", "باران") == Ordering.EQUAL
    assert compare("", "") == Ordering.EQUAL
    assert compare("abc", "abc") == Ordering.EQUAL


def test_unmapped_falls_back_to_code_points():
    assert compare("abc", "abd") == Ordering.LESS
    assert compare("abd", "abc") == Ordering.GREATER
    # One unmapped character anywhere switches the whole pair to code points
    assert compare("ب1", "ئ") == Ordering.GREATER
    assert compare("ئ", "ب1") == Ordering.LESS


def test_total_order_on_mapped_words():
    for a, b in product(WORDS, repeat=2):
        assert compare(a, b) == -compare(b, a)
        assert (compare(a, b) == Ordering.EQUAL) == (a == b)

    for a, b, c in product(WORDS, repeat=3):
        if compare(a, b) == Ordering.LESS and compare(b, c) == Ordering.LESS:
            assert compare(a, c) == Ordering.LESS


def test_sorted_descending():
    collator = Collator()
    words = ["ئاسۆ", "باران", "ژیان", "زانا", "هەولێر"]
    assert collator.sorted(words) == ["هەولێر", "ژیان", "زانا", "باران", "ئاسۆ"]


def test_sorted_is_deterministic():
    collator = Collator()
    assert collator.sorted(WORDS) == collator.sorted(list(reversed(WORDS)))


def test_ascending_order():
    collator = Collator(order=SortOrder.ASCENDING)
    assert collator.compare("ئ", "ب") == Ordering.LESS
    assert collator.compare("ب", "با") == Ordering.LESS
    assert collator.sorted(["هەولێر", "ئاسۆ", "باران"]) == ["ئاسۆ", "باران", "هەولێر"]
    # Code-point fallback is the same in both directions
    assert collator.compare("abc", "abd") == Ordering.LESS


def test_ordering_is_cmp_compatible():
    assert int(Ordering.LESS) == -1
    assert int(Ordering.EQUAL) == 0
    assert int(Ordering.GREATER) == 1
