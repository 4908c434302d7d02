"""
Edit distance: fast paths, operation costs, shorter-row swap and the
max_distance early exit used by the phrase trie.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from queryscorer.levenshtein import levenshtein


def test_identical_words_are_zero():
    assert levenshtein("firefox", "firefox") == 0
    assert levenshtein("", "") == 0


def test_empty_word_costs_length_of_other():
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "abc", cost_ins=2) == 6
    assert levenshtein("abc", "", cost_del=3) == 9


@pytest.mark.parametrize(
    "word1, word2, expected",
    [
        ("kitten", "sitting", 3),
        ("updat", "update", 1),
        ("update", "updat", 1),
        ("firfox", "firefox", 1),
        ("updste", "update", 1),
        ("updaet", "update", 2),  # transposition is two edits
        ("banna", "banana", 1),
        ("bana", "banana", 2),
    ],
)
def test_unit_costs(word1, word2, expected):
    assert levenshtein(word1, word2) == expected


def test_insert_and_delete_costs_follow_direction():
    # "ab" -> "abc" needs an insertion; "abc" -> "ab" a deletion
    assert levenshtein("ab", "abc", cost_ins=2, cost_del=5) == 2
    assert levenshtein("abc", "ab", cost_ins=2, cost_del=5) == 5


def test_replace_cost_can_lose_to_delete_plus_insert():
    assert levenshtein("cat", "cut", cost_rep=3) == 2
    assert levenshtein("cat", "cut", cost_rep=1) == 1


def test_symmetric_with_unit_costs():
    assert levenshtein("aardvark", "ardvark") == levenshtein("ardvark", "aardvark") == 1


def test_max_distance_exact_within_bound():
    assert levenshtein("firfox", "firefox", max_distance=1) == 1
    assert levenshtein("firefox", "firefox", max_distance=0) == 0


def test_max_distance_early_exit_exceeds_bound():
    assert levenshtein("a", "abcdef", max_distance=1) > 1
    assert levenshtein("kitten", "sitting", max_distance=1) > 1
    assert levenshtein("update", "clear", max_distance=1) > 1
