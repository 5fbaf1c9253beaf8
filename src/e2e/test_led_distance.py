# src/e2e/test_led_distance.py
import itertools

import pytest

from autocorrect.distance import first_row, led, next_row

WORDS = ["", "a", "ab", "ba", "abc", "kitten", "sitting", "flaw", "lawn", "apple", "aple", "ape"]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("aple", "apple", 1),
        ("aple", "ape", 1),
        ("ab", "ba", 2),  # transposition costs two edits
    ],
)
def test_known_distances(a, b, expected):
    assert led(a, b) == expected


def test_matches_reference_library():
    Levenshtein = pytest.importorskip("Levenshtein")
    for a, b in itertools.product(WORDS, repeat=2):
        assert led(a, b) == Levenshtein.distance(a, b), (a, b)


def test_metric_properties():
    for a, b in itertools.product(WORDS, repeat=2):
        assert led(a, b) == led(b, a)
        assert led(a, b) <= len(a) + len(b)
        assert led(a, b) >= abs(len(a) - len(b))
    for a in WORDS:
        assert led(a, a) == 0


def test_row_steps_agree_with_full_matrix():
    target = "sitting"
    row = first_row(target)
    assert row == list(range(len(target) + 1))
    built = ""
    for ch in "kitten":
        row = next_row(row, ch, target)
        built += ch
        assert row[-1] == led(built, target)
