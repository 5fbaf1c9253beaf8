# src/e2e/test_normalize.py
import pytest

from autocorrect.normalize import normalize_only, split_phrase, tokenize


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", ""),
        ("   ", ""),
        ("Ap!", "ap"),
        ("Hello,   World", "hello world"),
        ("  to be\tor not  ", "to be or not"),
        ("abc123def", "abc def"),
        ("Café", "caf"),
        ("!!! 42 ???", ""),
    ],
)
def test_normalize_only(raw, expected):
    assert normalize_only(raw) == expected


def test_tokenize_blank_is_empty_list():
    assert tokenize("") == []
    assert tokenize("...") == []
    assert tokenize("The cat, the HAT.") == ["the", "cat", "the", "hat"]


def test_split_phrase_stem_and_token():
    q = split_phrase("Hello  there, AP")
    assert q.stem == "hello there"
    assert q.token == "ap"
    assert q.reattach("apple") == "hello there apple"


def test_split_phrase_single_token_has_empty_stem():
    q = split_phrase("ap")
    assert q.stem == "" and q.token == "ap"
    assert q.reattach("ape") == "ape"


def test_split_phrase_empty():
    assert split_phrase("  ?? ").is_empty
