# src/e2e/test_trie_index.py
import itertools

import pytest

from autocorrect.distance import led
from autocorrect.trie import Trie

VOCAB = ["apple", "apply", "ape", "bat", "bats", "batman", "cat"]


@pytest.fixture
def trie() -> Trie:
    return Trie(VOCAB)


def test_insert_then_every_prefix_is_present(trie):
    for w in VOCAB:
        assert trie.has_word(w)
        for i in range(len(w) + 1):
            assert trie.has_prefix(w[:i])


def test_prefix_is_not_a_word_unless_inserted(trie):
    assert trie.has_prefix("app")
    assert not trie.has_word("app")
    assert not trie.has_prefix("dog")
    assert "bat" in trie and "ba" not in trie


def test_len_counts_distinct_words():
    t = Trie(["bat", "bat", "bats"])
    assert len(t) == 2


def test_empty_word_marks_root_terminal():
    t = Trie()
    assert not t.has_word("")
    t.insert("")
    assert t.has_word("")
    assert t.root.is_terminal


def test_no_dead_leaves_after_build(trie):
    # every leaf reached from the root must end a word
    stack = [trie.root]
    while stack:
        node = stack.pop()
        if not node.children:
            assert node.is_terminal
        stack.extend(node.children.values())


def test_find_all_with_prefix_sorted(trie):
    assert trie.find_all_with_prefix("ap") == ["ape", "apple", "apply"]
    assert trie.find_all_with_prefix("bat") == ["bat", "batman", "bats"]
    assert trie.find_all_with_prefix("z") == []


def test_find_all_with_prefix_matches_brute_force(trie):
    for p in ["", "a", "ap", "app", "b", "bat", "batm", "c", "ca", "cat", "cats", "x"]:
        assert trie.find_all_with_prefix(p) == sorted(w for w in set(VOCAB) if w.startswith(p))


def test_words_returns_whole_vocabulary(trie):
    assert trie.words() == sorted(VOCAB)


def test_whitespace_split_basic():
    t = Trie(["bat", "man", "batman"])
    assert t.whitespace_split("batman") == ["bat man"]
    assert t.whitespace_split("bat") == []
    assert t.whitespace_split("") == []


def test_whitespace_split_every_split_point():
    t = Trie(["a", "ab", "b", "bc", "c", "abc"])
    out = t.whitespace_split("abc")
    assert out == ["a bc", "ab c"]
    for s in out:
        head, tail = s.split(" ")
        assert head + tail == "abc"
        assert t.has_word(head) and t.has_word(tail)


def test_edit_distance_scenario(trie):
    assert trie.find_within_edit_distance("aple", 1) == ["ape", "apple"]


def test_edit_distance_zero_is_exact_match(trie):
    assert trie.find_within_edit_distance("bats", 0) == ["bats"]
    assert trie.find_within_edit_distance("bax", 0) == []


def test_edit_distance_negative_bound_is_empty(trie):
    assert trie.find_within_edit_distance("bat", -1) == []


@pytest.mark.parametrize("query", ["", "a", "ap", "aple", "bta", "batmna", "xyz", "cats", "applied"])
@pytest.mark.parametrize("bound", [1, 2, 3])
def test_edit_distance_sound_and_complete(trie, query, bound):
    expected = sorted(w for w in set(VOCAB) if led(query, w) <= bound)
    assert trie.find_within_edit_distance(query, bound) == expected


def test_edit_distance_large_bound_returns_everything(trie):
    assert trie.find_within_edit_distance("q", 10) == sorted(VOCAB)


def test_generated_vocabulary_against_brute_force():
    letters = "abc"
    vocab = ["".join(p) for n in range(1, 4) for p in itertools.product(letters, repeat=n)]
    t = Trie(vocab)
    for query in ["", "a", "cab", "abca", "bbbb"]:
        for bound in (1, 2):
            assert t.find_within_edit_distance(query, bound) == sorted(
                w for w in vocab if led(query, w) <= bound
            )
