"""
Autocorrect Engine

Suggests corrections for the last word of a short phrase, using a word
index built once from a text corpus. Three generators can be switched on:

- prefix completion       ("ap"     -> "ape", "apple", "apply")
- whitespace split        ("batman" -> "bat man")
- bounded edit distance   ("aple"   -> "ape", "apple" with led=1)

Their union is sorted, cut to five, and put back after the untouched
leading words of the phrase.

Example Usage:
    from autocorrect import Engine, SuggestOptions

    eng = Engine(SuggestOptions(prefix=True, led=1))
    eng.build(["corpus/a.txt", "corpus/b.txt"])
    for s in eng.suggest("hello aple"):
        print(s)
"""

# src/autocorrect/__init__.py
from .distance import led
from .engine import Engine
from .models import ParsedQuery, SuggestOptions
from .normalize import normalize_only, split_phrase, tokenize
from .suggest import generate_candidates, suggest
from .trie import Trie, TrieNode

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "ParsedQuery",
    "SuggestOptions",
    "Trie",
    "TrieNode",
    "generate_candidates",
    "led",
    "normalize_only",
    "split_phrase",
    "suggest",
    "tokenize",
]
