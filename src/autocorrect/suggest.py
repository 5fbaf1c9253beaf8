from __future__ import annotations
from typing import List, Set

from .config import TOP_K
from .models import SuggestOptions
from .normalize import split_phrase
from .trie import Trie


def generate_candidates(token: str, index: Trie, options: SuggestOptions) -> List[str]:
    """
    Union of the enabled generators for one token, sorted.

    /* ~~~ prefix completion, whitespace split, bounded edit distance ~~~ */
    """
    if not token:
        return []
    found: Set[str] = set()
    if options.prefix:
        found.update(index.find_all_with_prefix(token))
    if options.whitespace:
        found.update(index.whitespace_split(token))
    if options.led_enabled:
        found.update(index.find_within_edit_distance(token, options.led))
    return sorted(found)


def suggest(phrase: str, index: Trie, options: SuggestOptions, *, top_k: int = TOP_K) -> List[str]:
    """
    Suggestions for the final token of phrase, reattached to the unchanged stem.

    The candidate union is sorted and cut to top_k BEFORE the stem is put
    back, so the same candidates win whatever the stem is. top_k is capped
    at TOP_K.
    """
    query = split_phrase(phrase)
    if query.is_empty:
        return []
    k = max(0, min(int(top_k), TOP_K))
    chosen = generate_candidates(query.token, index, options)[:k]
    return sorted({query.reattach(c) for c in chosen})
