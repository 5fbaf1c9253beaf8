from __future__ import annotations
import re
from typing import List

from .models import ParsedQuery

# /* ~~~ anything outside lowercase letters and space becomes a separator ~~~ */
_NON_ALPHA = re.compile(r"[^a-z ]")
_SPACES = re.compile(r" +")


def normalize_only(text: str) -> str:
    """
    Canonical form shared by queries and corpus lines:
      * lowercase
      * every character not in a-z or space -> a single space
      * runs of spaces collapsed, leading/trailing spaces stripped
    """
    if not text:
        return ""
    text = _NON_ALPHA.sub(" ", text.lower())
    return _SPACES.sub(" ", text).strip()


def tokenize(text: str) -> List[str]:
    """Return the tokens of the normalized text (empty list for blank input)."""
    norm = normalize_only(text)
    return norm.split(" ") if norm else []


def split_phrase(text: str) -> ParsedQuery:
    """Split a phrase into (stem, final token) after normalizing it."""
    norm = normalize_only(text)
    stem, _, token = norm.rpartition(" ")
    return ParsedQuery(stem=stem, token=token)
