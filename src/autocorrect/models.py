# src/autocorrect/models.py
"""
Data models for the autocorrect engine.

- SuggestOptions: which suggestion generators are switched on.
- ParsedQuery: a normalized phrase split into its unchanged stem and the
  final token being corrected.

These classes carry no business logic beyond validating their own fields.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict


@dataclass(frozen=True, slots=True)
class SuggestOptions:
    """
    Generator switches for the suggestion composer.

    Attributes
    ----------
    prefix : bool
        Offer every vocabulary word that starts with the final token.
    whitespace : bool
        Offer two-word splits of the final token ("batman" -> "bat man").
    led : int
        Maximum Levenshtein distance for approximate matches. Zero or a
        negative value disables the edit-distance generator.
    """
    prefix: bool = False
    whitespace: bool = False
    led: int = 0

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it so --led=True style mistakes surface
        if isinstance(self.led, bool) or not isinstance(self.led, int):
            raise TypeError(f"led must be an int, got {type(self.led).__name__}")

    @property
    def led_enabled(self) -> bool:
        return self.led > 0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """
    A normalized phrase split at its last space.

    stem is "" for single-token phrases; token is "" only when the phrase
    normalized to nothing at all.
    """
    stem: str
    token: str

    @property
    def is_empty(self) -> bool:
        return not self.token

    def reattach(self, candidate: str) -> str:
        return f"{self.stem} {candidate}" if self.stem else candidate
