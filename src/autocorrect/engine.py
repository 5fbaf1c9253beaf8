# autocorrect/engine.py
from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .loader import load_words
from .models import SuggestOptions
from .suggest import suggest
from .trie import Trie

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus reading (loader.load_words),
      - the word index (Trie),
      - the suggestion composer (suggest.suggest).

    Lifecycle is strictly phased: build() once, then only read. There is no
    path that mutates the index after build(), so one Engine can serve many
    readers (Flask threads, the desktop GUI) without locking.

    Public API (used by the CLI, Flask and the desktop app):
      * build(paths):           read corpus files -> index
      * build_from_words(words): index an in-memory word list
      * suggest(phrase):        up to TOP_K suggestions
      * shutdown():             drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self, options: Optional[SuggestOptions] = None) -> None:
        self.options = options or SuggestOptions()
        self.index: Optional[Trie] = None

    # /* ~~~ Build the index from corpus files (missing files are skipped) ~~~ */
    def build(self, paths: Iterable[str], *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["AUTOCORRECT_VERBOSE"] = "1"

        paths = list(paths)
        log.info("Loading corpus from %s", paths)
        self.build_from_words(load_words(paths))

    def build_from_words(self, words: Iterable[str]) -> None:
        if self.index is not None:
            raise RuntimeError("Engine already built; the index is read-only after build().")
        idx = Trie()
        idx.insert_all(words)
        self.index = idx
        log.info("Engine build() complete: vocabulary=%d options=%s", len(idx), self.options)

    def with_options(self, options: SuggestOptions) -> "Engine":
        """A second Engine over the same read-only index, with other switches."""
        if self.index is None:
            raise RuntimeError("Engine not built. Call build() first.")
        other = Engine(options)
        other.index = self.index
        return other

    @property
    def is_ready(self) -> bool:
        return self.index is not None

    @property
    def vocabulary_size(self) -> int:
        return len(self.index) if self.index is not None else 0

    # ------------- query -------------

    def suggest(self, phrase: str, *, top_k: int = CFG.TOP_K) -> List[str]:
        if self.index is None:
            raise RuntimeError("Engine not built. Call build() first.")
        return suggest(phrase, self.index, self.options, top_k=top_k)

    def suggest_many(self, lines: Iterable[str]) -> Iterator[List[str]]:
        for line in lines:
            yield self.suggest(line)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")
