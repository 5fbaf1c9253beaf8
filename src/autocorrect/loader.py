from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List

from .config import CORPUS_ENCODING, DATA_SEPARATOR
from .normalize import tokenize

log = logging.getLogger(__name__)

# Progress logging (set AUTOCORRECT_VERBOSE=1 to enable)
PROGRESS_EVERY_FILES = 100


def _verbose() -> bool:
    return os.environ.get("AUTOCORRECT_VERBOSE") == "1"


def split_data_arg(data: str | None) -> List[str]:
    """'a.txt, b.txt,,c.txt' -> ['a.txt', 'b.txt', 'c.txt']"""
    if not data:
        return []
    return [p.strip() for p in data.split(DATA_SEPARATOR) if p.strip()]


def collect_text_files(root: str) -> List[str]:
    """Sorted *.txt files found recursively under root."""
    found: List[str] = []
    for dirpath, _, filenames in os.walk(os.path.abspath(root)):
        for fn in filenames:
            if fn.lower().endswith(".txt"):
                found.append(os.path.join(dirpath, fn))
    return sorted(found)


def iter_file_words(path: str) -> Iterator[str]:
    """
    Yield the tokens of one corpus file, line by line.
    Raises OSError if the file cannot be opened; undecodable bytes are dropped.
    """
    with open(path, "r", encoding=CORPUS_ENCODING, errors="ignore") as f:
        for line in f:
            yield from tokenize(line)


def load_words(paths: Iterable[str]) -> List[str]:
    """
    Every token of every readable file, in file order.
    Files that cannot be read are skipped; the build is best-effort.
    """
    words: List[str] = []
    file_count = 0
    for path in paths:
        try:
            file_words = list(iter_file_words(path))
        except OSError as exc:
            log.debug("Skipping corpus file %s: %s", path, exc)
            continue
        words.extend(file_words)
        file_count += 1
        if _verbose() and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%s words=%s", f"{file_count:,}", f"{len(words):,}")

    log.info("Read %d words from %d file(s)", len(words), file_count)
    return words
