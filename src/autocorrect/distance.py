"""
Levenshtein (edit) distance.

The distance counts single-character insertions, deletions and substitutions.
`led` is the standalone utility; `first_row` / `next_row` expose the same
dynamic programme one row at a time so the trie can extend a row per node
instead of rebuilding the whole matrix at every terminal.
"""

from __future__ import annotations
from typing import List, Sequence


def led(word1: str, word2: str) -> int:
    """
    Edit distance between word1 and word2.

    Fills the classical (len(word1)+1) x (len(word2)+1) matrix:
        M[0][j] = j, M[i][0] = i
        M[i][j] = min(M[i][j-1] + 1, M[i-1][j] + 1,
                      M[i-1][j-1] + (word1[i-1] != word2[j-1]))

    Examples:
        >>> led("kitten", "sitting")
        3
        >>> led("", "abc")
        3
    """
    size1, size2 = len(word1), len(word2)
    matrix = [[0] * (size2 + 1) for _ in range(size1 + 1)]

    for i in range(size1 + 1):
        for j in range(size2 + 1):
            if i == 0:
                matrix[i][j] = j
            elif j == 0:
                matrix[i][j] = i
            else:
                substitution = 0 if word1[i - 1] == word2[j - 1] else 1
                matrix[i][j] = min(
                    matrix[i][j - 1] + 1,
                    matrix[i - 1][j] + 1,
                    matrix[i - 1][j - 1] + substitution,
                )
    return matrix[size1][size2]


def first_row(target: str) -> List[int]:
    """Row for the empty string against target: [0, 1, ..., len(target)]."""
    return list(range(len(target) + 1))


def next_row(prev: Sequence[int], ch: str, target: str) -> List[int]:
    """
    Row for (s + ch) against target, given the row for s.

    prev[-1] of any row is led(s, target); min(row) is a lower bound on the
    distance from target to s or to any extension of s.
    """
    row = [prev[0] + 1]
    for j, tch in enumerate(target, start=1):
        row.append(min(
            row[j - 1] + 1,
            prev[j] + 1,
            prev[j - 1] + (0 if tch == ch else 1),
        ))
    return row
