"""Permutation enumeration over a sequence and its contiguous windows.

Enumeration order matters: the finder keeps the first hit among windows of
equal length, so every generator here yields in a fixed, documented order.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .api import Candidate


def full_permutations(seq: str) -> Iterator[str]:
    """
    Yield every ordering of the symbols of seq, treating positions as distinct.

    Repeated symbols produce repeated strings (no de-dup), so a length-n input
    always yields exactly n! items. For each index k in increasing order the
    symbol at k is prefixed to every permutation of the remaining positions.
    """
    if len(seq) <= 1:
        if seq:
            yield seq
        return
    for k, letter in enumerate(seq):
        for rest in full_permutations(seq[:k] + seq[k + 1:]):
            yield letter + rest


def trimmed_windows(seq: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (offset, window) for the trimmed variants of seq.

    Leading-character removals come first (longest first), followed by
    trailing-character removals (longest first). Windows shorter than two
    symbols only have a trivial permutation and are skipped.
    """
    n = len(seq)
    for i in range(1, n):
        window = seq[i:]
        if len(window) > 1:
            yield i, window
    for i in range(n - 1, 0, -1):
        window = seq[:i]
        if len(window) > 1:
            yield 0, window


def search_windows(seq: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (offset, window) for every contiguous window of seq.

    Order: the full sequence, the trimmed windows, the interior windows that
    touch neither end (by decreasing length, ascending offset), and finally
    each single symbol.
    """
    n = len(seq)
    yield 0, seq
    yield from trimmed_windows(seq)
    for length in range(n - 2, 1, -1):
        for offset in range(1, n - length):
            yield offset, seq[offset:offset + length]
    if n > 1:
        for offset, letter in enumerate(seq):
            yield offset, letter


def trimmed_candidates(seq: str) -> Iterator[Candidate]:
    for offset, window in trimmed_windows(seq):
        for p in full_permutations(window):
            yield Candidate(seq=p, offset=offset)


def contiguous_substring_permutations(seq: str) -> Iterator[str]:
    for c in trimmed_candidates(seq):
        yield c.seq


def iter_candidates(seq: str) -> Iterator[Candidate]:
    for p in full_permutations(seq):
        yield Candidate(seq=p, offset=0)
    yield from trimmed_candidates(seq)


def all_candidates(seq: str) -> Iterator[str]:
    """Full permutations of seq followed by those of its trimmed windows."""
    for c in iter_candidates(seq):
        yield c.seq
