from __future__ import annotations

import logging
from typing import Optional, Tuple

from .api import InvalidSequenceError, MatchFinder, MatchResult
from .permutations import full_permutations, search_windows

logger = logging.getLogger(__name__)


def _first_permutation_hit(window: str, long: str) -> Optional[int]:
    """Offset in long of the first permutation of window found there, else None."""
    for p in full_permutations(window):
        pos = long.find(p)
        if pos != -1:
            return pos
    return None


def _placed(short_is_seq1: bool, length: int, short_pos: int, long_pos: int) -> MatchResult:
    # Offsets are assigned by which original input is the shorter one, not by role.
    if short_is_seq1:
        return MatchResult(length=length, seq1_pos=short_pos, seq2_pos=long_pos)
    return MatchResult(length=length, seq1_pos=long_pos, seq2_pos=short_pos)


def order_by_length(seq1: str, seq2: str) -> Tuple[str, str, bool]:
    """
    Return (short, long, short_is_seq1).

    Equal lengths are split by the lexicographically smaller sequence so that
    swapping the arguments searches the same way.
    """
    short_is_seq1 = (len(seq1), seq1) <= (len(seq2), seq2)
    if short_is_seq1:
        return seq1, seq2, True
    return seq2, seq1, False


def literal_match(seq1: str, seq2: str) -> Optional[MatchResult]:
    """Identity and literal (or reversed) containment checks; None if neither hits."""
    if seq1 == seq2:
        return MatchResult(length=len(seq1), seq1_pos=0, seq2_pos=0)

    short, long, short_is_seq1 = order_by_length(seq1, seq2)
    pos = long.find(short)
    if pos == -1:
        pos = long.find(short[::-1])
    if pos != -1:
        return _placed(short_is_seq1, len(short), 0, pos)
    return None


def find_match(seq1: str, seq2: str) -> MatchResult:
    """
    Find the longest contiguous substring of one sequence that is an anagram
    of a contiguous substring of the other.

    Stages, each returning on success:
      1) identical sequences
      2) the shorter sequence (or its reverse) occurs literally in the longer
      3) permutations of windows of the shorter sequence, longest window
         first; ties go to the window enumerated first

    Returns MatchResult.none() when the sequences share no symbol.
    """
    if not seq1 or not seq2:
        raise InvalidSequenceError("Sequences must be non-empty.")

    fast = literal_match(seq1, seq2)
    if fast is not None:
        return fast

    # Only the shorter sequence is permuted.
    short, long, short_is_seq1 = order_by_length(seq1, seq2)

    best: Optional[Tuple[int, int, int]] = None  # (length, short_pos, long_pos)
    for offset, window in search_windows(short):
        if best is not None and len(window) <= best[0]:
            continue
        hit = _first_permutation_hit(window, long)
        if hit is not None:
            logger.debug("Window %s at %d matched at %d in longer sequence", window, offset, hit)
            best = (len(window), offset, hit)
            if len(window) == len(short):
                break

    if best is None:
        return MatchResult.none()
    return _placed(short_is_seq1, *best)


class AnagramMatchFinder(MatchFinder):
    """Backend running the identity, literal and permutation search stages."""

    def find_match(self, seq1: str, seq2: str) -> MatchResult:
        return find_match(seq1, seq2)
