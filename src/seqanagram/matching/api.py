from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class InvalidSequenceError(ValueError):
    """Raised when a sequence violates the matcher's input contract."""


@dataclass(frozen=True)
class Candidate:
    """One permutation of a contiguous window of the shorter sequence."""

    seq: str
    offset: int  # 0-based start of the source window in the shorter sequence


@dataclass(frozen=True)
class MatchResult:
    length: int
    seq1_pos: int  # 0-based, -1 when nothing matched
    seq2_pos: int  # 0-based, -1 when nothing matched

    @classmethod
    def none(cls) -> "MatchResult":
        return cls(length=0, seq1_pos=-1, seq2_pos=-1)

    @property
    def found(self) -> bool:
        return self.length > 0


class MatchFinder(Protocol):
    """Stable runner-facing API for anagram match backends."""

    def find_match(self, seq1: str, seq2: str) -> MatchResult:
        ...
