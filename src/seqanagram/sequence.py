from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .matching.api import InvalidSequenceError


DNA_ALPHABET = "ACGT"
DNA_SET = set(DNA_ALPHABET)

PAIR_RE = re.compile(r"^\s*([A-Za-z]+)\s*,\s*([A-Za-z]+)\s*$")


class InvalidPairError(ValueError):
    """Raised when a pair string cannot be split into two DNA sequences."""


@dataclass(frozen=True)
class SequencePair:
    seq1: str
    seq2: str
    label: str = ""

    @property
    def display(self) -> str:
        return f"{self.seq1} / {self.seq2}"


# Exercise sample pairs, used when no pairs are supplied.
DEFAULT_PAIRS: List[SequencePair] = [
    SequencePair("ACGT", "GTC"),
    SequencePair("ACGT", "CAT"),
    SequencePair("ACA", "AC"),
    SequencePair("ACA", "GT"),
]


def normalize_sequence(raw: str) -> str:
    seq = re.sub(r"\s+", "", str(raw)).upper()
    if not seq:
        raise InvalidSequenceError("Empty DNA sequence.")
    bad = sorted(set(seq) - DNA_SET)
    if bad:
        raise InvalidSequenceError(
            f"Invalid symbol(s) {''.join(bad)} in '{seq}'. Must be one of {DNA_ALPHABET}."
        )
    return seq


def parse_pair(token: str, label: str = "") -> SequencePair:
    """
    Parse a pair string like 'ACGT,gtc' into a SequencePair.
    Case-insensitive; whitespace around the comma is allowed.
    """
    m = PAIR_RE.match(str(token))
    if not m:
        raise InvalidPairError(f'Invalid pair string: "{token}"')
    try:
        seq1 = normalize_sequence(m.group(1))
        seq2 = normalize_sequence(m.group(2))
    except InvalidSequenceError as e:
        raise InvalidPairError(f'Invalid pair string: "{token}" ({e})') from e
    return SequencePair(seq1=seq1, seq2=seq2, label=label)


def pair_from_values(seq1: str, seq2: str, label: str = "") -> SequencePair:
    try:
        return SequencePair(normalize_sequence(seq1), normalize_sequence(seq2), label)
    except InvalidSequenceError as e:
        raise InvalidPairError(f"Invalid pair {seq1!r}, {seq2!r}: {e}") from e
