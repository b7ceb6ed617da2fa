from .api import Candidate, InvalidSequenceError, MatchFinder, MatchResult
from .finder import AnagramMatchFinder, find_match, literal_match, order_by_length
from .permutations import (
    all_candidates,
    contiguous_substring_permutations,
    full_permutations,
    iter_candidates,
    search_windows,
    trimmed_candidates,
    trimmed_windows,
)

__all__ = [
    "Candidate",
    "InvalidSequenceError",
    "MatchFinder",
    "MatchResult",
    "AnagramMatchFinder",
    "find_match",
    "literal_match",
    "order_by_length",
    "all_candidates",
    "contiguous_substring_permutations",
    "full_permutations",
    "iter_candidates",
    "search_windows",
    "trimmed_candidates",
    "trimmed_windows",
]
