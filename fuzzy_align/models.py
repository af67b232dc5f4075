from __future__ import annotations

from dataclasses import dataclass

MatchResult = tuple[int, list[int]]
MatchSpan = tuple[int, int]


@dataclass(frozen=True)
class ScoringWeights:
    adjacency_bonus: int = 5
    separator_bonus: int = 10
    camel_bonus: int = 10
    # applied for every character before the first match
    leading_penalty: int = -3
    max_leading_penalty: int = -9
    unmatched_penalty: int = -1
    separators: str = " _-/\\"


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class Candidate:
    choice_index: int
    score: int
    back_ref: int = 0


Row = list[Candidate]
