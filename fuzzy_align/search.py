from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from itertools import takewhile

from fuzzy_align.models import (
    DEFAULT_WEIGHTS,
    Candidate,
    MatchResult,
    MatchSpan,
    Row,
    ScoringWeights,
)

logger = logging.getLogger(__name__)


def fold(text: str) -> list[str]:
    """Lowercase each character on its own so indices stay aligned with ``text``."""
    return [char.lower() for char in text]


def positional_bonus(
    choice_chars: Sequence[str],
    index: int,
    is_first: bool,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Intrinsic bonus for matching the choice character at ``index``.

    Index 0 always gets the separator bonus and nothing else. Other positions
    collect the separator and camel-case bonuses, and the first pattern
    character pays a capped penalty for every character skipped before it.
    """
    if index == 0:
        return weights.separator_bonus

    prev = choice_chars[index - 1]
    cur = choice_chars[index]
    score = 0

    if prev in weights.separators:
        score += weights.separator_bonus

    if prev.islower() and cur.isupper():
        score += weights.camel_bonus

    if is_first:
        score += max(index * weights.leading_penalty, weights.max_leading_penalty)

    return score


def generate_rows(
    pattern_folded: Sequence[str],
    choice_folded: Sequence[str],
    choice_chars: Sequence[str],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[Row] | None:
    rows: list[Row] = []
    # only the first candidate of the previous row bounds the next one
    threshold = -1

    for pattern_idx, pattern_char in enumerate(pattern_folded):
        row = [
            Candidate(
                choice_index=idx,
                score=positional_bonus(
                    choice_chars, idx, pattern_idx == 0, weights=weights
                ),
            )
            for idx, char in enumerate(choice_folded)
            if idx > threshold and char == pattern_char
        ]
        if not row:
            logger.debug(
                "No candidates for pattern position %d (%r) after index %d",
                pattern_idx,
                pattern_char,
                threshold,
            )
            return None
        threshold = row[0].choice_index
        rows.append(row)

    logger.debug("Generated rows of sizes %s", [len(row) for row in rows])
    return rows


def combine_rows(
    rows: list[Row], *, weights: ScoringWeights = DEFAULT_WEIGHTS
) -> None:
    """Accumulate best scores row by row, recording back-references in place."""
    for cur_row, next_row in zip(rows, rows[1:]):
        for position, candidate in enumerate(next_row):
            # rows are sorted, so only a prefix of cur_row can precede candidate
            predecessors = takewhile(
                lambda pred, limit=candidate.choice_index: pred.choice_index < limit,
                cur_row,
            )
            # max() keeps the first maximum, so ties resolve to the leftmost
            best_ref, best_score = max(
                (
                    (back_ref, _combined_score(pred, candidate, weights))
                    for back_ref, pred in enumerate(predecessors)
                ),
                key=lambda item: item[1],
            )
            next_row[position] = replace(candidate, score=best_score, back_ref=best_ref)

    logger.debug(
        "Combined %d rows, final row scores %s",
        len(rows),
        [candidate.score for candidate in rows[-1]],
    )


def _combined_score(
    pred: Candidate, candidate: Candidate, weights: ScoringWeights
) -> int:
    gap = candidate.choice_index - pred.choice_index - 1
    if gap == 0:
        adjacency = weights.adjacency_bonus
    else:
        adjacency = weights.unmatched_penalty * gap
    return pred.score + candidate.score + adjacency


def backtrack(rows: Sequence[Row]) -> MatchResult:
    last_row = rows[-1]
    column, best = max(enumerate(last_row), key=lambda item: item[1].score)
    score = best.score

    picked: list[int] = []
    for row in reversed(rows):
        candidate = row[column]
        picked.append(candidate.choice_index)
        column = candidate.back_ref
    picked.reverse()
    logger.debug("Backtracked from final row to indices %s", picked)
    return score, picked


def fuzzy_match(
    choice: str,
    pattern: str,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> MatchResult | None:
    """Score ``pattern`` against ``choice`` and return the best matched indices.

    Returns ``None`` when the pattern cannot be aligned with the choice.
    """
    if not pattern:
        return 0, []

    choice_chars = list(choice)
    rows = generate_rows(fold(pattern), fold(choice), choice_chars, weights=weights)
    if rows is None:
        return None

    combine_rows(rows, weights=weights)
    score, picked = backtrack(rows)
    logger.debug(
        "Matched %r in %r: score=%d indices=%s", pattern, choice, score, picked
    )
    return score, picked


def compute_match_length(choice: str, pattern: str) -> MatchSpan | None:
    """Locate the greedy leftmost match of ``pattern`` and return ``(start, length)``."""
    if not pattern:
        return 0, 0

    choice_folded = fold(choice)
    start = -1
    cursor = -1
    for pattern_char in fold(pattern):
        try:
            cursor = choice_folded.index(pattern_char, cursor + 1)
        except ValueError:
            return None
        if start == -1:
            start = cursor

    return start, cursor - start + 1
