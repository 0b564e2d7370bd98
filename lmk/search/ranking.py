"""Two-tier ranking of candidate names against a query."""

from dataclasses import dataclass
from typing import Any, Iterable

from .levenshtein import ScorerConfig, ScratchBuffers, score


@dataclass(frozen=True)
class RankedCandidate:
    """One entry of a ranked result.

    `score` is None for substring matches (the unscored first tier) and the
    similarity value otherwise.
    """

    name: str
    handle: Any
    score: float | None = None

    @property
    def is_substring_match(self) -> bool:
        return self.score is None


def is_substring_match(query: str, name: str) -> bool:
    """Case-insensitive containment test."""
    return query.lower() in name.lower()


def rank(
    query: str,
    candidates: Iterable[tuple[str, Any]],
    config: ScorerConfig | None = None,
    buffers: ScratchBuffers | None = None,
) -> list[RankedCandidate]:
    """Rank (name, handle) pairs against a query.

    Names containing the query (ignoring case) come first, unscored, in the
    order they were encountered. The rest follow, sorted by similarity:
    best first, ties kept in encounter order.

    An empty query is contained in every name, so it returns the full
    listing unscored.

    Args:
        query: What the user has typed so far
        candidates: Iterable of (name, handle) pairs, e.g. a CandidateSet
        config: Scorer settings (defaults to ScorerConfig())
        buffers: Scratch buffers reused across every comparison of this pass

    Returns:
        A new list of RankedCandidate.
    """
    config = config or ScorerConfig()
    if buffers is None:
        buffers = ScratchBuffers()
    # The shorter operand never exceeds the query.
    buffers.reserve(len(query) + 1)

    exact = []
    scored = []
    for name, handle in candidates:
        if is_substring_match(query, name):
            exact.append(RankedCandidate(name, handle))
        else:
            value = score(query, name, config, buffers)
            scored.append(RankedCandidate(name, handle, value))

    scored.sort(key=lambda entry: entry.score, reverse=config.higher_is_better)
    return exact + scored
