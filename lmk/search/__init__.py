"""Search and ranking functionality for lmkdir.

This package contains:
- levenshtein.py: Edit distance and alignment scorers
- ranking.py: Substring-first ranking of manifest names
"""

from .levenshtein import (
    ScorerConfig,
    ScorerUsageError,
    ScratchBuffers,
    alignment_score,
    edit_distance,
    score,
)
from .ranking import RankedCandidate, is_substring_match, rank

__all__ = [
    "ScorerConfig",
    "ScorerUsageError",
    "ScratchBuffers",
    "alignment_score",
    "edit_distance",
    "score",
    "RankedCandidate",
    "is_substring_match",
    "rank",
]
