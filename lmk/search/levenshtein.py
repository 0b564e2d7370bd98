"""String similarity scoring for candidate ranking.

Two row-compressed dynamic programming scorers:
- edit_distance: weighted Levenshtein distance (lower is better)
- alignment_score: match-rewarding alignment with streak bonuses (higher is better)

Both keep a single DP row sized to the shorter string plus one, so callers
ranking many candidates can pass the same ScratchBuffers to every call.
"""

from dataclasses import dataclass, replace
from typing import Literal

ALGORITHMS = ("alignment", "distance")

WEIGHT_FIELDS = (
    "deletion",
    "insertion",
    "substitution",
    "match",
    "first_match_bonus",
    "consecutive_bonus",
)


class ScorerUsageError(ValueError):
    """Raised when a scorer is called in violation of its contract."""


@dataclass(frozen=True)
class ScorerConfig:
    """Immutable scorer settings: algorithm, weights and case mode.

    Penalties (deletion, insertion, substitution) and rewards (match and the
    two bonuses) are all non-negative. edit_distance only reads the three
    penalties.
    """

    algorithm: Literal["alignment", "distance"] = "alignment"
    deletion: float = 1
    insertion: float = 1
    substitution: float = 1
    match: float = 2
    first_match_bonus: float = 2
    consecutive_bonus: float = 3
    case_sensitive: bool = False

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ScorerUsageError(
                f"Unknown scorer '{self.algorithm}' (expected one of: {', '.join(ALGORITHMS)})"
            )
        for name in WEIGHT_FIELDS:
            if getattr(self, name) < 0:
                raise ScorerUsageError(f"Scorer weight '{name}' must be non-negative")

    @property
    def higher_is_better(self) -> bool:
        return self.algorithm == "alignment"

    def swapped(self) -> "ScorerConfig":
        """Return a copy with deletion and insertion penalties exchanged."""
        return replace(self, deletion=self.insertion, insertion=self.deletion)

    @classmethod
    def from_dict(cls, data: dict) -> "ScorerConfig":
        """Build a config from a plain mapping (as loaded from config.yaml)."""
        unknown = set(data) - set(WEIGHT_FIELDS) - {"algorithm", "case_sensitive"}
        if unknown:
            raise ScorerUsageError(f"Unknown scorer settings: {', '.join(sorted(unknown))}")
        return cls(**data)


class ScratchBuffers:
    """Caller-owned working memory for the scorers.

    Holds one DP row and one consecutive-match flag per column. Resize once
    with reserve() before a ranking pass, then reuse across every comparison
    in that pass. Not safe to share between concurrent ranking passes.
    """

    def __init__(self, size: int = 0):
        self.row: list[float] = [0] * size
        self.streak: list[bool] = [False] * size

    def __len__(self) -> int:
        return min(len(self.row), len(self.streak))

    def reserve(self, size: int) -> None:
        """Grow both arrays to at least `size` slots."""
        if len(self.row) < size:
            self.row.extend([0] * (size - len(self.row)))
        if len(self.streak) < size:
            self.streak.extend([False] * (size - len(self.streak)))

    @classmethod
    def for_strings(cls, lhs: str, rhs: str) -> "ScratchBuffers":
        return cls(min(len(lhs), len(rhs)) + 1)


def _fold(text: str, case_sensitive: bool) -> list[str]:
    # Per character, so the result has one entry per input character.
    if case_sensitive:
        return list(text)
    return [ch.lower() for ch in text]


def _check_buffers(buffers: ScratchBuffers, src_len: int) -> None:
    if len(buffers) <= src_len:
        raise ScorerUsageError(
            f"Scratch buffers too small: need {src_len + 1} slots, have {len(buffers)}"
        )


def edit_distance(
    lhs: str,
    rhs: str,
    config: ScorerConfig | None = None,
    buffers: ScratchBuffers | None = None,
) -> float:
    """Weighted Levenshtein distance turning `lhs` into `rhs`.

    Deleting a character of `lhs` costs config.deletion, inserting a character
    of `rhs` costs config.insertion and replacing one costs
    config.substitution. Matching characters are free. Empty inputs are
    allowed: the distance is then the cost of inserting (or deleting) the
    whole other string.

    Args:
        lhs: Source string
        rhs: Target string
        config: Weights and case mode (defaults to the distance defaults)
        buffers: Scratch buffers with at least min(len(lhs), len(rhs)) + 1
            slots. Allocated per call when omitted.

    Returns:
        The minimum total cost.
    """
    config = config or ScorerConfig(algorithm="distance")
    if buffers is None:
        buffers = ScratchBuffers.for_strings(lhs, rhs)

    deletion, insertion = config.deletion, config.insertion
    if len(lhs) > len(rhs):
        lhs, rhs = rhs, lhs
        deletion, insertion = insertion, deletion
    _check_buffers(buffers, len(lhs))

    src = _fold(lhs, config.case_sensitive)
    tgt = _fold(rhs, config.case_sensitive)
    substitution = config.substitution
    row = buffers.row

    # Row 0: deleting every source character.
    for j in range(len(src) + 1):
        row[j] = j * deletion

    for i, t in enumerate(tgt):
        diag = row[0]
        row[0] = (i + 1) * insertion
        for j, s in enumerate(src):
            up = row[j + 1]
            if s == t:
                cost = diag
            else:
                cost = min(up + insertion, row[j] + deletion, diag + substitution)
            diag = up
            row[j + 1] = cost

    return row[len(src)]


def alignment_score(
    lhs: str,
    rhs: str,
    config: ScorerConfig | None = None,
    buffers: ScratchBuffers | None = None,
) -> float:
    """Maximum alignment score between `lhs` and `rhs`.

    Every matched character earns config.match, plus config.first_match_bonus
    when it is the first character of the shorter string, plus
    config.consecutive_bonus when the previous step of the same alignment path
    was also a match. Deletions, insertions and substitutions subtract their
    penalties. Runs of matched characters therefore score higher than the
    same number of scattered matches.

    The operands are put in a canonical order (shorter first, ties broken
    lexicographically) and the deletion/insertion penalties are exchanged
    along with them, so alignment_score(a, b, c) == alignment_score(b, a,
    c.swapped()).

    Raises:
        ScorerUsageError: If either string is empty or the buffers are too small.
    """
    if not lhs or not rhs:
        raise ScorerUsageError("alignment_score requires two non-empty strings")

    config = config or ScorerConfig()
    if buffers is None:
        buffers = ScratchBuffers.for_strings(lhs, rhs)

    deletion, insertion = config.deletion, config.insertion
    if (len(lhs), lhs) > (len(rhs), rhs):
        lhs, rhs = rhs, lhs
        deletion, insertion = insertion, deletion
    _check_buffers(buffers, len(lhs))

    src = _fold(lhs, config.case_sensitive)
    tgt = _fold(rhs, config.case_sensitive)
    substitution = config.substitution
    reward = config.match
    first_bonus = config.first_match_bonus
    streak_bonus = config.consecutive_bonus
    row = buffers.row
    streak = buffers.streak

    for j in range(len(src) + 1):
        row[j] = -j * deletion
        streak[j] = False

    for i, t in enumerate(tgt):
        diag, diag_streak = row[0], streak[0]
        row[0] = -(i + 1) * insertion
        streak[0] = False
        for j, s in enumerate(src):
            up, up_streak = row[j + 1], streak[j + 1]
            gap = max(up - insertion, row[j] - deletion)
            if s == t:
                best = diag + reward
                if j == 0:
                    best += first_bonus
                if diag_streak:
                    best += streak_bonus
                matched = best >= gap
                if not matched:
                    best = gap
            else:
                best = max(gap, diag - substitution)
                matched = False
            diag, diag_streak = up, up_streak
            row[j + 1] = best
            streak[j + 1] = matched

    return row[len(src)]


def score(
    lhs: str,
    rhs: str,
    config: ScorerConfig | None = None,
    buffers: ScratchBuffers | None = None,
) -> float:
    """Score `lhs` against `rhs` with the algorithm named in `config`."""
    config = config or ScorerConfig()
    if config.algorithm == "distance":
        return edit_distance(lhs, rhs, config, buffers)
    return alignment_score(lhs, rhs, config, buffers)
