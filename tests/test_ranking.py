"""Tests for two-tier candidate ranking."""

import pytest

from lmk.candidates import CandidateSet
from lmk.search import RankedCandidate, ScorerConfig, ScratchBuffers, is_substring_match, rank

ALIGNMENT = ScorerConfig(algorithm="alignment")
DISTANCE = ScorerConfig(algorithm="distance")


def names(ranked: list[RankedCandidate]) -> list[str]:
    return [entry.name for entry in ranked]


@pytest.fixture
def projects():
    return CandidateSet(["archive", "project_a", "project_b"])


@pytest.mark.parametrize("config", [ALIGNMENT, DISTANCE])
def test_substring_matches_come_first(projects, config):
    ranked = rank("proj", projects, config)

    assert set(names(ranked[:2])) == {"project_a", "project_b"}
    assert all(entry.is_substring_match for entry in ranked[:2])
    assert ranked[2].name == "archive"
    assert ranked[2].score is not None


def test_substring_match_ignores_case():
    assert is_substring_match("proj", "My_PROJECT")
    assert not is_substring_match("proj", "prj")


@pytest.mark.parametrize("config", [ALIGNMENT, DISTANCE])
def test_substring_match_beats_better_score(config):
    candidates = CandidateSet(["abd", "zzzzzzzzzzabczzzzzzz"])
    ranked = rank("abc", candidates, config)
    assert names(ranked) == ["zzzzzzzzzzabczzzzzzz", "abd"]


@pytest.mark.parametrize("config", [ALIGNMENT, DISTANCE])
def test_second_tier_best_first(config):
    candidates = CandidateSet(["xyz", "abx"])
    ranked = rank("abc", candidates, config)
    assert names(ranked) == ["abx", "xyz"]


def test_distance_sorts_ascending():
    ranked = rank("abc", CandidateSet(["xyzw", "xbc", "xyc"]), DISTANCE)
    assert [entry.score for entry in ranked] == [1, 2, 4]


def test_alignment_sorts_descending():
    ranked = rank("abc", CandidateSet(["xyzw", "xbc", "xyc"]), ALIGNMENT)
    scores = [entry.score for entry in ranked]
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].name == "xbc"


@pytest.mark.parametrize("config", [ALIGNMENT, DISTANCE])
def test_ties_keep_encounter_order(config):
    candidates = CandidateSet(["cc", "aa", "bb"])
    ranked = rank("q", candidates, config)
    assert names(ranked) == ["cc", "aa", "bb"]


def test_first_tier_keeps_encounter_order():
    candidates = CandidateSet(["zproj", "proj", "aproj"])
    assert names(rank("proj", candidates)) == ["zproj", "proj", "aproj"]


def test_repeated_queries_are_identical(projects):
    assert rank("arch", projects) == rank("arch", projects)


def test_empty_query_lists_everything_unscored(projects):
    ranked = rank("", projects)
    assert names(ranked) == ["archive", "project_a", "project_b"]
    assert all(entry.is_substring_match for entry in ranked)


def test_empty_candidate_set():
    assert rank("proj", CandidateSet()) == []


def test_handles_are_carried_through(projects):
    ranked = rank("proj", projects)
    for entry in ranked:
        assert entry.handle is projects.handle(entry.name)


def test_buffers_grow_to_fit_query():
    buffers = ScratchBuffers()
    rank("abcdef", CandidateSet(["xyz", "uvwxyzabc"]), ALIGNMENT, buffers)
    assert len(buffers) >= 7


def test_accepts_plain_pairs():
    ranked = rank("b", [("abc", 1), ("xyz", 2)])
    assert [(entry.name, entry.handle) for entry in ranked] == [("abc", 1), ("xyz", 2)]
