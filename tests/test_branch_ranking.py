"""Tests for base branch ranking helpers."""

from branch_scout.utils.branch_ranking import (
    collapse_ties,
    parse_remote_branch_listing,
    pick_branch,
    rank_candidates,
    strip_remote_prefix,
)


class TestStripRemotePrefix:
    def test_strips_leading_remote(self):
        assert strip_remote_prefix("origin/release/1") == "release/1"

    def test_keeps_inner_occurrences(self):
        assert strip_remote_prefix("feature/origin/x") == "feature/origin/x"

    def test_other_remote(self):
        assert strip_remote_prefix("upstream/main", "upstream") == "main"
        assert strip_remote_prefix("upstream/main") == "upstream/main"


class TestParseRemoteBranchListing:
    def test_skips_symbolic_head(self):
        output = "  origin/HEAD -> origin/main\n  origin/main\n  origin/develop\n"

        assert parse_remote_branch_listing(output) == ["origin/main", "origin/develop"]

    def test_ignores_blank_lines(self):
        assert parse_remote_branch_listing("\n  origin/main\n\n") == ["origin/main"]

    def test_empty_output(self):
        assert parse_remote_branch_listing("") == []


class TestRankCandidates:
    def test_collapses_ties_to_first_seen(self):
        distances = [("b1", 1), ("b2", 1), ("b3", 2), ("b4", 2), ("b5", 3)]

        assert rank_candidates(distances) == ["b1", "b3", "b5"]

    def test_sorts_by_distance(self):
        distances = [("origin/main", 40), ("origin/release/1", 5), ("origin/release/2", 5)]

        assert rank_candidates(distances) == ["release/1", "main"]

    def test_sort_is_stable_for_equal_distances(self):
        distances = [("z", 3), ("y", 1), ("x", 1), ("w", 3)]

        assert rank_candidates(distances) == ["y", "z"]

    def test_drops_zero_distances(self):
        assert rank_candidates([("a", 0), ("b", 0)]) == []

    def test_empty(self):
        assert rank_candidates([]) == []


class TestCollapseTies:
    def test_only_adjacent_equal_counts_collapse(self):
        ranked = [("a", 1), ("b", 2), ("c", 1)]

        assert collapse_ties(ranked) == ranked


class TestPickBranch:
    def test_priority_branch_in_list_wins(self):
        assert pick_branch(["b1", "b3", "b5"], "b5") == "b5"

    def test_priority_branch_missing_falls_back_to_first(self):
        assert pick_branch(["release/1", "main"], "release/2") == "release/1"

    def test_empty_list(self):
        assert pick_branch([]) is None
        assert pick_branch([], "main") is None
