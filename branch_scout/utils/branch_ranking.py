"""Ranking helpers for base branch inference."""

from typing import List, Optional, Tuple

BranchAndCommits = Tuple[str, int]


def strip_remote_prefix(branch: str, remote: str = "origin") -> str:
    """Drop a leading ``<remote>/`` from a branch name."""
    prefix = f"{remote}/"
    if branch.startswith(prefix):
        return branch[len(prefix):]
    return branch


def parse_remote_branch_listing(output: str, remote: str = "origin") -> List[str]:
    """Parse ``git branch -r`` output into remote-qualified branch names.

    The symbolic ``<remote>/HEAD -> <remote>/main`` pointer is skipped.
    """
    branches: List[str] = []
    for line in output.splitlines():
        fields = line.split()
        if not fields:
            continue
        name = fields[0]
        if name == f"{remote}/HEAD":
            continue
        branches.append(name)
    return branches


def collapse_ties(ranked: List[BranchAndCommits]) -> List[BranchAndCommits]:
    """Keep the first branch of every run of equal commit counts."""
    collapsed: List[BranchAndCommits] = []
    for branch, commits in ranked:
        if collapsed and collapsed[-1][1] == commits:
            continue
        collapsed.append((branch, commits))
    return collapsed


def rank_candidates(
    distances: List[BranchAndCommits], remote: str = "origin"
) -> List[str]:
    """Order candidate base branches from closest to farthest.

    Zero distances are dropped, names lose their remote prefix, and only
    the first branch seen at each distance survives. ``sorted`` is stable,
    so the survivor at each distance is the one listed first by git.
    """
    with_commits = [
        (strip_remote_prefix(branch, remote), commits)
        for branch, commits in distances
        if commits > 0
    ]
    ranked = sorted(with_commits, key=lambda item: item[1])
    return [branch for branch, _ in collapse_ties(ranked)]


def pick_branch(ranked: List[str], priority_branch: Optional[str] = None) -> Optional[str]:
    """Return the priority branch if it survived ranking, else the closest one."""
    if priority_branch is not None and priority_branch in ranked:
        return priority_branch
    return ranked[0] if ranked else None
