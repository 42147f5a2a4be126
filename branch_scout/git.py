"""Branch relationship inference.

Answers the questions a pull request workflow asks about a repository:
which remote branch a feature branch most likely started from, which
remote branch matches a ticket key, whether a branch has unpushed
commits, and whether a diff touches given files or content.

Inference never raises. A failed query means "no information" and
yields an empty list, ``None`` or ``False``.
"""

import shlex
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Tuple

from .errors import GitPushError
from .logger import get_logger
from .query import QueryError, QueryRunner, ShellQueryRunner
from .simple_config import Config
from .utils.branch_ranking import (
    parse_remote_branch_listing,
    pick_branch,
    rank_candidates,
    strip_remote_prefix,
)
from .utils.git_diff import diff_header_lines, new_file_paths
from .utils.remote_url import repository_shorthand_from_url

BranchAndCommits = Tuple[str, int]

# Emitted for a candidate whose count cannot be computed, keeping one
# output line per candidate.
UNKNOWN_COUNT = "-"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Git:
    """Git queries used to infer branch relationships."""

    def __init__(
        self,
        runner: Optional[QueryRunner] = None,
        remote: str = "origin",
        recency: timedelta = timedelta(days=30),
        clock: Callable[[], datetime] = _utc_now,
        priority_branch: Optional[str] = None,
    ):
        """Initialize with a query runner.

        Args:
            runner: Executes git commands (default: bash in the current directory)
            remote: Remote whose branches are considered
            recency: Only commits newer than this count towards base inference
            clock: Returns the current time
            priority_branch: Default priority branch for base branch selection
        """
        self.runner = runner or ShellQueryRunner()
        self.remote = remote
        self.recency = recency
        self.clock = clock
        self.priority_branch = priority_branch
        self.logger = get_logger()

    @classmethod
    def from_config(cls, config: Config, repo_path: str = ".") -> "Git":
        runner = ShellQueryRunner(repo_path, timeout=config.git.query_timeout)
        return cls(
            runner=runner,
            remote=config.git.remote,
            recency=timedelta(days=config.git.recency_days),
            priority_branch=config.base.priority,
        )

    def _capture(self, command: str) -> Optional[str]:
        """Run a query, returning None instead of raising on failure."""
        try:
            return self.runner.run(command)
        except QueryError as e:
            self.logger.debug(str(e))
            return None

    def _remote_ref(self, branch: str) -> str:
        return f"{self.remote}/{branch}"

    # ============================================================================
    # Commit distances
    # ============================================================================

    def commit_distances(
        self,
        from_branch: str,
        to_branches: List[str],
        after: Optional[datetime] = None,
    ) -> List[BranchAndCommits]:
        """Count commits on ``from_branch`` missing from each of ``to_branches``.

        All counts are computed in one shell invocation. Results keep the
        order of ``to_branches``; candidates whose count cannot be read
        (deleted or unreachable branches) are left out.

        Args:
            from_branch: Branch whose commits are counted
            to_branches: Candidate branches to compare against
            after: Only count commits made after this time

        Returns:
            (candidate, commits) pairs, or an empty list if git failed
        """
        if not to_branches:
            return []

        after_parameter = f" --after={int(after.timestamp())}" if after else ""
        command = "; ".join(
            f"git rev-list --count{after_parameter} "
            f"{shlex.quote(f'{candidate}..{from_branch}')} 2>/dev/null "
            f"|| echo {UNKNOWN_COUNT}"
            for candidate in to_branches
        )

        output = self._capture(command)
        if output is None:
            return []

        distances: List[BranchAndCommits] = []
        for candidate, line in zip(to_branches, output.splitlines()):
            try:
                commits = int(line.strip())
            except ValueError:
                continue
            if commits < 0:
                continue
            distances.append((candidate, commits))
        return distances

    def is_branch_ahead_of_remote(self, branch: str) -> bool:
        """Check whether ``branch`` has commits its remote counterpart lacks."""
        distances = self.commit_distances(branch, [self._remote_ref(branch)])
        if not distances:
            return False
        return distances[0][1] > 0

    # ============================================================================
    # Branch lookup
    # ============================================================================

    def remote_branches(self) -> List[str]:
        """List remote-qualified branch names, without the symbolic HEAD."""
        output = self._capture("git branch -r")
        if output is None:
            return []
        return parse_remote_branch_listing(output, self.remote)

    def closest_branch(
        self, target_branch: str, priority_branch: Optional[str] = None
    ) -> Optional[str]:
        """Infer the remote branch ``target_branch`` most likely grew from.

        Candidates are all remote branches ranked by how many recent
        commits of ``target_branch`` they lack. Branches at the same
        distance collapse into the first one listed. ``priority_branch``
        wins only if it survives that ranking.

        Returns:
            Branch name without remote prefix, or None if nothing qualifies
        """
        branches = self.remote_branches()
        if not branches:
            self.logger.debug("No remote branches to rank")
            return None

        cutoff = self.clock() - self.recency
        distances = self.commit_distances(target_branch, branches, after=cutoff)
        ranked = rank_candidates(distances, self.remote)
        self.logger.debug(f"Base branch candidates for {target_branch}: {ranked}")

        closest = pick_branch(ranked, priority_branch)
        if closest is not None and closest == priority_branch:
            self.logger.debug(f"Using priority branch {priority_branch}")
        return closest

    def remote_branch(self, containing: str) -> Optional[str]:
        """Return the first remote branch whose name contains ``containing``."""
        command = f"git branch -r | grep -F -- {shlex.quote(containing)}"
        output = self._capture(command)
        if output is None:
            return None

        matches = parse_remote_branch_listing(output, self.remote)
        if not matches:
            return None
        return strip_remote_prefix(matches[0], self.remote)

    # ============================================================================
    # Diff inspection
    # ============================================================================

    def branch_diff(self, base_branch: str, target_branch: str) -> Optional[str]:
        """Get the diff of ``target_branch`` since it left ``base_branch``."""
        # Unquoted paths keep non-ASCII names readable in +++ headers
        revisions = shlex.quote(f"{base_branch}...{target_branch}")
        return self._capture(f"git -c core.quotePath=false diff {revisions}")

    def diff_includes_filename(
        self, base_branch: str, target_branch: str, containing: str
    ) -> bool:
        """Check whether any changed file's diff header contains ``containing``."""
        diff = self.branch_diff(base_branch, target_branch)
        if diff is None:
            return False
        return any(containing in line for line in diff_header_lines(diff))

    def diff_includes_file(
        self, base_branch: str, target_branch: str, with_content: str
    ) -> bool:
        """Check whether any changed file currently contains ``with_content``.

        Files are read from the working tree, not from ``target_branch``.
        """
        diff = self.branch_diff(base_branch, target_branch)
        if diff is None:
            return False

        for path in new_file_paths(diff):
            content = self.file_content(path)
            if content is not None and with_content in content:
                return True
        return False

    def file_content(self, path: str) -> Optional[str]:
        """Read a file from the working tree."""
        return self._capture(f"cat -- {shlex.quote(path)}")

    # ============================================================================
    # Remote and commit metadata
    # ============================================================================

    def repository_shorthand(self) -> Optional[str]:
        """Return ``owner/name`` of the remote, or None if it is not set up."""
        output = self._capture(f"git ls-remote --get-url {shlex.quote(self.remote)}")
        if output is None:
            return None
        return repository_shorthand_from_url(output)

    def latest_commit_date(self, branch: str) -> Optional[datetime]:
        """Return the committer date of the tip of ``branch`` in UTC."""
        output = self._capture(f"git log -1 --pretty=format:%ct {shlex.quote(branch)}")
        if output is None:
            return None
        try:
            return datetime.fromtimestamp(int(output.strip()), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None

    def push_branch(self, branch: str) -> None:
        """Push ``branch`` to the remote.

        Raises:
            GitPushError: If the push fails
        """
        command = f"git push {shlex.quote(self.remote)} {shlex.quote(branch)}"
        try:
            self.runner.run(command)
        except QueryError as e:
            raise GitPushError(branch, self.remote, e.detail) from e
        self.logger.debug(f"Pushed {branch} to {self.remote}")
