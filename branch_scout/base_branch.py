"""Base branch selection for new pull requests."""

from typing import Optional

from .errors import BaseBranchNotFoundError, GitRemoteMissingError, InvalidBaseBranchError
from .git import Git
from .logger import get_logger


def select_base_branch(
    git: Git,
    target_branch: str,
    term: Optional[str] = None,
    priority_branch: Optional[str] = None,
) -> str:
    """Pick the branch a pull request from ``target_branch`` should merge into.

    An explicit ``term`` is matched against remote branch names. Without
    one, the closest remote branch is inferred from commit history.
    ``priority_branch`` defaults to the priority branch ``git`` was
    configured with.

    Raises:
        InvalidBaseBranchError: If ``term`` matches no remote branch
        GitRemoteMissingError: If the remote is not configured
        BaseBranchNotFoundError: If no base branch can be inferred
    """
    logger = get_logger()

    if term:
        branch = git.remote_branch(containing=term)
        if branch is None:
            raise InvalidBaseBranchError(term)
        logger.debug(f"Base branch {branch} matched term '{term}'")
        return branch

    if git.repository_shorthand() is None:
        raise GitRemoteMissingError(git.remote)

    if priority_branch is None:
        priority_branch = git.priority_branch

    branch = git.closest_branch(target_branch, priority_branch=priority_branch)
    if branch is None:
        raise BaseBranchNotFoundError(target_branch)
    logger.info(f"Inferred base branch {branch} for {target_branch}")
    return branch
