"""Branch Scout: infer pull request base branches from git history."""

from .base_branch import select_base_branch
from .errors import (
    BaseBranchNotFoundError,
    BranchScoutError,
    GitPushError,
    GitRemoteMissingError,
    InvalidBaseBranchError,
)
from .git import Git
from .labels import labels_for_diff
from .query import QueryError, QueryRunner, ShellQueryRunner

__version__ = "0.1.0"

__all__ = [
    "BaseBranchNotFoundError",
    "BranchScoutError",
    "Git",
    "GitPushError",
    "GitRemoteMissingError",
    "InvalidBaseBranchError",
    "QueryError",
    "QueryRunner",
    "ShellQueryRunner",
    "labels_for_diff",
    "select_base_branch",
]
