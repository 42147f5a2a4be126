"""Errors raised to callers of Branch Scout."""


class BranchScoutError(Exception):
    """Base class for Branch Scout errors."""

    pass


class GitPushError(BranchScoutError):
    """Raised when pushing a branch to its remote fails."""

    def __init__(self, branch: str, remote: str, detail: str = ""):
        self.branch = branch
        self.remote = remote
        message = f"Failed to push {branch} to {remote}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class GitRemoteMissingError(BranchScoutError):
    """Raised when the configured remote does not exist."""

    def __init__(self, remote: str = "origin"):
        self.remote = remote
        super().__init__(
            f"Git remote named '{remote}' is missing, please add it with "
            f"`git remote add {remote} {{git_url}}`"
        )


class InvalidBaseBranchError(BranchScoutError):
    """Raised when an explicit base branch term matches no remote branch."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"No remote branch found matching specified term '{term}'")


class BaseBranchNotFoundError(BranchScoutError):
    """Raised when no base branch can be inferred for a branch."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f"Could not infer a base branch for '{branch}', "
            "please specify one explicitly"
        )
