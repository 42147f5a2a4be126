"""Repository query execution.

Every fact Branch Scout learns about a repository comes from running a
git command line through a ``QueryRunner``. The engine formats commands
as plain shell strings; runners only execute them.
"""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class QueryError(Exception):
    """Raised when a repository query cannot run or exits non-zero."""

    def __init__(self, command: str, detail: str = "", returncode: Optional[int] = None):
        self.command = command
        self.detail = detail
        self.returncode = returncode
        message = f"Query failed: {command}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class QueryRunner(ABC):
    """Runs a shell command against a repository and returns its stdout."""

    @abstractmethod
    def run(self, command: str) -> str:
        """Run ``command`` and return captured standard output.

        Raises:
            QueryError: If the command cannot start or exits non-zero
        """
        ...


class ShellQueryRunner(QueryRunner):
    """Runs commands with bash inside a repository directory.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD.
    """

    def __init__(self, repo_path: str = ".", timeout: Optional[float] = None):
        """Initialize with repository path.

        Args:
            repo_path: Path to git repository (default: current directory)
            timeout: Seconds before a query is abandoned, or None to wait forever
        """
        self.repo_path = Path(repo_path)
        self.timeout = timeout

    def run(self, command: str) -> str:
        try:
            result = subprocess.run(
                ["bash", "-c", command],
                cwd=self.repo_path,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            raise QueryError(command, (e.stderr or "").strip(), e.returncode) from e
        except subprocess.TimeoutExpired as e:
            raise QueryError(command, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise QueryError(command, str(e)) from e
        return result.stdout
