"""Shared test fixtures for Branch Scout.

Provides a fake query runner and a Git instance with a fixed clock.
"""

from datetime import datetime, timezone
from typing import Callable, List, Tuple, Union

import pytest

from branch_scout.git import Git
from branch_scout.query import QueryError, QueryRunner

# 30 days before NOW
NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)
CUTOFF_TIMESTAMP = 1711929600

Matcher = Union[str, Callable[[str], bool]]


class FakeQueryRunner(QueryRunner):
    """Returns canned output for known commands and fails for the rest."""

    def __init__(self):
        self.responses: List[Tuple[Matcher, Union[str, Exception]]] = []
        self.commands: List[str] = []

    def respond(self, match: Matcher, output: Union[str, Exception]) -> None:
        self.responses.append((match, output))

    def fail(self, match: Matcher, detail: str = "fatal: not a git repository") -> None:
        self.respond(match, QueryError(str(match), detail, 128))

    def run(self, command: str) -> str:
        self.commands.append(command)
        for match, output in self.responses:
            matched = match(command) if callable(match) else match == command
            if not matched:
                continue
            if isinstance(output, Exception):
                raise output
            return output
        raise QueryError(command, "no canned response", 1)


def is_rev_list(command: str) -> bool:
    return command.startswith("git rev-list")


@pytest.fixture
def runner() -> FakeQueryRunner:
    return FakeQueryRunner()


@pytest.fixture
def git(runner: FakeQueryRunner) -> Git:
    return Git(runner=runner, clock=lambda: NOW)
