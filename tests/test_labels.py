"""Tests for diff-derived pull request labels."""

from branch_scout.labels import labels_for_diff
from branch_scout.simple_config import LabelRule

DIFF = """\
diff --git a/Podfile b/Podfile
--- a/Podfile
+++ b/Podfile
diff --git a/AppTests/LoginTests.swift b/AppTests/LoginTests.swift
--- /dev/null
+++ b/AppTests/LoginTests.swift
"""


def setup_diff(runner):
    runner.respond("git -c core.quotePath=false diff main...feature/X", DIFF)
    runner.respond("cat -- Podfile", "pod 'Alamofire'\n")
    runner.respond("cat -- AppTests/LoginTests.swift", "class LoginTests: XCTestCase {}\n")


def test_filename_and_content_rules(git, runner):
    setup_diff(runner)
    rules = [
        LabelRule(name="Dependencies", filename="Podfile"),
        LabelRule(name="Tests", content="XCTestCase"),
        LabelRule(name="Docs", filename="README"),
    ]

    assert labels_for_diff(git, "main", "feature/X", rules) == ["Dependencies", "Tests"]


def test_duplicate_labels_are_reported_once(git, runner):
    setup_diff(runner)
    rules = [
        LabelRule(name="Dependencies", filename="Podfile"),
        LabelRule(name="Dependencies", content="Alamofire"),
    ]

    assert labels_for_diff(git, "main", "feature/X", rules) == ["Dependencies"]


def test_rule_without_conditions_never_applies(git, runner):
    setup_diff(runner)

    assert labels_for_diff(git, "main", "feature/X", [LabelRule(name="Empty")]) == []
    assert runner.commands == []


def test_no_labels_when_diff_fails(git, runner):
    runner.fail("git -c core.quotePath=false diff main...feature/X")
    rules = [LabelRule(name="Dependencies", filename="Podfile")]

    assert labels_for_diff(git, "main", "feature/X", rules) == []
