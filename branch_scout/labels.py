"""Pull request labels derived from a branch diff."""

from typing import List

from .git import Git
from .simple_config import LabelRule


def rule_applies(git: Git, base_branch: str, target_branch: str, rule: LabelRule) -> bool:
    if rule.filename and git.diff_includes_filename(base_branch, target_branch, rule.filename):
        return True
    if rule.content and git.diff_includes_file(base_branch, target_branch, rule.content):
        return True
    return False


def labels_for_diff(
    git: Git, base_branch: str, target_branch: str, rules: List[LabelRule]
) -> List[str]:
    """Return the labels of all matching rules, in rule order, without duplicates."""
    labels: List[str] = []
    for rule in rules:
        if rule.name in labels:
            continue
        if rule_applies(git, base_branch, target_branch, rule):
            labels.append(rule.name)
    return labels
