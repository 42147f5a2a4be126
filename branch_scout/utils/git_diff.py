"""Unified diff scanning helpers."""

from typing import List

DIFF_HEADER_PREFIX = "diff --git"
NEW_FILE_PREFIX = "+++ b/"


def diff_header_lines(diff: str) -> List[str]:
    """Return the ``diff --git`` header line of every file in a diff."""
    return [line for line in diff.splitlines() if line.startswith(DIFF_HEADER_PREFIX)]


def new_file_paths(diff: str) -> List[str]:
    """Return the post-image path of every file in a diff.

    Deleted files have a ``+++ /dev/null`` header and are not included.
    Git pads names containing spaces with a trailing tab, which is removed.
    """
    return [
        line[len(NEW_FILE_PREFIX):].rstrip("\t")
        for line in diff.splitlines()
        if line.startswith(NEW_FILE_PREFIX)
    ]
