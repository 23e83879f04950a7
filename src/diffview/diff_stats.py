"""Summary statistics for parsed diffs."""

from typing import Sequence

from diffview.diff_types import ChangeType, DiffStats, FileDiff


def compute_stats(files: Sequence[FileDiff]) -> DiffStats:
    """
    Count added and deleted lines across all files.

    Args:
        files: Parsed files

    Returns:
        Totals for added lines, deleted lines and files
    """
    additions = 0
    deletions = 0

    for file_diff in files:
        for hunk in file_diff.hunks:
            for change in hunk.changes:
                if change.type == ChangeType.ADD:
                    additions += 1

                elif change.type == ChangeType.DELETE:
                    deletions += 1

    return DiffStats(additions=additions, deletions=deletions, files=len(files))
