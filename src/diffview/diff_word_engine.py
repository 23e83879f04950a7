"""
Word-level highlighting for small line replacements.

A run of deleted lines immediately followed by a run of added lines is treated
as a replacement block.  When both runs are small, deleted and added lines are
paired up by position and each pair is aligned token by token, so that only
the words that actually changed need to be highlighted.
"""

from dataclasses import replace
from itertools import groupby
from typing import Iterable, List, Sequence, Tuple

from diffview.diff_types import (
    AddChange,
    Change,
    ChangeType,
    DeleteChange,
    FileDiff,
    Hunk,
    WordToken,
)
from diffview.diff_word_lexer import tokenize


DEFAULT_MAX_BLOCK_SIZE = 5


def longest_common_subsequence(old: Sequence[str], new: Sequence[str]) -> Tuple[List[bool], List[bool]]:
    """
    Align two token sequences.

    Uses the classic O(m*n) dynamic programming table over exact equality.
    When several maximal subsequences exist the backtrack, walking from the
    end of both sequences, always:
    - steps diagonally when the two current tokens are equal;
    - otherwise drops an old token only if that keeps a strictly longer
      subsequence than dropping a new token;
    - otherwise drops a new token.

    Args:
        old: Tokens from the old line
        new: Tokens from the new line

    Returns:
        Two lists of flags, one per token of each input, set for tokens that
        are part of the common subsequence
    """
    m = len(old)
    n = len(new)

    lengths = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if old[i - 1] == new[j - 1]:
                lengths[i][j] = lengths[i - 1][j - 1] + 1

            else:
                lengths[i][j] = max(lengths[i - 1][j], lengths[i][j - 1])

    old_common = [False] * m
    new_common = [False] * n

    i = m
    j = n
    while i > 0 and j > 0:
        if old[i - 1] == new[j - 1]:
            old_common[i - 1] = True
            new_common[j - 1] = True
            i -= 1
            j -= 1

        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1

        else:
            j -= 1

    return old_common, new_common


class WordDiffEngine:
    """Annotates paired delete/add lines with word-level tokens."""

    def __init__(self, max_block_size: int = DEFAULT_MAX_BLOCK_SIZE) -> None:
        """
        Initialize the engine.

        Args:
            max_block_size: Largest run of deleted or added lines that will be
                word-diffed.  Larger blocks keep line-level changes only.
        """
        self._max_block_size = max_block_size

    def apply(self, files: Iterable[FileDiff]) -> List[FileDiff]:
        """
        Annotate every hunk of every file.

        Args:
            files: Parsed files

        Returns:
            New files with annotated hunks; the input is left untouched
        """
        return [
            replace(file_diff, hunks=tuple(self.annotate_hunk(hunk) for hunk in file_diff.hunks))
            for file_diff in files
        ]

    def annotate_hunk(self, hunk: Hunk) -> Hunk:
        """Return a copy of a hunk with word diffs attached to its replacement blocks."""
        return replace(hunk, changes=tuple(self.annotate_changes(hunk.changes)))

    def annotate_changes(self, changes: Sequence[Change]) -> List[Change]:
        """
        Attach word diffs to the replacement blocks within a change sequence.

        Args:
            changes: Changes of one hunk, in order

        Returns:
            The same changes in the same order, with eligible delete/add pairs
            replaced by annotated copies
        """
        runs = [list(run) for _, run in groupby(changes, key=lambda change: change.type)]

        result: List[Change] = []
        index = 0
        while index < len(runs):
            run = runs[index]
            next_run = runs[index + 1] if index + 1 < len(runs) else None

            if run[0].type == ChangeType.DELETE and next_run is not None and next_run[0].type == ChangeType.ADD:
                deletes, adds = self._annotate_block(run, next_run)
                result.extend(deletes)
                result.extend(adds)
                index += 2
                continue

            result.extend(run)
            index += 1

        return result

    def _annotate_block(
        self,
        deletes: List[Change],
        adds: List[Change]
    ) -> Tuple[List[Change], List[Change]]:
        """
        Word-diff one replacement block.

        Unpaired trailing lines, when the runs differ in length, are left as
        they are.

        Args:
            deletes: Consecutive deleted lines
            adds: Consecutive added lines that directly follow them

        Returns:
            The deleted and added lines, annotated where eligible
        """
        if len(deletes) > self._max_block_size or len(adds) > self._max_block_size:
            return deletes, adds

        annotated_deletes = list(deletes)
        annotated_adds = list(adds)

        for pair_index in range(min(len(deletes), len(adds))):
            delete_change = deletes[pair_index]
            add_change = adds[pair_index]
            assert isinstance(delete_change, DeleteChange)
            assert isinstance(add_change, AddChange)

            old_tokens, new_tokens = self.diff_lines(delete_change.content, add_change.content)
            annotated_deletes[pair_index] = delete_change.with_word_diff(old_tokens)
            annotated_adds[pair_index] = add_change.with_word_diff(new_tokens)

        return annotated_deletes, annotated_adds

    def diff_lines(self, old_line: str, new_line: str) -> Tuple[Tuple[WordToken, ...], Tuple[WordToken, ...]]:
        """
        Compute word-level tokens for a deleted line and its replacement.

        Args:
            old_line: Content of the deleted line
            new_line: Content of the added line

        Returns:
            Tokens for the deleted line (delete/normal) and for the added line
            (add/normal).  Each side concatenates back to its own line.
        """
        old_words = tokenize(old_line)
        new_words = tokenize(new_line)
        old_common, new_common = longest_common_subsequence(old_words, new_words)

        old_tokens = tuple(
            WordToken(ChangeType.NORMAL if common else ChangeType.DELETE, word)
            for word, common in zip(old_words, old_common)
        )
        new_tokens = tuple(
            WordToken(ChangeType.NORMAL if common else ChangeType.ADD, word)
            for word, common in zip(new_words, new_common)
        )
        return old_tokens, new_tokens
