"""Builds the structured model a diff viewer renders."""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from diffview.diff_config import DiffViewConfig
from diffview.diff_parser import UnifiedDiffParser
from diffview.diff_stats import compute_stats
from diffview.diff_types import Change, DiffStats, FileDiff, Hunk, WordToken
from diffview.diff_word_engine import WordDiffEngine


MIN_LINE_NUMBER_WIDTH = 3


@dataclass(frozen=True)
class DiffView:
    """Everything a renderer needs to display one diff."""

    title: str
    files: Tuple[FileDiff, ...]
    stats: DiffStats
    show_line_numbers: bool
    line_number_width: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert the view to JSON-compatible data."""
        return {
            "title": self.title,
            "showLineNumbers": self.show_line_numbers,
            "lineNumberWidth": self.line_number_width,
            "stats": {
                "additions": self.stats.additions,
                "deletions": self.stats.deletions,
                "files": self.stats.files
            },
            "files": [_file_to_dict(file_diff) for file_diff in self.files]
        }


def _file_to_dict(file_diff: FileDiff) -> Dict[str, Any]:
    return {
        "oldPath": file_diff.old_path,
        "newPath": file_diff.new_path,
        "status": file_diff.status.value,
        "isBinary": file_diff.is_binary,
        "isExpanded": file_diff.is_expanded,
        "hunks": [_hunk_to_dict(hunk) for hunk in file_diff.hunks]
    }


def _hunk_to_dict(hunk: Hunk) -> Dict[str, Any]:
    return {
        "header": hunk.header,
        "oldStart": hunk.old_start,
        "oldLines": hunk.old_lines,
        "newStart": hunk.new_start,
        "newLines": hunk.new_lines,
        "context": hunk.context,
        "isExpanded": hunk.is_expanded,
        "changes": [_change_to_dict(change) for change in hunk.changes]
    }


def _change_to_dict(change: Change) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "type": change.type.value,
        "content": change.content
    }

    if change.old_line_number is not None:
        data["oldLineNumber"] = change.old_line_number

    if change.new_line_number is not None:
        data["newLineNumber"] = change.new_line_number

    if change.word_diff is not None:
        data["wordDiff"] = [_word_to_dict(token) for token in change.word_diff]

    return data


def _word_to_dict(token: WordToken) -> Dict[str, str]:
    return {"type": token.type.value, "value": token.value}


def line_number_width(files: Sequence[FileDiff]) -> int:
    """
    Get the number of digits needed for the line number gutter.

    Args:
        files: Parsed files

    Returns:
        Digits in the largest line number any hunk can reach, at least 3
    """
    max_line = 0
    for file_diff in files:
        for hunk in file_diff.hunks:
            max_line = max(max_line, hunk.old_start + hunk.old_lines, hunk.new_start + hunk.new_lines)

    return max(MIN_LINE_NUMBER_WIDTH, len(str(max_line)))


class DiffViewBuilder:
    """
    Runs the parse, word diff and stats passes for a diff view configuration.

    Building has no side effects, so callers that need live updates simply
    build again whenever the configuration changes.
    """

    def __init__(self, config: DiffViewConfig) -> None:
        self._config = config
        self._parser = UnifiedDiffParser()
        self._word_diff_engine = WordDiffEngine(config.max_word_diff_block)

    def build(self) -> DiffView:
        """Build the view for the current configuration."""
        files = self._parser.parse(self._config.diff, self._config.expanded_by_default)
        if self._config.word_diff_enabled:
            files = self._word_diff_engine.apply(files)

        return DiffView(
            title=self._config.title,
            files=tuple(files),
            stats=compute_stats(files),
            show_line_numbers=self._config.show_line_numbers,
            line_number_width=line_number_width(files)
        )
