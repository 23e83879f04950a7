"""Shared dataclasses for parsed diffs."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union


class ChangeType(Enum):
    """Kind of a change line or of a word token within a line."""

    ADD = "add"
    DELETE = "delete"
    NORMAL = "normal"


class FileStatus(Enum):
    """Status of a file section, derived from its git metadata lines."""

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"

    @property
    def label(self) -> str:
        """Short marker shown next to a file header."""
        return _FILE_STATUS_LABELS[self]


_FILE_STATUS_LABELS = {
    FileStatus.ADDED: "[+]",
    FileStatus.DELETED: "[-]",
    FileStatus.MODIFIED: "[M]",
    FileStatus.RENAMED: "[R]",
    FileStatus.COPIED: "[C]",
}


@dataclass(frozen=True)
class WordToken:
    """A run of characters within a line, marked as added, deleted or unchanged."""

    type: ChangeType
    value: str


@dataclass(frozen=True)
class AddChange:
    """A line only present in the new version of the file."""

    content: str  # Line text without the leading '+'
    new_line_number: int
    word_diff: Tuple[WordToken, ...] | None = None

    @property
    def type(self) -> ChangeType:
        return ChangeType.ADD

    @property
    def old_line_number(self) -> None:
        return None

    def with_word_diff(self, tokens: Tuple[WordToken, ...]) -> "AddChange":
        """Return a copy of this change carrying word-level tokens."""
        return replace(self, word_diff=tokens)


@dataclass(frozen=True)
class DeleteChange:
    """A line only present in the old version of the file."""

    content: str  # Line text without the leading '-'
    old_line_number: int
    word_diff: Tuple[WordToken, ...] | None = None

    @property
    def type(self) -> ChangeType:
        return ChangeType.DELETE

    @property
    def new_line_number(self) -> None:
        return None

    def with_word_diff(self, tokens: Tuple[WordToken, ...]) -> "DeleteChange":
        """Return a copy of this change carrying word-level tokens."""
        return replace(self, word_diff=tokens)


@dataclass(frozen=True)
class NormalChange:
    """A context line present in both versions of the file."""

    content: str  # Line text without the leading ' '
    old_line_number: int
    new_line_number: int

    @property
    def type(self) -> ChangeType:
        return ChangeType.NORMAL

    @property
    def word_diff(self) -> None:
        return None


Change = Union[AddChange, DeleteChange, NormalChange]


@dataclass(frozen=True)
class Hunk:
    """A single hunk from a unified diff."""

    header: str  # The verbatim '@@' line
    old_start: int  # Starting line number in original file
    old_lines: int  # Number of lines in original file
    new_start: int  # Starting line number in new file
    new_lines: int  # Number of lines in new file
    changes: Tuple[Change, ...]
    is_expanded: bool = True
    context: str = ""  # Text after the closing '@@' as is, leading space included


@dataclass(frozen=True)
class FileDiff:
    """All hunks for a single file section of a git diff."""

    old_path: str
    new_path: str
    hunks: Tuple[Hunk, ...]
    status: FileStatus = FileStatus.MODIFIED
    is_expanded: bool = True
    is_binary: bool = False


@dataclass(frozen=True)
class DiffStats:
    """Summary counts for a parsed diff."""

    additions: int
    deletions: int
    files: int
