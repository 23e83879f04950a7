"""Unified (git) diff parsing."""

import logging
import re
from typing import List

from diffview.diff_hunk_parser import FILE_MARKER, HUNK_MARKER, HunkParser
from diffview.diff_line_cursor import LineCursor
from diffview.diff_types import FileDiff, FileStatus, Hunk


_FILE_HEADER_RE = re.compile(r'^diff --git a/(.+?) b/(.+)$')

# Metadata prefixes that set the file status.  The first one seen wins.
_STATUS_MARKERS = (
    ('new file mode', FileStatus.ADDED),
    ('deleted file mode', FileStatus.DELETED),
    ('rename from', FileStatus.RENAMED),
    ('copy from', FileStatus.COPIED),
)

_BINARY_MARKER = 'Binary files'


class UnifiedDiffParser:
    """
    Parser for git-style unified diff text.

    Parsing never fails: file sections with an unrecognized header, hunks with a
    malformed header and unexpected lines are skipped.  Skips are logged at
    debug level.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("UnifiedDiffParser")
        self._hunk_parser = HunkParser()

    def parse(self, diff_text: str, expanded_by_default: bool = True) -> List[FileDiff]:
        """
        Parse diff text into per-file sections.

        Args:
            diff_text: Raw diff output, e.g. from `git diff`
            expanded_by_default: Initial expanded state for every file and hunk

        Returns:
            Parsed files in source order; empty if no valid section was found
        """
        cursor = LineCursor.from_text(diff_text)
        files: List[FileDiff] = []

        while not cursor.at_end():
            line = cursor.peek()
            if line is None or not line.startswith(FILE_MARKER):
                cursor.advance()
                continue

            file_diff = self._parse_file(cursor, expanded_by_default)
            if file_diff is not None:
                files.append(file_diff)

        return files

    def _parse_file(self, cursor: LineCursor, expanded_by_default: bool) -> FileDiff | None:
        """
        Parse one file section, starting at its 'diff --git' line.

        Args:
            cursor: Cursor positioned on the file header
            expanded_by_default: Initial expanded state for the file and its hunks

        Returns:
            The parsed file, or None if the header does not name both paths.  The
            header line is consumed either way.
        """
        header = cursor.advance()
        if header is None:
            return None

        match = _FILE_HEADER_RE.match(header)
        if not match:
            self._logger.debug("Skipping unrecognized file header: %r", header)
            return None

        old_path = match.group(1)
        new_path = match.group(2)

        status: FileStatus | None = None
        is_binary = False

        # Metadata lines run until the first hunk or the next file
        while not cursor.at_end():
            line = cursor.peek()
            if line is None or line.startswith(FILE_MARKER) or line.startswith(HUNK_MARKER):
                break

            cursor.advance()

            if line.startswith(_BINARY_MARKER):
                is_binary = True
                break

            if status is None:
                status = self._status_for_metadata(line)

        hunks: List[Hunk] = []
        while not cursor.at_end():
            line = cursor.peek()
            if line is None or line.startswith(FILE_MARKER):
                break

            # Binary sections never carry hunks
            if is_binary or not line.startswith(HUNK_MARKER):
                cursor.advance()
                continue

            hunk = self._hunk_parser.parse(cursor, expanded_by_default)
            if hunk is not None:
                hunks.append(hunk)

        return FileDiff(
            old_path=old_path,
            new_path=new_path,
            hunks=tuple(hunks),
            status=status if status is not None else FileStatus.MODIFIED,
            is_expanded=expanded_by_default,
            is_binary=is_binary
        )

    def _status_for_metadata(self, line: str) -> FileStatus | None:
        """
        Get the file status implied by a metadata line.

        Lines such as 'index ', '--- ', '+++ ', 'similarity index', 'rename to'
        and 'copy to' carry no status.

        Args:
            line: Metadata line

        Returns:
            The status the line sets, or None
        """
        for prefix, status in _STATUS_MARKERS:
            if line.startswith(prefix):
                return status

        return None
