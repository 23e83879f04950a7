"""Parsing of a single unified diff hunk."""

import logging
import re
from typing import List, Tuple

from diffview.diff_line_cursor import LineCursor
from diffview.diff_types import AddChange, Change, DeleteChange, Hunk, NormalChange


HUNK_MARKER = '@@'
FILE_MARKER = 'diff --git'

_HUNK_HEADER_RE = re.compile(r'^@@ -([0-9]+)(?:,([0-9]+))? \+([0-9]+)(?:,([0-9]+))? @@(.*)$')


class HunkParser:
    """Parser for one '@@ ... @@' block and the change lines that follow it."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("HunkParser")

    def parse_header(self, header: str) -> Tuple[int, int, int, int, str] | None:
        """
        Parse a hunk header.

        Format: @@ -old_start[,old_lines] +new_start[,new_lines] @@[context]

        Args:
            header: The header line

        Returns:
            (old_start, old_lines, new_start, new_lines, context), or None if the
            line is not a valid hunk header.  Omitted line counts default to 1.
        """
        match = _HUNK_HEADER_RE.match(header)
        if not match:
            return None

        old_start = int(match.group(1))
        old_lines = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_lines = int(match.group(4)) if match.group(4) is not None else 1
        return old_start, old_lines, new_start, new_lines, match.group(5)

    def parse(self, cursor: LineCursor, expanded_by_default: bool = True) -> Hunk | None:
        """
        Parse the hunk whose header is the cursor's current line.

        On return the cursor sits on the first line that does not belong to the
        hunk (the next hunk header, the next file header, an unrecognized line,
        or the end of input).

        Args:
            cursor: Cursor positioned on the '@@' line
            expanded_by_default: Initial expanded state for the hunk

        Returns:
            The parsed hunk, or None if the header is malformed.  A malformed
            header is consumed so that scanning can resume after it.
        """
        header = cursor.advance()
        if header is None:
            return None

        parsed_header = self.parse_header(header)
        if parsed_header is None:
            self._logger.debug("Skipping malformed hunk header: %r", header)
            return None

        old_start, old_lines, new_start, new_lines, context = parsed_header

        changes: List[Change] = []
        current_old = old_start
        current_new = new_start

        while not cursor.at_end():
            line = cursor.peek()
            if line is None:
                break

            # Stop at next hunk or next file
            if line.startswith(HUNK_MARKER) or line.startswith(FILE_MARKER):
                break

            # A trailing empty line is the end of the input, not a context line
            if not line and cursor.is_last_line():
                break

            if not line:
                # Blank context line whose leading space was stripped
                changes.append(NormalChange('', current_old, current_new))
                current_old += 1
                current_new += 1

            elif line[0] == '+':
                changes.append(AddChange(line[1:], current_new))
                current_new += 1

            elif line[0] == '-':
                changes.append(DeleteChange(line[1:], current_old))
                current_old += 1

            elif line[0] == ' ':
                changes.append(NormalChange(line[1:], current_old, current_new))
                current_old += 1
                current_new += 1

            elif line[0] == '\\':
                # "\ No newline at end of file"
                pass

            else:
                self._logger.debug("Ending hunk %r at unrecognized line: %r", header, line)
                break

            cursor.advance()

        return Hunk(
            header=header,
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
            changes=tuple(changes),
            is_expanded=expanded_by_default,
            context=context
        )
