"""Forward-only cursor over the lines of a diff."""

from typing import List


class LineCursor:
    """
    Cursor over a pre-split sequence of lines.

    The file parser and the hunk parser share one cursor, so whichever of them
    stops on a boundary line leaves it in place for the other to pick up.
    """

    def __init__(self, lines: List[str]) -> None:
        self._lines = lines
        self._position = 0

    @classmethod
    def from_text(cls, text: str) -> "LineCursor":
        """
        Create a cursor over the lines of some text.

        The text is split on '\\n' only, so a trailing newline produces a final
        empty line.

        Args:
            text: Text to split

        Returns:
            Cursor positioned on the first line
        """
        return cls(text.split('\n'))

    def peek(self) -> str | None:
        """Get the current line without consuming it, or None at the end."""
        if self._position >= len(self._lines):
            return None

        return self._lines[self._position]

    def advance(self) -> str | None:
        """Consume and return the current line, or None at the end."""
        line = self.peek()
        if line is not None:
            self._position += 1

        return line

    def at_end(self) -> bool:
        """Check whether every line has been consumed."""
        return self._position >= len(self._lines)

    def is_last_line(self) -> bool:
        """Check whether the current line is the final line of the input."""
        return self._position == len(self._lines) - 1
