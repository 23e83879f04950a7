"""
Word lexer for intra-line diffing.

Splits a line into maximal runs of word characters (ASCII letters, digits and
underscore) and maximal runs of everything else.  Joining the token values
back together reproduces the original line exactly.
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, ClassVar, List, Set


class WordTokenType(IntEnum):
    """Type of word-level token."""
    WORD = auto()
    NON_WORD = auto()


@dataclass
class Token:
    """
    Represents a token in a line.

    Attributes:
        type: The type of the token
        value: The string value of the token
        start: The starting position of the token in the line
    """
    type: WordTokenType
    value: str
    start: int


class WordLexer:
    """
    Lexer that splits a line into alternating word and non-word runs.
    """

    _WORD_CHARS: ClassVar[Set[str]] = set(
        "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
    )

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []

    def lex(self, input_str: str) -> List[Token]:
        """
        Lex all the tokens in the input.

        Args:
            input_str: The line to lex

        Returns:
            The tokens, in order
        """
        self._input = input_str
        self._input_len = len(input_str)
        self._position = 0
        self._tokens = []

        while self._position < self._input_len:
            ch = self._input[self._position]
            self._get_lexing_function(ch)()

        return self._tokens

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if self._is_word_char(ch):
            return self._read_word

        return self._read_non_word

    def _is_word_char(self, ch: str) -> bool:
        return ch in self._WORD_CHARS

    def _read_word(self) -> None:
        """Read a maximal run of word characters."""
        start = self._position
        self._position += 1
        while self._position < self._input_len and self._is_word_char(self._input[self._position]):
            self._position += 1

        self._tokens.append(Token(
            type=WordTokenType.WORD,
            value=self._input[start:self._position],
            start=start
        ))

    def _read_non_word(self) -> None:
        """Read a maximal run of non-word characters."""
        start = self._position
        self._position += 1
        while self._position < self._input_len and not self._is_word_char(self._input[self._position]):
            self._position += 1

        self._tokens.append(Token(
            type=WordTokenType.NON_WORD,
            value=self._input[start:self._position],
            start=start
        ))


def tokenize(line: str) -> List[str]:
    """
    Split a line into word and non-word runs.

    Args:
        line: Line to split

    Returns:
        Token values, in order; empty for an empty line
    """
    return [token.value for token in WordLexer().lex(line)]
