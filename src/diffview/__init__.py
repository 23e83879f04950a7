"""
Unified diff parsing and word-level highlighting.

This package turns git diff output into an immutable model of files, hunks
and changes, and annotates small line replacements with word-level tokens
for renderers to highlight.
"""

from diffview.diff_config import DiffViewConfig
from diffview.diff_exceptions import DiffConfigError, DiffError
from diffview.diff_hunk_parser import HunkParser
from diffview.diff_line_cursor import LineCursor
from diffview.diff_parser import UnifiedDiffParser
from diffview.diff_stats import compute_stats
from diffview.diff_types import (
    AddChange,
    Change,
    ChangeType,
    DeleteChange,
    DiffStats,
    FileDiff,
    FileStatus,
    Hunk,
    NormalChange,
    WordToken,
)
from diffview.diff_view_builder import DiffView, DiffViewBuilder
from diffview.diff_word_engine import WordDiffEngine, longest_common_subsequence
from diffview.diff_word_lexer import WordLexer, tokenize

__all__ = [
    # Exceptions
    'DiffError',
    'DiffConfigError',
    # Types
    'ChangeType',
    'FileStatus',
    'WordToken',
    'AddChange',
    'DeleteChange',
    'NormalChange',
    'Change',
    'Hunk',
    'FileDiff',
    'DiffStats',
    # Core classes
    'LineCursor',
    'WordLexer',
    'tokenize',
    'HunkParser',
    'UnifiedDiffParser',
    'WordDiffEngine',
    'longest_common_subsequence',
    'compute_stats',
    # View building
    'DiffViewConfig',
    'DiffView',
    'DiffViewBuilder',
]
