"""
Command-line interface for diffview.
"""

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from diffview.diff_config import DiffViewConfig
from diffview.diff_exceptions import DiffConfigError
from diffview.diff_types import ChangeType, FileDiff, FileStatus
from diffview.diff_view_builder import DiffView, DiffViewBuilder


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr; parser diagnostics show up with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def format_file_path(file_diff: FileDiff) -> str:
    """Get the path shown for a file; renames show both the old and new path."""
    if file_diff.status == FileStatus.RENAMED:
        return f"{file_diff.old_path} -> {file_diff.new_path}"

    return file_diff.new_path


def read_diff_input(source: str) -> str:
    """
    Read diff text from a file, or from stdin when the source is '-'.

    Diffs of files in other encodings are common, so bytes that are not valid
    UTF-8 are replaced with U+FFFD rather than failing the whole read.

    Args:
        source: Path of the diff file, or '-' for stdin

    Returns:
        The decoded diff text

    Raises:
        OSError: If the input cannot be read
    """
    if source == '-':
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors='replace')

        return sys.stdin.read()

    return Path(source).read_text(encoding='utf-8', errors='replace')


def format_text(view: DiffView) -> str:
    """Format a diff view as a human-readable summary."""
    lines: List[str] = []

    lines.append(view.title)
    lines.append("=" * len(view.title))

    for file_diff in view.files:
        lines.append("")
        lines.append(f"{file_diff.status.label} {format_file_path(file_diff)}")

        if file_diff.is_binary:
            lines.append("  Binary file")
            continue

        for hunk in file_diff.hunks:
            additions = sum(1 for change in hunk.changes if change.type == ChangeType.ADD)
            deletions = sum(1 for change in hunk.changes if change.type == ChangeType.DELETE)
            lines.append(f"  {hunk.header}  (+{additions} -{deletions})")

    lines.append("")
    file_word = "file" if view.stats.files == 1 else "files"
    lines.append(f"{view.stats.files} {file_word} changed, +{view.stats.additions} -{view.stats.deletions}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='diffview',
        description='Parse a git diff and summarize its files, hunks and changes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  git diff | %(prog)s                    # Summarize a diff from stdin
  %(prog)s changes.diff --format json    # Dump the parsed structure
  %(prog)s changes.diff -c view.yaml     # Use settings from a config file
        """
    )
    parser.add_argument('input', nargs='?', default='-',
                        help='Diff file (use "-" for stdin, the default)')
    parser.add_argument('--config', '-c', help='YAML configuration file')
    parser.add_argument('--format', '-f', choices=['text', 'json'], default='text',
                        help='Output format')
    parser.add_argument('--title', '-t', help='Title for the view')
    parser.add_argument('--no-word-diff', action='store_true',
                        help='Disable word-level highlighting')
    parser.add_argument('--collapsed', action='store_true',
                        help='Mark files and hunks as collapsed')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log parser diagnostics to stderr')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        config = DiffViewConfig.load_from_file(args.config) if args.config else DiffViewConfig()

    except DiffConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.input != '-' and not Path(args.input).exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        diff_text = read_diff_input(args.input)

    except OSError as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        return 1

    config.diff = diff_text
    if args.title is not None:
        config.title = args.title

    if args.no_word_diff:
        config.word_diff_enabled = False

    if args.collapsed:
        config.expanded_by_default = False

    view = DiffViewBuilder(config).build()

    if args.format == 'json':
        print(json.dumps(view.to_dict(), indent=2))

    else:
        print(format_text(view))

    return 0
