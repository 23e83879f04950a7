"""
Configuration for building a diff view.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, List

import yaml

from diffview.diff_exceptions import DiffConfigError
from diffview.diff_word_engine import DEFAULT_MAX_BLOCK_SIZE


# Keys accepted in configuration files, mapped to field names.  Both the
# snake_case field names and the camelCase names used by viewer clients work.
_KEY_ALIASES = {
    'diff': 'diff',
    'title': 'title',
    'show_line_numbers': 'show_line_numbers',
    'showLineNumbers': 'show_line_numbers',
    'word_diff_enabled': 'word_diff_enabled',
    'wordDiffEnabled': 'word_diff_enabled',
    'expanded_by_default': 'expanded_by_default',
    'expandedByDefault': 'expanded_by_default',
    'max_word_diff_block': 'max_word_diff_block',
    'maxWordDiffBlock': 'max_word_diff_block',
}


@dataclass
class DiffViewConfig:
    """Input configuration for a diff view."""

    diff: str = ""  # Raw git diff output
    title: str = "Diff"
    show_line_numbers: bool = True
    word_diff_enabled: bool = True
    expanded_by_default: bool = True
    max_word_diff_block: int = DEFAULT_MAX_BLOCK_SIZE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DiffViewConfig':
        """
        Create a configuration from a dictionary.

        Args:
            data: Settings keyed by field name or camelCase alias

        Returns:
            The configuration, with defaults for anything not given

        Raises:
            DiffConfigError: If a key is unknown or a value has the wrong type
        """
        config = cls()
        unknown = [key for key in data if key not in _KEY_ALIASES]
        if unknown:
            raise DiffConfigError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                errors=[f"unknown key '{key}'" for key in sorted(unknown)]
            )

        for key, value in data.items():
            setattr(config, _KEY_ALIASES[key], value)

        errors = config.validate()
        if errors:
            raise DiffConfigError(f"Invalid configuration: {'; '.join(errors)}", errors=errors)

        return config

    @classmethod
    def load_from_file(cls, config_path: str) -> 'DiffViewConfig':
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the configuration file

        Returns:
            The loaded configuration

        Raises:
            DiffConfigError: If the file is missing, is not valid YAML or holds
                invalid settings
        """
        if not os.path.exists(config_path):
            raise DiffConfigError(f"Configuration file not found: {config_path}", config_path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

        except (OSError, yaml.YAMLError) as e:
            raise DiffConfigError(f"Failed to read configuration {config_path}: {e}", config_path) from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise DiffConfigError(
                f"Configuration {config_path} must be a mapping",
                config_path
            )

        try:
            return cls.from_dict(data)

        except DiffConfigError as e:
            raise DiffConfigError(f"{config_path}: {e}", config_path, e.errors) from e

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to a YAML file."""
        data = {
            'diff': self.diff,
            'title': self.title,
            'show_line_numbers': self.show_line_numbers,
            'word_diff_enabled': self.word_diff_enabled,
            'expanded_by_default': self.expanded_by_default,
            'max_word_diff_block': self.max_word_diff_block
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=True)

    def validate(self) -> List[str]:
        """Validate the configuration and return any errors."""
        errors = []

        if not isinstance(self.diff, str):
            errors.append("'diff' must be a string")

        if not isinstance(self.title, str):
            errors.append("'title' must be a string")

        for name in ('show_line_numbers', 'word_diff_enabled', 'expanded_by_default'):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"'{name}' must be true or false")

        # bool is a subclass of int
        if isinstance(self.max_word_diff_block, bool) or not isinstance(self.max_word_diff_block, int):
            errors.append("'max_word_diff_block' must be an integer")

        elif self.max_word_diff_block < 0:
            errors.append("'max_word_diff_block' must not be negative")

        return errors
