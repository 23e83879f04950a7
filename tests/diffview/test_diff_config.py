"""Tests for diff view configuration."""

import pytest

from diffview.diff_config import DiffViewConfig
from diffview.diff_exceptions import DiffConfigError, DiffError


class TestDiffViewConfigDefaults:
    """Test default configuration."""

    def test_defaults(self):
        """Test the default settings."""
        config = DiffViewConfig()

        assert config.diff == ""
        assert config.title == "Diff"
        assert config.show_line_numbers
        assert config.word_diff_enabled
        assert config.expanded_by_default
        assert config.max_word_diff_block == 5
        assert config.validate() == []


class TestDiffViewConfigFromDict:
    """Test building configuration from dictionaries."""

    def test_snake_case_keys(self):
        """Test field-name keys."""
        config = DiffViewConfig.from_dict({"title": "Staged", "word_diff_enabled": False})

        assert config.title == "Staged"
        assert not config.word_diff_enabled
        assert config.expanded_by_default

    def test_camel_case_keys(self):
        """Test the camelCase keys used by viewer clients."""
        config = DiffViewConfig.from_dict({
            "diff": "diff --git a/x b/x\n",
            "showLineNumbers": False,
            "wordDiffEnabled": False,
            "expandedByDefault": False,
        })

        assert config.diff == "diff --git a/x b/x\n"
        assert not config.show_line_numbers
        assert not config.word_diff_enabled
        assert not config.expanded_by_default

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(DiffConfigError, match="Unknown configuration keys: colour") as exc_info:
            DiffViewConfig.from_dict({"colour": "red"})

        assert exc_info.value.errors == ["unknown key 'colour'"]
        assert exc_info.value.config_path is None

    def test_wrong_types(self):
        """Test that badly typed values are rejected."""
        with pytest.raises(DiffConfigError, match="'title' must be a string"):
            DiffViewConfig.from_dict({"title": 42})

        with pytest.raises(DiffConfigError, match="'word_diff_enabled' must be true or false"):
            DiffViewConfig.from_dict({"wordDiffEnabled": "yes"})

        with pytest.raises(DiffConfigError, match="must be an integer"):
            DiffViewConfig.from_dict({"max_word_diff_block": True})

        with pytest.raises(DiffConfigError, match="must not be negative"):
            DiffViewConfig.from_dict({"max_word_diff_block": -1})

    def test_config_error_is_diff_error(self):
        """Test the exception hierarchy."""
        with pytest.raises(DiffError):
            DiffViewConfig.from_dict({"nope": 1})


class TestDiffViewConfigFiles:
    """Test loading and saving YAML configuration."""

    def test_load_yaml(self, tmp_path):
        """Test loading settings from a YAML file."""
        path = tmp_path / "view.yaml"
        path.write_text(
            "title: Unstaged Changes\n"
            "wordDiffEnabled: false\n"
            "diff: |\n"
            "  diff --git a/f b/f\n"
            "  @@ -1 +1 @@\n"
            "  -a\n"
            "  +b\n",
            encoding="utf-8"
        )
        config = DiffViewConfig.load_from_file(str(path))

        assert config.title == "Unstaged Changes"
        assert not config.word_diff_enabled
        assert config.diff == "diff --git a/f b/f\n@@ -1 +1 @@\n-a\n+b\n"

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file is the default configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert DiffViewConfig.load_from_file(str(path)) == DiffViewConfig()

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(DiffConfigError, match="Configuration file not found"):
            DiffViewConfig.load_from_file(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        """Test that unparseable YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("title: [unclosed\n", encoding="utf-8")

        with pytest.raises(DiffConfigError, match="Failed to read configuration"):
            DiffViewConfig.load_from_file(str(path))

    def test_non_mapping_yaml(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(DiffConfigError, match="must be a mapping"):
            DiffViewConfig.load_from_file(str(path))

    def test_save_and_load(self, tmp_path):
        """Test that saved configuration loads back unchanged."""
        path = tmp_path / "saved.yaml"
        config = DiffViewConfig(
            diff="diff --git a/f b/f\n",
            title="Saved",
            show_line_numbers=False,
            word_diff_enabled=False,
            expanded_by_default=False,
            max_word_diff_block=3
        )
        config.save_to_file(str(path))

        assert DiffViewConfig.load_from_file(str(path)) == config

    def test_invalid_settings_in_file_name_the_file(self, tmp_path):
        """Test that validation errors from a file carry its path and the problems found."""
        path = tmp_path / "view.yaml"
        path.write_text("title: 42\n", encoding="utf-8")

        with pytest.raises(DiffConfigError, match="'title' must be a string") as exc_info:
            DiffViewConfig.load_from_file(str(path))

        assert str(exc_info.value).startswith(str(path))
        assert exc_info.value.config_path == str(path)
        assert exc_info.value.errors == ["'title' must be a string"]
        assert exc_info.value.error_details == {"path": str(path), "errors": ["'title' must be a string"]}
