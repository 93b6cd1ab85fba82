"""Tests for YAML utilities."""

import pytest
from pathlib import Path

from tw_prefixer.common.shared.yaml_utils import load_yaml


class TestLoadYaml:
    """Tests for load_yaml function."""

    def test_load_valid_yaml(self, temp_dir):
        """Test loading a valid YAML file."""
        yaml_file = temp_dir / "tw-prefixer.yaml"
        yaml_file.write_text("prefix: tw-\nattributes:\n  - className\n  - class\n")

        data = load_yaml(yaml_file)

        assert data["prefix"] == "tw-"
        assert data["attributes"] == ["className", "class"]

    def test_file_not_found(self):
        """Test that missing file raises FileNotFoundError."""
        non_existent = Path("/nonexistent/file.yaml")

        with pytest.raises(FileNotFoundError, match="YAML file not found"):
            load_yaml(non_existent)

    def test_invalid_yaml(self, temp_dir):
        """Test that invalid YAML raises an error."""
        yaml_file = temp_dir / "invalid.yaml"
        yaml_file.write_text("invalid: yaml: content: [")

        with pytest.raises(Exception):  # yaml.YAMLError or similar
            load_yaml(yaml_file)

    def test_empty_yaml(self, temp_dir):
        """Test loading empty YAML file."""
        yaml_file = temp_dir / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_yaml_with_comments(self, temp_dir):
        """Test loading YAML with comments."""
        yaml_file = temp_dir / "test.yaml"
        yaml_file.write_text(
            "# Prefixer options\n"
            "prefix: tw-  # Inline comment\n"
        )

        assert load_yaml(yaml_file) == {"prefix": "tw-"}
