"""Tests for decoder config loading (JSON and YAML)."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

import hoshizora.core.config.loader as config_loader
from hoshizora.core.config.models import DecoderConfig, ErrorPolicy, UnsupportedSectionPolicy


@pytest.fixture
def sample_config_data() -> dict:
    """Sample decoder configuration."""
    return {"error_policy": "collect_all", "unsupported_sections": "error"}


def test_detect_format() -> None:
    assert config_loader.detect_format("decoder.json") == "json"
    assert config_loader.detect_format(Path("decoder.yaml")) == "yaml"
    assert config_loader.detect_format("DECODER.YML") == "yaml"


def test_detect_format_invalid() -> None:
    with pytest.raises(ValueError, match="Unsupported config format"):
        config_loader.detect_format("decoder.txt")


def test_load_config_json(tmp_path: Path, sample_config_data: dict) -> None:
    config_file = tmp_path / "decoder.json"
    config_file.write_text(json.dumps(sample_config_data))

    assert config_loader.load_config(config_file) == sample_config_data


def test_load_config_yaml(tmp_path: Path, sample_config_data: dict) -> None:
    config_file = tmp_path / "decoder.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    assert config_loader.load_config(config_file) == sample_config_data


def test_load_config_empty_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "empty.yml"
    config_file.write_text("# nothing configured\n")

    assert config_loader.load_config(config_file) == {}


def test_load_config_file_not_found() -> None:
    with pytest.raises(FileNotFoundError):
        config_loader.load_config("nonexistent.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    config_file = tmp_path / "invalid.json"
    config_file.write_text("{ invalid json }")

    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(config_file)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("invalid: yaml: content: [")

    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(config_file)


def test_load_config_non_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- collect_all\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        config_loader.load_config(config_file)


class TestLoadDecoderConfig:
    def test_defaults_without_path(self) -> None:
        config = config_loader.load_decoder_config()

        assert config == DecoderConfig()
        assert config.error_policy is ErrorPolicy.STOP_ON_FIRST
        assert config.unsupported_sections is UnsupportedSectionPolicy.IGNORE
        assert config.comment_prefix == "//"

    def test_loads_yaml(self, tmp_path: Path, sample_config_data: dict) -> None:
        config_file = tmp_path / "decoder.yaml"
        config_file.write_text(yaml.dump(sample_config_data))

        config = config_loader.load_decoder_config(config_file)

        assert config.error_policy is ErrorPolicy.COLLECT_ALL
        assert config.unsupported_sections is UnsupportedSectionPolicy.ERROR

    def test_rejects_unknown_policy(self, tmp_path: Path) -> None:
        config_file = tmp_path / "decoder.json"
        config_file.write_text(json.dumps({"error_policy": "retry"}))

        with pytest.raises(ValidationError):
            config_loader.load_decoder_config(config_file)

    def test_rejects_unknown_keys(self, tmp_path: Path) -> None:
        config_file = tmp_path / "decoder.json"
        config_file.write_text(json.dumps({"verbose": True}))

        with pytest.raises(ValidationError):
            config_loader.load_decoder_config(config_file)

    def test_config_is_frozen(self) -> None:
        config = DecoderConfig()

        with pytest.raises(ValidationError):
            config.comment_prefix = "#"  # type: ignore[misc]
