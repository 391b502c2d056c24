"""Shared pytest fixtures for hoshizora tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hoshizora.core.config.models import DecoderConfig, ErrorPolicy, UnsupportedSectionPolicy
from hoshizora.core.formats.osu import BeatmapDecoder

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_osu_path(fixtures_dir: Path) -> Path:
    """Path to a complete v14 beatmap."""
    return fixtures_dir / "osu" / "end_time.osu"


@pytest.fixture
def sample_osu_text(sample_osu_path: Path) -> str:
    """Contents of the complete v14 beatmap."""
    return sample_osu_path.read_text(encoding="utf-8")


# ============================================================================
# Decoder Fixtures
# ============================================================================


@pytest.fixture
def decoder() -> BeatmapDecoder:
    """Decoder with default settings (stop on first error, ignore stub sections)."""
    return BeatmapDecoder()


@pytest.fixture
def collecting_decoder() -> BeatmapDecoder:
    """Decoder that reports every failing line."""
    return BeatmapDecoder(DecoderConfig(error_policy=ErrorPolicy.COLLECT_ALL))


@pytest.fixture
def strict_decoder() -> BeatmapDecoder:
    """Decoder that rejects content in sections without a parser."""
    return BeatmapDecoder(DecoderConfig(unsupported_sections=UnsupportedSectionPolicy.ERROR))


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
