"""Tests for section header classification."""

from __future__ import annotations

import pytest

from hoshizora.core.formats.osu.sections import Section, classify_line


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("[Format]", Section.FORMAT),
        ("[General]", Section.GENERAL),
        ("[Editor]", Section.EDITOR),
        ("[Metadata]", Section.METADATA),
        ("[Difficulty]", Section.DIFFICULTY),
        ("[Events]", Section.EVENTS),
        ("[TimingPoints]", Section.TIMING_POINTS),
        ("[Colours]", Section.COLOURS),
        ("[HitObjects]", Section.HIT_OBJECTS),
    ],
)
def test_known_headers(line: str, expected: Section) -> None:
    assert classify_line(line) is expected


def test_header_tolerates_surrounding_whitespace() -> None:
    """Trailing carriage returns and indentation do not hide a header."""
    assert classify_line("  [Metadata]\r") is Section.METADATA


@pytest.mark.parametrize(
    "line",
    [
        "[general]",
        "[Colors]",
        "[Unknown]",
        "[ General ]",
        "General",
        "AudioFilename: audio.mp3",
        "",
    ],
)
def test_non_headers_are_content(line: str) -> None:
    """Only exact, case-sensitive section names are headers."""
    assert classify_line(line) is None
