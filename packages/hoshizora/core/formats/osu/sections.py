"""Section names and header-line classification."""

from __future__ import annotations

from enum import Enum


class Section(str, Enum):
    """Named blocks of a ``.osu`` file, in file order."""

    FORMAT = "Format"
    GENERAL = "General"
    EDITOR = "Editor"
    METADATA = "Metadata"
    DIFFICULTY = "Difficulty"
    EVENTS = "Events"
    TIMING_POINTS = "TimingPoints"
    COLOURS = "Colours"
    HIT_OBJECTS = "HitObjects"


_HEADERS: dict[str, Section] = {f"[{section.value}]": section for section in Section}


def classify_line(line: str) -> Section | None:
    """Return the section a header line opens, or None for content lines.

    Only exact, case-sensitive names are headers; ``[Unknown]`` is content.

    Example:
        >>> classify_line("[Difficulty]")
        <Section.DIFFICULTY: 'Difficulty'>
        >>> classify_line("HPDrainRate:5") is None
        True
    """
    return _HEADERS.get(line.strip())
