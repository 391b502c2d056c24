"""Closed enumerations used by the [General] section.

Each enumeration is decoded through an ordered token table rather than by
name reflection, so quirks in the on-disk encoding live in data and not in
branching logic. Tables are scanned top-down and the first match wins.
"""

from __future__ import annotations

from enum import Enum


class Countdown(str, Enum):
    """Countdown shown before the first hit object.

    Attributes:
        NONE: No countdown.
        NORMAL: Countdown at normal speed.
        HALF: Countdown at half speed.
        DOUBLE: Countdown at double speed.
    """

    NONE = "None"
    NORMAL = "Normal"
    HALF = "Half"
    DOUBLE = "Double"


class SampleSet(str, Enum):
    """Default sample bank used for hit sounds."""

    DEFAULT = "Default"
    NORMAL = "Normal"
    SOFT = "Soft"
    DRUM = "Drum"


class Mode(str, Enum):
    """Gameplay ruleset.

    Attributes:
        OSU: osu!standard.
        TAIKO: osu!taiko.
        CATCH: osu!catch.
        MANIA: osu!mania.
    """

    OSU = "Osu"
    TAIKO = "Taiko"
    CATCH = "Catch"
    MANIA = "Mania"


class OverlayPosition(str, Enum):
    """Draw order of hit circle overlays relative to hit numbers."""

    NO_CHANGE = "NoChange"
    BELOW = "Below"
    ABOVE = "Above"


# Integer-coded enumerations: (code, variant)
COUNTDOWN_CODES: tuple[tuple[int, Countdown], ...] = (
    (0, Countdown.NONE),
    (1, Countdown.NORMAL),
    (2, Countdown.HALF),
    (3, Countdown.DOUBLE),
)

MODE_CODES: tuple[tuple[int, Mode], ...] = (
    (0, Mode.OSU),
    (1, Mode.TAIKO),
    (2, Mode.CATCH),
    (3, Mode.MANIA),
)

# Token-coded enumerations: (token, variant), matched case-sensitively.
# "1" and "Normal" resolve to DEFAULT; kept as the format has always decoded them.
SAMPLE_SET_TOKENS: tuple[tuple[str, SampleSet], ...] = (
    ("0", SampleSet.DEFAULT),
    ("1", SampleSet.DEFAULT),
    ("Normal", SampleSet.DEFAULT),
    ("2", SampleSet.SOFT),
    ("Soft", SampleSet.SOFT),
    ("3", SampleSet.DRUM),
    ("Drum", SampleSet.DRUM),
)

OVERLAY_POSITION_TOKENS: tuple[tuple[str, OverlayPosition], ...] = (
    ("NoChange", OverlayPosition.NO_CHANGE),
    ("Below", OverlayPosition.BELOW),
    ("Above", OverlayPosition.ABOVE),
)
