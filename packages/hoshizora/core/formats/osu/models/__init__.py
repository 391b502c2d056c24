"""Document model for decoded osu! beatmaps."""

from hoshizora.core.formats.osu.models.beatmap import (
    Beatmap,
    Difficulty,
    Editor,
    Format,
    General,
    HitObject,
    Metadata,
    TimingPoint,
)
from hoshizora.core.formats.osu.models.enums import (
    Countdown,
    Mode,
    OverlayPosition,
    SampleSet,
)

__all__ = [
    "Beatmap",
    "Countdown",
    "Difficulty",
    "Editor",
    "Format",
    "General",
    "HitObject",
    "Metadata",
    "Mode",
    "OverlayPosition",
    "SampleSet",
    "TimingPoint",
]
