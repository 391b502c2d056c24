"""[Difficulty] section parser."""

from __future__ import annotations

from hoshizora.core.formats.osu.fields import FieldSpec, decode_field, to_float
from hoshizora.core.formats.osu.models.beatmap import Difficulty

FIELDS: dict[str, FieldSpec] = {
    "HPDrainRate": FieldSpec("hp", to_float),
    "CircleSize": FieldSpec("cs", to_float),
    "OverallDifficulty": FieldSpec("od", to_float),
    "ApproachRate": FieldSpec("ar", to_float),
    "SliderMultiplier": FieldSpec("slider_multiplier", to_float),
    "SliderTickRate": FieldSpec("slider_tickrate", to_float),
}


def parse_difficulty(difficulty: Difficulty, line: str) -> Difficulty:
    return decode_field(difficulty, FIELDS, line)
