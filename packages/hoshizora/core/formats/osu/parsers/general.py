"""[General] section parser."""

from __future__ import annotations

from hoshizora.core.formats.osu.fields import (
    FieldSpec,
    coded_enum,
    decode_field,
    to_flag,
    to_float,
    to_signed,
    to_text,
    to_unsigned,
    token_enum,
)
from hoshizora.core.formats.osu.models.beatmap import General
from hoshizora.core.formats.osu.models.enums import (
    COUNTDOWN_CODES,
    MODE_CODES,
    OVERLAY_POSITION_TOKENS,
    SAMPLE_SET_TOKENS,
)

FIELDS: dict[str, FieldSpec] = {
    "AudioFilename": FieldSpec("audio_filename", to_text),
    "AudioLeadIn": FieldSpec("audio_lead_in", to_unsigned),
    "AudioHash": FieldSpec("audio_hash", to_text),
    "PreviewTime": FieldSpec("preview_time", to_signed),
    "Countdown": FieldSpec("countdown", coded_enum("Countdown", COUNTDOWN_CODES)),
    "SampleSet": FieldSpec("sample_set", token_enum("SampleSet", SAMPLE_SET_TOKENS)),
    "StackLeniency": FieldSpec("stack_leniency", to_float),
    "Mode": FieldSpec("mode", coded_enum("Mode", MODE_CODES)),
    "LetterboxInBreaks": FieldSpec("letterbox_in_breaks", to_flag),
    "StoryFireInFront": FieldSpec("story_fire_in_front", to_flag),
    "UseSkinSprites": FieldSpec("use_skin_sprites", to_flag),
    "AlwaysShowPlayfield": FieldSpec("always_show_playfield", to_flag),
    "OverlayPosition": FieldSpec(
        "overlay_position", token_enum("OverlayPosition", OVERLAY_POSITION_TOKENS)
    ),
    "SkinPreference": FieldSpec("skin_preference", to_text),
    "EpilepsyWarning": FieldSpec("epilepsy_warning", to_flag),
    "CountdownOffset": FieldSpec("countdown_offset", to_unsigned),
    "SpecialStyle": FieldSpec("special_style", to_flag),
    "WidescreenStoryboard": FieldSpec("widescreen_storyboard", to_flag),
    "SamplesMatchPlaybackRate": FieldSpec("samples_match_playback_rate", to_flag),
}


def parse_general(general: General, line: str) -> General:
    """Apply one [General] content line.

    Args:
        general: Current section value
        line: Raw content line

    Returns:
        Updated General section

    Example:
        >>> parse_general(General(), "Mode: 1").mode
        <Mode.TAIKO: 'Taiko'>
    """
    return decode_field(general, FIELDS, line)
