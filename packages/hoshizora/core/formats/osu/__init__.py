"""osu! beatmap (.osu) format handling."""

from hoshizora.core.formats.osu.decoder import (
    BeatmapDecoder,
    DecodeResult,
    DecodeStatus,
    DecoderState,
    parse_beatmap,
    step,
)
from hoshizora.core.formats.osu.errors import (
    BeatmapDecodeError,
    BeatmapDecodeReport,
    DecodeErrorKind,
    MissingColonError,
    NumericConversionError,
    UnknownEnumerationValueError,
    UnsupportedSectionError,
)
from hoshizora.core.formats.osu.models import Beatmap
from hoshizora.core.formats.osu.sections import Section, classify_line

__all__ = [
    "Beatmap",
    "BeatmapDecodeError",
    "BeatmapDecodeReport",
    "BeatmapDecoder",
    "DecodeErrorKind",
    "DecodeResult",
    "DecodeStatus",
    "DecoderState",
    "MissingColonError",
    "NumericConversionError",
    "Section",
    "UnknownEnumerationValueError",
    "UnsupportedSectionError",
    "classify_line",
    "parse_beatmap",
    "step",
]
