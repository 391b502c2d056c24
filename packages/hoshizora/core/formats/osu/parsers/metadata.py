"""[Metadata] section parser."""

from __future__ import annotations

from hoshizora.core.formats.osu.fields import (
    FieldSpec,
    decode_field,
    to_tags,
    to_text,
    to_unsigned,
)
from hoshizora.core.formats.osu.models.beatmap import Metadata

FIELDS: dict[str, FieldSpec] = {
    "Title": FieldSpec("title", to_text),
    "TitleUnicode": FieldSpec("title_unicode", to_text),
    "Artist": FieldSpec("artist", to_text),
    "ArtistUnicode": FieldSpec("artist_unicode", to_text),
    "Creator": FieldSpec("creator", to_text),
    "Version": FieldSpec("version", to_text),
    "Source": FieldSpec("source", to_text),
    "Tags": FieldSpec("tags", to_tags),
    "BeatmapID": FieldSpec("beatmap_id", to_unsigned),
    "BeatmapSetID": FieldSpec("beatmap_set_id", to_unsigned),
}


def parse_metadata(metadata: Metadata, line: str) -> Metadata:
    """Apply one [Metadata] content line."""
    return decode_field(metadata, FIELDS, line)
