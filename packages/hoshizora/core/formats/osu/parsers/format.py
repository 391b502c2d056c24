"""Format preamble parser (content before the first section header)."""

from __future__ import annotations

import re

from hoshizora.core.formats.osu.fields import FieldSpec, decode_field
from hoshizora.core.formats.osu.models.beatmap import Format

_VERSION_RE = re.compile(r"osu file format v(?P<version>[0-9]+)")

# The preamble has no Key:Value fields; other lines go through the field
# decoder so colon-less text is still rejected.
FIELDS: dict[str, FieldSpec] = {}


def parse_format(fmt: Format, line: str) -> Format:
    """Apply one preamble line.

    Example:
        >>> parse_format(Format(), "osu file format v12").version
        12
    """
    match = _VERSION_RE.fullmatch(line.strip())
    if match is not None:
        return fmt.model_copy(update={"version": int(match.group("version"))})
    return decode_field(fmt, FIELDS, line)
