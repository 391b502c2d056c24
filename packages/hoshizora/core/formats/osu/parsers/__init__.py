"""Per-section parsers.

Each parser is a pure function ``(section value, line) -> section value``.
"""

from hoshizora.core.formats.osu.parsers.difficulty import parse_difficulty
from hoshizora.core.formats.osu.parsers.format import parse_format
from hoshizora.core.formats.osu.parsers.general import parse_general
from hoshizora.core.formats.osu.parsers.metadata import parse_metadata

__all__ = [
    "parse_difficulty",
    "parse_format",
    "parse_general",
    "parse_metadata",
]
