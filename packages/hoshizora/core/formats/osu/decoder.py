"""Beatmap decoder - fold ``.osu`` text into a Beatmap model.

The decoder threads an explicit ``DecoderState`` (current section plus the
beatmap built so far) through one ``step`` per line. Section parsers are pure
functions over immutable models, so a decode holds no shared mutable state
and independent inputs can be decoded concurrently.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Any

from hoshizora.core.config.models import DecoderConfig, ErrorPolicy, UnsupportedSectionPolicy
from hoshizora.core.formats.osu.errors import (
    BeatmapDecodeError,
    BeatmapDecodeReport,
    UnsupportedSectionError,
)
from hoshizora.core.formats.osu.models.beatmap import Beatmap
from hoshizora.core.formats.osu.parsers import (
    parse_difficulty,
    parse_format,
    parse_general,
    parse_metadata,
)
from hoshizora.core.formats.osu.sections import Section, classify_line
from hoshizora.core.utils.logging import get_logger

logger = get_logger(__name__)

_BOM = "\ufeff"
_LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class SectionHandler:
    """Beatmap attribute owned by a section and the parser that updates it."""

    attribute: str
    parse: Callable[[Any, str], Any]


SECTION_HANDLERS: dict[Section, SectionHandler] = {
    Section.FORMAT: SectionHandler("format", parse_format),
    Section.GENERAL: SectionHandler("general", parse_general),
    Section.METADATA: SectionHandler("metadata", parse_metadata),
    Section.DIFFICULTY: SectionHandler("difficulty", parse_difficulty),
}


class DecodeStatus(str, Enum):
    """Outcome of a decode."""

    PARSED = "parsed"
    FAILED = "failed"


@dataclass(frozen=True)
class DecoderState:
    """Decoder position: the open section and the beatmap so far."""

    section: Section = Section.FORMAT
    beatmap: Beatmap = field(default_factory=Beatmap)


@dataclass(frozen=True)
class DecodeResult:
    """Result of decoding one beatmap text.

    ``beatmap`` is set only when ``status`` is PARSED; a failed decode never
    exposes a partially built model.
    """

    status: DecodeStatus
    beatmap: Beatmap | None
    errors: tuple[BeatmapDecodeError, ...]

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.PARSED


def step(state: DecoderState, line: str, config: DecoderConfig | None = None) -> DecoderState:
    """Advance the decoder by one line.

    Args:
        state: Current decoder state
        line: Raw line, without its line terminator
        config: Decoder settings (defaults if None)

    Returns:
        Next decoder state

    Raises:
        BeatmapDecodeError: If the line fails to decode (no line context)
    """
    config = config or DecoderConfig()

    stripped = line.strip()
    if not stripped or stripped.startswith(config.comment_prefix):
        return state

    section = classify_line(stripped)
    if section is not None:
        logger.debug(f"Entering section [{section.value}]")
        return DecoderState(section=section, beatmap=state.beatmap)

    handler = SECTION_HANDLERS.get(state.section)
    if handler is None:
        if config.unsupported_sections is UnsupportedSectionPolicy.ERROR:
            raise UnsupportedSectionError(state.section.value)
        return state

    current = getattr(state.beatmap, handler.attribute)
    updated = handler.parse(current, line)
    if updated is current:
        return state
    beatmap = state.beatmap.model_copy(update={handler.attribute: updated})
    return DecoderState(section=state.section, beatmap=beatmap)


class BeatmapDecoder:
    """Decoder for ``.osu`` beatmap text.

    The decoder only holds its configuration, so a single instance can be
    reused across threads.

    Example:
        >>> decoder = BeatmapDecoder()
        >>> beatmap = decoder.parse("[General]\\nMode: 1")
        >>> beatmap.general.mode
        <Mode.TAIKO: 'Taiko'>
    """

    def __init__(self, config: DecoderConfig | None = None):
        self.config = config or DecoderConfig()

    def decode(self, text: str) -> DecodeResult:
        """Decode beatmap text into a result value.

        Args:
            text: Full beatmap contents, already decoded to str

        Returns:
            DecodeResult with either the beatmap or the line errors
        """
        if text.startswith(_BOM):
            text = text[len(_BOM) :]

        state = DecoderState()
        errors: list[BeatmapDecodeError] = []
        skipped_sections: set[Section] = set()

        for line_number, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
            try:
                state = step(state, line, self.config)
            except BeatmapDecodeError as e:
                errors.append(e.with_line(line_number, line))
                if self.config.error_policy is ErrorPolicy.STOP_ON_FIRST:
                    break
                continue

            if (
                state.section not in SECTION_HANDLERS
                and state.section not in skipped_sections
                and self.config.unsupported_sections is UnsupportedSectionPolicy.IGNORE
            ):
                skipped_sections.add(state.section)
                logger.debug(f"Ignoring content of unsupported section [{state.section.value}]")

        if errors:
            if self.config.error_policy is ErrorPolicy.COLLECT_ALL:
                logger.warning(f"Beatmap decode failed with {len(errors)} line error(s)")
            return DecodeResult(status=DecodeStatus.FAILED, beatmap=None, errors=tuple(errors))

        return DecodeResult(status=DecodeStatus.PARSED, beatmap=state.beatmap, errors=())

    def parse(self, text: str) -> Beatmap:
        """Decode beatmap text, raising on failure.

        Args:
            text: Full beatmap contents, already decoded to str

        Returns:
            Decoded Beatmap

        Raises:
            BeatmapDecodeError: The first line error (stop-on-first policy)
            BeatmapDecodeReport: All line errors (collect-all policy)
        """
        result = self.decode(text)
        if result.beatmap is not None:
            return result.beatmap
        if self.config.error_policy is ErrorPolicy.COLLECT_ALL:
            raise BeatmapDecodeReport(result.errors)
        raise result.errors[0]


def parse_beatmap(text: str, config: DecoderConfig | None = None) -> Beatmap:
    """Decode beatmap text with a one-off decoder."""
    return BeatmapDecoder(config).parse(text)
