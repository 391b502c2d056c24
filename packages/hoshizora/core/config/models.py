"""Configuration models for the beatmap decoder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorPolicy(str, Enum):
    """How the decoder reacts to a line that fails to decode.

    Attributes:
        STOP_ON_FIRST: Abort on the first failing line.
        COLLECT_ALL: Skip failing lines and report every error at the end.
    """

    STOP_ON_FIRST = "stop_on_first"
    COLLECT_ALL = "collect_all"


class UnsupportedSectionPolicy(str, Enum):
    """How content lines in sections without a parser are treated."""

    IGNORE = "ignore"
    ERROR = "error"


class DecoderConfig(BaseModel):
    """Decoder behaviour settings.

    Immutable after creation; one instance may be shared between decoders.

    Example:
        >>> config = DecoderConfig(error_policy="collect_all")
        >>> config.error_policy
        <ErrorPolicy.COLLECT_ALL: 'collect_all'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    error_policy: ErrorPolicy = Field(
        default=ErrorPolicy.STOP_ON_FIRST,
        description="Stop at the first failing line or collect all line errors",
    )

    unsupported_sections: UnsupportedSectionPolicy = Field(
        default=UnsupportedSectionPolicy.IGNORE,
        description="Ignore content of unimplemented sections or raise UnsupportedSectionError",
    )

    comment_prefix: str = Field(
        default="//",
        min_length=1,
        description="Lines starting with this prefix (after indentation) are skipped",
    )
