"""``Key:Value`` field decoding and value converters.

Converters are strict: surrounding whitespace is trimmed by the field
decoder, anything else that does not fit the target type is an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
import re
from typing import Any, TypeVar

from pydantic import BaseModel

from hoshizora.core.formats.osu.errors import (
    MissingColonError,
    NumericConversionError,
    UnknownEnumerationValueError,
)
from hoshizora.core.utils.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
EnumT = TypeVar("EnumT", bound=Enum)

Converter = Callable[[str, str], Any]

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class FieldSpec:
    """Target attribute and converter for one recognized key."""

    attribute: str
    converter: Converter


def split_field(line: str) -> tuple[str, str]:
    """Split a content line at its first colon and trim both halves.

    Raises:
        MissingColonError: If the line has no colon
    """
    key, sep, value = line.partition(":")
    if not sep:
        raise MissingColonError(line)
    return key.strip(), value.strip()


def decode_field(model: ModelT, fields: Mapping[str, FieldSpec], line: str) -> ModelT:
    """Decode one content line against a section's key table.

    Args:
        model: Current section value
        fields: Recognized keys for the section
        line: Raw content line

    Returns:
        Updated copy of ``model``, or ``model`` itself for unrecognized keys

    Raises:
        MissingColonError: If the line has no colon
        NumericConversionError: If a numeric value is malformed
        UnknownEnumerationValueError: If an enumeration token is unknown
    """
    key, value = split_field(line)
    spec = fields.get(key)
    if spec is None:
        logger.debug(f"Ignoring unrecognized key in {type(model).__name__}: {key!r}")
        return model
    return model.model_copy(update={spec.attribute: spec.converter(key, value)})


def _parse_integer(
    key: str, value: str, pattern: re.Pattern[str], low: int, high: int, expected: str
) -> int:
    if pattern.fullmatch(value) is None:
        raise NumericConversionError(key, value, expected)
    number = int(value)
    if not low <= number <= high:
        raise NumericConversionError(key, value, expected)
    return number


def to_text(key: str, value: str) -> str:
    return value


def to_unsigned(key: str, value: str) -> int:
    """Parse a 32-bit unsigned integer."""
    return _parse_integer(key, value, _UNSIGNED_RE, 0, _U32_MAX, "unsigned integer")


def to_signed(key: str, value: str) -> int:
    """Parse a 32-bit signed integer."""
    return _parse_integer(key, value, _SIGNED_RE, _I32_MIN, _I32_MAX, "signed integer")


def to_float(key: str, value: str) -> float:
    """Parse an ASCII decimal number; digit-group underscores are rejected."""
    if not value.isascii() or "_" in value:
        raise NumericConversionError(key, value, "number")
    try:
        return float(value)
    except ValueError as e:
        raise NumericConversionError(key, value, "number") from e


def to_flag(key: str, value: str) -> bool:
    """Parse a 0-255 integer flag; any non-zero value is True."""
    return _parse_integer(key, value, _UNSIGNED_RE, 0, _U8_MAX, "flag") != 0


def to_tags(key: str, value: str) -> tuple[str, ...]:
    """Split on single spaces, keeping order and duplicates."""
    if not value:
        return ()
    return tuple(value.split(" "))


def coded_enum(name: str, table: tuple[tuple[int, EnumT], ...]) -> Converter:
    """Build a converter for an enumeration selected by integer code.

    The token must parse as a signed integer before the code lookup, so
    ``"+1"`` and ``"01"`` both select code 1.
    """

    def convert(key: str, value: str) -> EnumT:
        if _SIGNED_RE.fullmatch(value) is not None:
            code = int(value)
            for candidate, variant in table:
                if candidate == code:
                    return variant
        raise UnknownEnumerationValueError(name, value, key=key)

    return convert


def token_enum(name: str, table: tuple[tuple[str, EnumT], ...]) -> Converter:
    """Build a converter for an enumeration selected by exact token."""

    def convert(key: str, value: str) -> EnumT:
        for token, variant in table:
            if token == value:
                return variant
        raise UnknownEnumerationValueError(name, value, key=key)

    return convert
