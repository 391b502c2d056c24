"""Typed errors raised while decoding beatmap text.

Field decoders raise these without line context; the driver attaches the
1-based line number and the raw line before surfacing them to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class DecodeErrorKind(str, Enum):
    """Category of a decode failure."""

    MISSING_COLON = "missing_colon"
    NUMERIC_CONVERSION_FAILED = "numeric_conversion_failed"
    UNKNOWN_ENUMERATION_VALUE = "unknown_enumeration_value"
    UNSUPPORTED_SECTION = "unsupported_section"
    REPORT = "report"


class DecodeErrorData(BaseModel):
    """Structured data for a decode error.

    Args:
        kind: Error category
        message: Human-readable description
        line_number: 1-based line number (if known)
        line: Raw source line (if known)
        key: Field key being decoded
        value: Raw value that failed to convert
        expected: Expected numeric type
        enumeration: Enumeration name for unknown tokens
        section: Section name for unsupported sections
    """

    kind: DecodeErrorKind
    message: str
    line_number: int | None = None
    line: str | None = None
    key: str | None = None
    value: str | None = None
    expected: str | None = None
    enumeration: str | None = None
    section: str | None = None


class BeatmapDecodeError(Exception):
    """Base exception for all beatmap decode failures.

    Attributes:
        data: Structured error data (DecodeErrorData)
        kind: Error category
        message: Human-readable description
        line_number: 1-based line number, once attached by the decoder
        line: Raw source line, once attached by the decoder
    """

    kind: DecodeErrorKind

    def __init__(self, message: str, **fields: Any) -> None:
        self.data = DecodeErrorData(kind=self.kind, message=message, **fields)
        super().__init__(self._render())

    @property
    def message(self) -> str:
        return self.data.message

    @property
    def line_number(self) -> int | None:
        return self.data.line_number

    @property
    def line(self) -> str | None:
        return self.data.line

    def with_line(self, line_number: int, line: str) -> BeatmapDecodeError:
        """Attach source position and return self for re-raising."""
        self.data = self.data.model_copy(update={"line_number": line_number, "line": line})
        self.args = (self._render(),)
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.data.model_dump(mode="json", exclude_none=True)

    def _render(self) -> str:
        if self.data.line_number is None:
            return self.data.message
        return f"line {self.data.line_number}: {self.data.message} ({self.data.line!r})"


class MissingColonError(BeatmapDecodeError):
    """A content line has no ``:`` separator."""

    kind = DecodeErrorKind.MISSING_COLON

    def __init__(self, line: str) -> None:
        super().__init__(f"Expected 'Key:Value', found no ':' in {line.strip()!r}")


class NumericConversionError(BeatmapDecodeError):
    """A value could not be parsed as the expected numeric type."""

    kind = DecodeErrorKind.NUMERIC_CONVERSION_FAILED

    def __init__(self, key: str, value: str, expected: str) -> None:
        super().__init__(
            f"Invalid {expected} for {key}: {value!r}", key=key, value=value, expected=expected
        )

    @property
    def key(self) -> str:
        return self.data.key or ""

    @property
    def value(self) -> str:
        return self.data.value or ""


class UnknownEnumerationValueError(BeatmapDecodeError):
    """A value matched no code or name of its enumeration."""

    kind = DecodeErrorKind.UNKNOWN_ENUMERATION_VALUE

    def __init__(self, enumeration: str, value: str, key: str | None = None) -> None:
        super().__init__(
            f"Unknown {enumeration} value: {value!r}",
            enumeration=enumeration,
            value=value,
            key=key,
        )

    @property
    def enumeration(self) -> str:
        return self.data.enumeration or ""

    @property
    def value(self) -> str:
        return self.data.value or ""


class UnsupportedSectionError(BeatmapDecodeError):
    """A content line was routed to a section without a parser."""

    kind = DecodeErrorKind.UNSUPPORTED_SECTION

    def __init__(self, section: str) -> None:
        super().__init__(f"Section [{section}] is not supported", section=section)

    @property
    def section(self) -> str:
        return self.data.section or ""


class BeatmapDecodeReport(BeatmapDecodeError):
    """Every line error collected during a collect-all decode."""

    kind = DecodeErrorKind.REPORT

    def __init__(self, errors: tuple[BeatmapDecodeError, ...]) -> None:
        self.errors = errors
        super().__init__(f"{len(errors)} line(s) failed to decode")

    def _render(self) -> str:
        details = "\n".join(f"  {error}" for error in self.errors)
        return f"{self.data.message}\n{details}" if details else self.data.message
