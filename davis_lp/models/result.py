"""Outcome of a single conversion call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ConversionStatus(StrEnum):
    """Classification of a conversion outcome."""

    OK = "ok"
    PARSE_FAILURE = "parse_failure"
    STRUCTURAL_INVALID = "structural_invalid"
    NO_VALID_DATA = "no_valid_data"


class Severity(StrEnum):
    """Operator-facing severity of a conversion outcome."""

    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


_SEVERITY_BY_STATUS: dict[ConversionStatus, Severity] = {
    ConversionStatus.OK: Severity.OK,
    ConversionStatus.PARSE_FAILURE: Severity.ERROR,
    ConversionStatus.STRUCTURAL_INVALID: Severity.WARNING,
    ConversionStatus.NO_VALID_DATA: Severity.WARNING,
}


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Line-protocol payload plus a classified diagnostic.

    ``payload`` is ``None`` for every status other than ``OK``; callers check
    ``ok`` instead of testing for an empty string.
    """

    status: ConversionStatus
    payload: str | None = None
    message: str = ""
    line_count: int = 0
    status_text: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ConversionStatus.OK

    @property
    def severity(self) -> Severity:
        return _SEVERITY_BY_STATUS[self.status]

    @property
    def lines(self) -> list[str]:
        return self.payload.split("\n") if self.payload else []

    @classmethod
    def success(cls, lines: list[str], status_text: str) -> ConversionResult:
        return cls(
            status=ConversionStatus.OK,
            payload="\n".join(lines),
            line_count=len(lines),
            status_text=status_text,
        )

    @classmethod
    def failure(
        cls,
        status: ConversionStatus,
        message: str,
        status_text: str,
    ) -> ConversionResult:
        return cls(status=status, message=message, status_text=status_text)
