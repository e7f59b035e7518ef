"""Immutable view of one parsed Davis JSON document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

UNKNOWN_DEVICE_ID = "unknown"

_NANOS_PER_SECOND = 1_000_000_000


def is_code(value: Any, expected: int) -> bool:
    """Strict numeric equality for discriminator codes (booleans never match)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == expected


def matches_structure(
    sub_report: Mapping[str, Any],
    structure_type: int,
    txid: int | None = None,
) -> bool:
    """Check a sub-report's ``data_structure_type`` and, optionally, its ``txid``."""
    if not is_code(sub_report.get("data_structure_type"), structure_type):
        return False
    return txid is None or is_code(sub_report.get("txid"), txid)


@dataclass(frozen=True, slots=True)
class RawReading:
    """A single device reading: timestamp, device id and its sub-reports.

    Frozen -- one instance is built per conversion call and discarded once
    the lines are encoded.
    """

    timestamp_seconds: int | float
    device_id: str = UNKNOWN_DEVICE_ID
    sub_reports: tuple[Mapping[str, Any], ...] = ()

    @property
    def timestamp_nanos(self) -> int:
        if isinstance(self.timestamp_seconds, int):
            return self.timestamp_seconds * _NANOS_PER_SECOND
        return round(self.timestamp_seconds * _NANOS_PER_SECOND)

    def find(self, structure_type: int, txid: int | None = None) -> Mapping[str, Any] | None:
        """Return the first sub-report matching the discriminator, or ``None``."""
        for sub_report in self.sub_reports:
            if matches_structure(sub_report, structure_type, txid):
                return sub_report
        return None
