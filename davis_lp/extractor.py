"""Schema-driven field extraction from raw sub-reports."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from davis_lp.conversion.units import to_number
from davis_lp.models.field import FieldSpec, TypedField

logger = logging.getLogger(__name__)


def extract_fields(
    sub_report: Mapping[str, Any],
    schema: Iterable[FieldSpec],
) -> dict[str, TypedField]:
    """Project *sub_report* through *schema* into typed, converted fields.

    Fields whose source value is missing, ``None``, non-numeric or converts
    to ``None``/NaN are left out; the result preserves schema order and may
    be empty.  Keys not named by the schema are ignored.
    """
    fields: dict[str, TypedField] = {}

    for spec in schema:
        raw = sub_report.get(spec.source_key)
        if raw is None:
            continue

        value = to_number(raw)
        if spec.converter is not None:
            value = spec.converter(value)

        if value is None:
            continue
        if not math.isfinite(value):
            logger.debug("Dropping field %s: unusable value %r", spec.output_name, raw)
            continue

        fields[spec.output_name] = TypedField(value=value, kind=spec.kind)

    return fields
