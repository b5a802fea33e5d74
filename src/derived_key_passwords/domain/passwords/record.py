"""Colon-delimited serialization of parameter lists and derived keys."""

from __future__ import annotations

from collections.abc import Sequence

from derived_key_passwords.domain.passwords.errors import (
    InvalidParameterCount,
    InvalidRecordFormat,
    RecordFieldError,
)

FIELD_DELIMITER = ":"


def split_record(record: str) -> tuple[list[str], str]:
    """Split one stored record into its parameters and trailing derived key."""

    if not isinstance(record, str) or not record:
        raise InvalidRecordFormat("record is empty")
    if FIELD_DELIMITER not in record:
        raise InvalidRecordFormat("record has no parameter fields")

    *parameters, derived_key = record.split(FIELD_DELIMITER)
    if not derived_key:
        raise InvalidRecordFormat("record has an empty derived key")
    return parameters, derived_key


def join_record(parameters: Sequence[str], derived_key: str) -> str:
    """Serialize parameters and derived key, rejecting fields that break parsing."""

    fields = [*parameters, derived_key]
    for position, field in enumerate(fields):
        if not isinstance(field, str):
            raise RecordFieldError(
                f"field {position} is {type(field).__name__}, expected str"
            )
        if FIELD_DELIMITER in field:
            raise RecordFieldError(f"field {position} contains {FIELD_DELIMITER!r}")
    if not derived_key:
        raise RecordFieldError("derived key is empty")
    return FIELD_DELIMITER.join(fields)


def require_parameter_count(parameters: Sequence[str], expected: int) -> list[str]:
    """Return parameters as a list when exactly `expected` of them were given.

    Schemes call this at the top of `derive_key` so that a record with
    missing or extra fields is rejected before any value is interpreted.
    """

    if len(parameters) != expected:
        raise InvalidParameterCount(expected=expected, actual=len(parameters))
    return list(parameters)
