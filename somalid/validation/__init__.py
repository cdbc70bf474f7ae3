"""Validation engine for identity records.

This package holds the date engine and its parse cache, the per-field
validators, record-level validation and batch processing.
"""

# Date engine
from somalid.validation.cache import DateParseCache
from somalid.validation.dates import (
    DateEngine,
    DateFormat,
    ParsedDate,
    is_valid_date,
    is_valid_dmy,
    parse_date,
    to_iso,
    to_iso_from_dmy,
)

# Field validators
from somalid.validation.fields import validate_id_number, validate_name, validate_sex

# Record validation
from somalid.validation.record import (
    DateTriple,
    validate_dates,
    validate_record,
    validate_record_guarded,
    validate_record_multilingual,
)

# Batch processing
from somalid.validation.batch import validate_batch
from somalid.validation.result import BatchResult, BatchSummary, RecordOutcome

__all__ = [
    "DateParseCache",
    "DateEngine",
    "DateFormat",
    "ParsedDate",
    "parse_date",
    "is_valid_date",
    "is_valid_dmy",
    "to_iso",
    "to_iso_from_dmy",
    "validate_id_number",
    "validate_name",
    "validate_sex",
    "DateTriple",
    "validate_dates",
    "validate_record",
    "validate_record_guarded",
    "validate_record_multilingual",
    "validate_batch",
    "BatchResult",
    "BatchSummary",
    "RecordOutcome",
]
