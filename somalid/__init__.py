"""Somali national ID record validator.

Validates identity records (ID number, name, sex, date of birth, issue and
expiry dates) against a configurable Rule, normalizes them, and reports
failures with a stable error code and English, Somali and Arabic messages.

Example:
    >>> from somalid import validate_record
    >>> record = validate_record({
    ...     "id_number": "9342 6578 2412",
    ...     "name": "Ahmed Hassan Mohamed",
    ...     "sex": "m",
    ...     "dob": "15/03/1990",
    ...     "issue": "2020-01-01",
    ...     "expiry": "01.01.2030",
    ... })
    >>> record.id_number, record.sex
    ('934265782412', 'Male')
"""

from somalid.checksum import enable_checksum
from somalid.core.exceptions import (
    ErrorCode,
    RuleConfigurationError,
    SomalidError,
    ValidationError,
)
from somalid.core.record import RawRecord, ValidatedRecord
from somalid.core.rule import DEFAULT_RULE, Rule
from somalid.i18n.catalog import SUPPORTED_LANGUAGES, get_localized_message
from somalid.privacy import mask_id, redact
from somalid.validation.batch import validate_batch
from somalid.validation.cache import DateParseCache
from somalid.validation.dates import DateEngine, is_valid_date, parse_date, to_iso
from somalid.validation.fields import validate_id_number, validate_name, validate_sex
from somalid.validation.record import (
    validate_dates,
    validate_record,
    validate_record_guarded,
    validate_record_multilingual,
)
from somalid.validation.result import BatchResult

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "Rule",
    "DEFAULT_RULE",
    # Records
    "RawRecord",
    "ValidatedRecord",
    # Errors
    "ErrorCode",
    "SomalidError",
    "ValidationError",
    "RuleConfigurationError",
    # Validation
    "validate_id_number",
    "validate_name",
    "validate_sex",
    "validate_dates",
    "validate_record",
    "validate_record_guarded",
    "validate_record_multilingual",
    "validate_batch",
    "BatchResult",
    # Dates
    "parse_date",
    "is_valid_date",
    "to_iso",
    "DateEngine",
    "DateParseCache",
    # Privacy
    "mask_id",
    "redact",
    "enable_checksum",
    # Localization
    "SUPPORTED_LANGUAGES",
    "get_localized_message",
]
