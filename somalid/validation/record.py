"""Record-level validation.

Composes the field validators and the date engine into one pass/fail
contract. Fields are checked in a fixed order (id number, name, sex, dates)
and the first failure is raised; errors are never aggregated.

Entry points:
    - validate_dates: date triple parsing plus cross-field ordering
    - validate_record: standard validation of a RawRecord or mapping
    - validate_record_guarded: shape check (INVALID_INPUT / MISSING_FIELD)
      before standard validation
    - validate_record_multilingual: standard validation whose errors carry
      every language variant
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.core.record import RawRecord, ValidatedRecord, read_field
from somalid.core.rule import DEFAULT_RULE, Rule
from somalid.i18n.catalog import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from somalid.validation.dates import ISO_FORMAT, DateEngine, default_engine
from somalid.validation.fields import validate_id_number, validate_name, validate_sex

DATE_FIELDS = ("dob", "issue", "expiry")


@dataclass(frozen=True)
class DateTriple:
    """Date of birth, issue and expiry (raw strings or ISO strings)."""

    dob: Any
    issue: Any
    expiry: Any


def _as_triple(dates: DateTriple | Mapping[str, Any] | RawRecord) -> DateTriple:
    if isinstance(dates, DateTriple):
        return dates
    if isinstance(dates, RawRecord):
        return DateTriple(dob=dates.dob, issue=dates.issue, expiry=dates.expiry)
    return DateTriple(*(read_field(dates, field) for field in DATE_FIELDS))


def validate_dates(
    dates: DateTriple | Mapping[str, Any],
    rule: Rule = DEFAULT_RULE,
    now: datetime | None = None,
    engine: DateEngine = default_engine,
) -> DateTriple:
    """Validate the date of birth, issue and expiry together.

    Each date must parse and be a real calendar date before any ordering
    check runs. Then:

    1. issue must be strictly after date of birth
    2. expiry must be strictly after issue
    3. if ``rule.require_future_expiry``, expiry must be strictly after
       ``now`` (current UTC time when not given)

    Args:
        dates: DateTriple or mapping with dob/issue/expiry (aliases accepted)
        rule: Validation rule
        now: Reference time for the future-expiry check
        engine: Date engine to parse with

    Returns:
        DateTriple of ISO-8601 strings at UTC midnight

    Raises:
        ValidationError: INVALID_DATE naming the malformed date, or
                        INCONSISTENT_DATES for an ordering violation

    Example:
        >>> validate_dates({"dob": "15-03-1990", "issue": "01-01-2020", "expiry": "01-01-2030"})
        DateTriple(dob='1990-03-15T00:00:00.000Z', issue='2020-01-01T00:00:00.000Z', expiry='2030-01-01T00:00:00.000Z')
    """
    triple = _as_triple(dates)

    dob = engine.to_datetime(triple.dob, field="dob")
    issue = engine.to_datetime(triple.issue, field="issue")
    expiry = engine.to_datetime(triple.expiry, field="expiry")

    if issue <= dob:
        raise ValidationError.from_code(
            ErrorCode.INCONSISTENT_DATES, field="issue", reason="issue_before_dob"
        )

    if expiry <= issue:
        raise ValidationError.from_code(
            ErrorCode.INCONSISTENT_DATES, field="expiry", reason="expiry_before_issue"
        )

    if rule.require_future_expiry:
        reference = now or datetime.now(timezone.utc)
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        if expiry <= reference:
            raise ValidationError.from_code(
                ErrorCode.INCONSISTENT_DATES, field="expiry", reason="expiry_not_future"
            )

    return DateTriple(
        dob=dob.strftime(ISO_FORMAT),
        issue=issue.strftime(ISO_FORMAT),
        expiry=expiry.strftime(ISO_FORMAT),
    )


def validate_record(
    record: RawRecord | Mapping[str, Any],
    rule: Rule = DEFAULT_RULE,
    now: datetime | None = None,
) -> ValidatedRecord:
    """Validate a record field by field, raising on the first failure.

    A mapping with missing keys is accepted; absent fields read as None and
    fail in their own validator. Use validate_record_guarded() to reject
    structurally incomplete input up front.

    Raises:
        ValidationError: with the code of the first failing field

    Example:
        >>> result = validate_record({
        ...     "id_number": "934265782412",
        ...     "name": "Ahmed Hassan Mohamed",
        ...     "sex": "Male",
        ...     "dob": "15-03-1990",
        ...     "issue": "01-01-2020",
        ...     "expiry": "01-01-2030",
        ... })
        >>> result.dob_iso
        '1990-03-15T00:00:00.000Z'
    """
    if isinstance(record, RawRecord):
        data: Mapping[str, Any] = record.to_dict()
    else:
        data = record

    id_number = validate_id_number(read_field(data, "id_number"), rule)
    name = validate_name(read_field(data, "name"), rule)
    sex = validate_sex(read_field(data, "sex"))
    dates = validate_dates(_as_triple(data), rule, now=now)

    return ValidatedRecord(
        id_number=id_number,
        name=name,
        sex=sex,
        dob_iso=dates.dob,
        issue_iso=dates.issue,
        expiry_iso=dates.expiry,
    )


def validate_record_guarded(
    record: Any,
    rule: Rule = DEFAULT_RULE,
    now: datetime | None = None,
) -> ValidatedRecord:
    """Check the input's shape, then run standard validation.

    Raises:
        ValidationError: INVALID_INPUT if ``record`` is not a mapping or
                        RawRecord, MISSING_FIELD if a required field is
                        absent, otherwise as validate_record()
    """
    raw = RawRecord.from_mapping(record)
    return validate_record(raw, rule, now=now)


def validate_record_multilingual(
    record: RawRecord | Mapping[str, Any],
    rule: Rule = DEFAULT_RULE,
    language: str = DEFAULT_LANGUAGE,
    now: datetime | None = None,
) -> ValidatedRecord:
    """Validate a record, attaching every language variant to failures.

    On failure the raised ValidationError has ``language`` and
    ``localized_message`` set for the requested language (English for
    unsupported languages) and ``messages`` filled for every supported
    language.

    Example:
        >>> try:
        ...     validate_record_multilingual(record_with_bad_sex, language="ar")
        ... except ValidationError as e:
        ...     print(e.localized_message)
        الجنس يجب أن يكون ذكر أو أنثى
    """
    try:
        return validate_record(record, rule, now=now)
    except ValidationError as e:
        target = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        e.localize_all()
        e.language = target
        e.localized_message = e.localize(target)
        raise
