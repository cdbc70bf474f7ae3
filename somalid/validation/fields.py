"""Field validators for ID number, name and sex.

Each validator is independent, takes the raw value (None is treated as the
empty string) and returns the normalized value or raises ValidationError with
the field's code. Validators stop at the first violated constraint.
"""

import re
import unicodedata
from typing import Any

from somalid.checksum import get_checksum
from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.core.rule import DEFAULT_RULE, Rule

_DIGITS = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")
_LATIN_NAME = re.compile(r"[A-Za-z\s'.\-]+")

NAME_PUNCTUATION = frozenset("'.-")

SEX_VALUES = {"male": "Male", "m": "Male", "female": "Female", "f": "Female"}


def _as_text(raw: Any) -> str:
    return "" if raw is None else str(raw)


def validate_id_number(raw: Any, rule: Rule = DEFAULT_RULE) -> str:
    """Validate and normalize an ID number.

    With ``rule.id_allow_separators`` every non-digit character is stripped
    first; otherwise the raw value must already be all digits.

    Args:
        raw: ID number as entered
        rule: Validation rule

    Returns:
        The ID digits

    Raises:
        ValidationError: INVALID_ID_NUMBER if the value is not numeric, has
                        the wrong length, lacks the required prefix, or fails
                        the configured checksum

    Example:
        >>> validate_id_number("9342 6578 2412")
        '934265782412'
    """
    text = _as_text(raw)
    digits = _NON_DIGITS.sub("", text) if rule.id_allow_separators else text

    if not _DIGITS.fullmatch(digits):
        raise ValidationError.from_code(ErrorCode.INVALID_ID_NUMBER, field="id_number")

    if rule.id_length is not None and len(digits) != rule.id_length:
        raise ValidationError.from_code(
            ErrorCode.INVALID_ID_NUMBER,
            field="id_number",
            reason="id_length",
            length=rule.id_length,
        )

    if rule.id_must_start and not digits.startswith(rule.id_must_start):
        raise ValidationError.from_code(
            ErrorCode.INVALID_ID_NUMBER,
            field="id_number",
            reason="id_prefix",
            prefix=rule.id_must_start,
        )

    if rule.checksum is not None and not get_checksum(rule.checksum)(digits):
        raise ValidationError.from_code(
            ErrorCode.INVALID_ID_NUMBER,
            field="id_number",
            reason="id_checksum",
            algorithm=rule.checksum,
        )

    return digits


def _is_name_char(char: str) -> bool:
    if char.isspace() or char in NAME_PUNCTUATION:
        return True
    return unicodedata.category(char)[0] in ("L", "M")


def validate_name(raw: Any, rule: Rule = DEFAULT_RULE) -> str:
    """Validate and normalize a person's name.

    The name is trimmed and must be non-empty, no longer than
    ``rule.name_max_length`` and made of letters, whitespace, apostrophes,
    periods and hyphens. Letters are Latin A-Z only unless
    ``rule.allow_non_latin_letters`` is set, in which case any Unicode letter
    or combining mark is accepted (Arabic script, accented Latin, ...).

    Returns:
        The trimmed name with internal whitespace runs collapsed to one space

    Raises:
        ValidationError: INVALID_NAME

    Example:
        >>> validate_name("  Ahmed   Hassan ")
        'Ahmed Hassan'
    """
    name = _as_text(raw).strip()

    if rule.allow_non_latin_letters:
        allowed = all(_is_name_char(char) for char in name)
    else:
        allowed = _LATIN_NAME.fullmatch(name) is not None

    if not name or len(name) > rule.name_max_length or not allowed:
        raise ValidationError.from_code(
            ErrorCode.INVALID_NAME,
            field="name",
            max_length=rule.name_max_length,
        )

    return _WHITESPACE_RUN.sub(" ", name)


def validate_sex(raw: Any) -> str:
    """Validate sex, case-insensitively.

    Accepts male, female, m and f.

    Returns:
        "Male" or "Female"

    Raises:
        ValidationError: INVALID_SEX
    """
    value = _as_text(raw).lower()
    if value not in SEX_VALUES:
        raise ValidationError.from_code(ErrorCode.INVALID_SEX, field="sex")
    return SEX_VALUES[value]
