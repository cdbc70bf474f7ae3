"""Privacy helpers: ID masking and record redaction.

Masking keeps a head and tail span of the ID visible and replaces the middle
with asterisks. Redaction returns a copy of a record with the ID masked and
other sensitive fields replaced by a fixed marker.

Both helpers accept raw or validated records and never mutate their input.
"""

import re
from collections.abc import Sequence
from typing import Any

REDACTION_MARKER = "[REDACTED]"
MASK_CHAR = "*"

_NON_DIGITS = re.compile(r"[^0-9]")
_MASK_SHAPE = re.compile(r"([0-9]*)\*+([0-9]*)")

DEFAULT_HEAD = 2
DEFAULT_TAIL = 3

# Field names treated as the ID number (masked, not replaced)
ID_FIELDS = frozenset({"id_number", "idNumber", "id"})

DEFAULT_REDACT_FIELDS: tuple[str, ...] = (
    "id_number",
    "name",
    "dob",
    "issue",
    "expiry",
)

# Every spelling of each default field across RawRecord, ValidatedRecord and
# the legacy camelCase key names
_FIELD_SPELLINGS: dict[str, tuple[str, ...]] = {
    "id_number": ("id_number", "idNumber", "id"),
    "name": ("name",),
    "dob": ("dob", "dobDMY", "dob_iso", "birth", "date_of_birth"),
    "issue": ("issue", "issueDMY", "issue_iso", "issue_date"),
    "expiry": ("expiry", "expiryDMY", "expiry_iso", "expiry_date"),
}


def mask_id(id_digits: Any, head: int = DEFAULT_HEAD, tail: int = DEFAULT_TAIL) -> str:
    """Mask the middle of an ID number.

    Non-digit characters are removed before masking. When ``head + tail``
    covers the whole ID there is nothing left to mask and the digits are
    returned as they are.

    Args:
        id_digits: ID number (separators are ignored)
        head: Number of leading digits left visible
        tail: Number of trailing digits left visible

    Returns:
        Masked ID, or "" if the input holds no digits

    Raises:
        ValueError: If head or tail is negative

    Example:
        >>> mask_id("934265782412")
        '93*******412'
        >>> mask_id("934265782412", head=4, tail=4)
        '9342****2412'
    """
    if head < 0 or tail < 0:
        raise ValueError(f"head and tail must be >= 0 (got head={head}, tail={tail})")

    digits = _NON_DIGITS.sub("", str(id_digits or ""))
    if not digits:
        return ""

    hidden = max(len(digits) - head - tail, 0)
    tail_start = min(head, len(digits)) + hidden
    return digits[:head] + MASK_CHAR * hidden + digits[tail_start:]


def _is_masked(value: Any) -> bool:
    """Check that ``value`` has the shape mask_id gives with default spans.

    A raw ID that uses ``*`` as a separator does not match.
    """
    if not isinstance(value, str):
        return False
    match = _MASK_SHAPE.fullmatch(value)
    if match is None:
        return False
    head, tail = match.groups()
    return len(head) == DEFAULT_HEAD and len(tail) == DEFAULT_TAIL


def redact(
    record: Any,
    fields: Sequence[str] = DEFAULT_REDACT_FIELDS,
) -> dict[str, Any]:
    """Return a redacted copy of a record.

    The ID field is replaced with its masked form; every other listed field
    that holds a value is replaced with REDACTION_MARKER. Unlisted fields are
    copied unchanged. Redacting an already redacted record is a no-op.

    Args:
        record: Mapping, RawRecord or ValidatedRecord
        fields: Field names to redact. Default names also match their aliases
               (idNumber, dobDMY, dob_iso, ...).

    Returns:
        New dictionary; the input is not modified

    Example:
        >>> redact({"id_number": "934265782412", "name": "Ahmed", "sex": "Male"})
        {'id_number': '93*******412', 'name': '[REDACTED]', 'sex': 'Male'}
    """
    source = record.to_dict() if hasattr(record, "to_dict") else record
    out = dict(source)

    targets: set[str] = set()
    for field in fields:
        targets.update(_FIELD_SPELLINGS.get(field, (field,)))

    for key in targets:
        value = out.get(key)
        if not value:
            continue
        if key in ID_FIELDS:
            if not _is_masked(value):
                out[key] = mask_id(value)
        else:
            out[key] = REDACTION_MARKER

    return out
