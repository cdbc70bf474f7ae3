"""Identity record shapes.

This module defines the two record types that cross the validator boundary:

    - RawRecord: structurally complete but semantically unvalidated input
    - ValidatedRecord: normalized, fully checked output

Fields (validator order):
    - id_number: National ID number [REQUIRED]
    - name: Full name [REQUIRED]
    - sex: Male/Female (or m/f) [REQUIRED]
    - dob: Date of birth [REQUIRED]
    - issue: Date of issue [REQUIRED]
    - expiry: Date of expiry [REQUIRED]
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.privacy import mask_id

# Required fields, in the order the record validator checks them
REQUIRED_FIELDS = ["id_number", "name", "sex", "dob", "issue", "expiry"]

# Alternative input keys accepted for each field
FIELD_ALIASES: dict[str, str] = {
    "idNumber": "id_number",
    "id": "id_number",
    "dobDMY": "dob",
    "birth": "dob",
    "date_of_birth": "dob",
    "issueDMY": "issue",
    "issue_date": "issue",
    "expiryDMY": "expiry",
    "expiry_date": "expiry",
}


def canonical_field(key: str) -> str:
    """Map an input key onto its canonical field name."""
    return FIELD_ALIASES.get(key, key)


def read_field(data: Mapping[str, Any], field: str) -> Any:
    """Read ``field`` from a mapping, honoring aliases.

    The canonical key wins over any alias. Returns None when absent.
    """
    if field in data:
        return data[field]
    for alias, target in FIELD_ALIASES.items():
        if target == field and alias in data:
            return data[alias]
    return None


@dataclass(frozen=True)
class RawRecord:
    """Untrusted identity record with all six fields present.

    Values are kept exactly as supplied; normalization happens during
    validation.
    """

    id_number: str
    name: str
    sex: str
    dob: str
    issue: str
    expiry: str

    @classmethod
    def from_mapping(cls, data: Any) -> "RawRecord":
        """Lift an untrusted value into a RawRecord.

        Raises:
            ValidationError: INVALID_INPUT if ``data`` is not a mapping,
                            MISSING_FIELD for the first required field that is
                            absent or None
        """
        if isinstance(data, RawRecord):
            return data

        if not isinstance(data, Mapping):
            raise ValidationError.from_code(
                ErrorCode.INVALID_INPUT, actual_type=type(data).__name__
            )

        values: dict[str, Any] = {}
        for field in REQUIRED_FIELDS:
            value = read_field(data, field)
            if value is None:
                raise ValidationError.from_code(
                    ErrorCode.MISSING_FIELD, field=field, reason="missing_field"
                )
            values[field] = value

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the six canonical fields as a plain dict."""
        return asdict(self)


@dataclass(frozen=True)
class ValidatedRecord:
    """Normalized record returned by a successful validation.

    Attributes:
        id_number: ID digits with separators removed
        name: Trimmed name with internal whitespace collapsed
        sex: "Male" or "Female"
        dob_iso: Date of birth, ISO-8601 at UTC midnight
        issue_iso: Date of issue, ISO-8601 at UTC midnight
        expiry_iso: Date of expiry, ISO-8601 at UTC midnight
    """

    id_number: str
    name: str
    sex: str
    dob_iso: str
    issue_iso: str
    expiry_iso: str

    def to_dict(self) -> dict[str, Any]:
        """Return the normalized fields, with the full unmasked ID."""
        return asdict(self)

    def masked(self, head: int = 2, tail: int = 3) -> dict[str, Any]:
        """Return the record as a dict with the ID replaced by its mask."""
        data = self.to_dict()
        data["id_masked"] = mask_id(data.pop("id_number"), head=head, tail=tail)
        return data
