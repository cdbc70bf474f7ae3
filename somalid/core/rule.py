"""Validation rule configuration.

A Rule controls how strict field validation is: the exact ID length and
prefix, whether separators may appear in the ID, the maximum name length,
whether non-Latin letters are allowed in names, and whether the expiry date
must lie in the future.

Rules are immutable. The engine reads a Rule during a validation call and
never stores or mutates it.

There is no published issuer standard for the ID format, so the
defaults are conservative: a 12-digit numeric ID with no required prefix.
"""

from dataclasses import asdict, dataclass
from typing import Any

from somalid.checksum import CHECKSUM_ALGORITHMS
from somalid.core.exceptions import RuleConfigurationError

# Flat keys accepted by Rule.from_mapping
RULE_FIELDS = (
    "id_length",
    "id_must_start",
    "id_allow_separators",
    "name_max_length",
    "allow_non_latin_letters",
    "require_future_expiry",
    "checksum",
)

# Keys of the legacy nested camelCase layout
_LEGACY_TOP_LEVEL = {
    "nameMaxLen": "name_max_length",
    "allowArabic": "allow_non_latin_letters",
    "requireFutureExpiry": "require_future_expiry",
}
_LEGACY_ID_NUMBER = {
    "length": "id_length",
    "mustStart": "id_must_start",
    "allowSpaces": "id_allow_separators",
}


@dataclass(frozen=True)
class Rule:
    """Configuration controlling validation strictness.

    Attributes:
        id_length: Exact number of digits required, or None for any length
        id_must_start: Required leading digits, or None for no prefix check
        id_allow_separators: Strip spaces/dashes/other non-digits before
                            checking the ID instead of rejecting them
        name_max_length: Maximum name length after trimming
        allow_non_latin_letters: Accept any Unicode letter or combining mark
                                (Arabic script, accented Latin, ...) in names
        require_future_expiry: Expiry date must be after the validation time
        checksum: Name of the ID checksum algorithm, or None to disable

    Example:
        >>> strict = Rule(id_length=10, id_must_start="93", id_allow_separators=False)
        >>> strict.id_length
        10
    """

    id_length: int | None = 12
    id_must_start: str | None = None
    id_allow_separators: bool = True
    name_max_length: int = 120
    allow_non_latin_letters: bool = True
    require_future_expiry: bool = True
    checksum: str | None = None

    def __post_init__(self) -> None:
        if self.id_length is not None and (
            not isinstance(self.id_length, int) or self.id_length <= 0
        ):
            raise RuleConfigurationError(
                "id_length must be a positive integer",
                parameter="id_length",
                value=self.id_length,
                reason="Non-positive or non-integer length",
            )

        if self.id_must_start is not None and not (
            isinstance(self.id_must_start, str) and self.id_must_start.isascii()
            and self.id_must_start.isdigit()
        ):
            raise RuleConfigurationError(
                "id_must_start must be a string of digits",
                parameter="id_must_start",
                value=self.id_must_start,
                reason="Prefix contains non-digit characters",
            )

        if not isinstance(self.name_max_length, int) or self.name_max_length <= 0:
            raise RuleConfigurationError(
                "name_max_length must be a positive integer",
                parameter="name_max_length",
                value=self.name_max_length,
                reason="Non-positive or non-integer length",
            )

        if self.checksum is not None and self.checksum not in CHECKSUM_ALGORITHMS:
            raise RuleConfigurationError(
                f"Unknown checksum algorithm: {self.checksum!r}",
                parameter="checksum",
                value=self.checksum,
                reason=f"Available: {', '.join(sorted(CHECKSUM_ALGORITHMS))}",
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Rule":
        """Build a Rule from a configuration mapping.

        Accepts either the flat layout produced by to_dict() or the
        legacy nested camelCase layout:

            {
                "idNumber": {"length": 12, "mustStart": null, "allowSpaces": true},
                "nameMaxLen": 120,
                "allowArabic": true,
                "requireFutureExpiry": true
            }

        Keys not present keep their default values.

        Raises:
            RuleConfigurationError: If the mapping has unknown keys or values
                                    that fail Rule validation
        """
        if not isinstance(data, dict):
            raise RuleConfigurationError(
                f"Rule configuration must be a mapping, got: {type(data).__name__}",
                reason="Invalid structure",
            )

        values: dict[str, Any] = {}
        unknown: list[str] = []

        for key, value in data.items():
            if key in RULE_FIELDS:
                values[key] = value
            elif key in _LEGACY_TOP_LEVEL:
                values[_LEGACY_TOP_LEVEL[key]] = value
            elif key == "idNumber" and isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    if sub_key in _LEGACY_ID_NUMBER:
                        values[_LEGACY_ID_NUMBER[sub_key]] = sub_value
                    else:
                        unknown.append(f"idNumber.{sub_key}")
            else:
                unknown.append(key)

        if unknown:
            raise RuleConfigurationError(
                f"Unknown rule parameters: {sorted(unknown)}",
                parameter=sorted(unknown)[0],
                reason="Not a Rule field",
            )

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the Rule as a flat dictionary."""
        return asdict(self)


DEFAULT_RULE = Rule()
