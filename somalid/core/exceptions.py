"""Custom exception classes for somalid error handling.

This module defines the exception hierarchy for the somalid validator:
- ErrorCode: Closed set of machine-readable validation failure codes
- ValidationError: A record or field failed validation
- RuleConfigurationError: A Rule was constructed with invalid parameters

All exceptions inherit from SomalidError for consistent error handling.
"""

from enum import Enum
from typing import Any

from somalid.i18n.catalog import SUPPORTED_LANGUAGES, get_localized_message


class ErrorCode(str, Enum):
    """Machine-readable code carried by every ValidationError.

    The set is closed: the engine never raises a ValidationError with a code
    outside this enumeration.
    """

    INVALID_ID_NUMBER = "INVALID_ID_NUMBER"
    INVALID_NAME = "INVALID_NAME"
    INVALID_SEX = "INVALID_SEX"
    INVALID_DATE = "INVALID_DATE"
    INCONSISTENT_DATES = "INCONSISTENT_DATES"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_FIELD = "MISSING_FIELD"


class SomalidError(Exception):
    """Base exception for all somalid errors.

    Provides a common base class for all custom exceptions in the package,
    enabling catch-all error handling when needed.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            context: Optional dictionary of contextual information (field
                    names, rule parameters, offending values, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{context_str}]"


class ValidationError(SomalidError):
    """Exception raised when an identity record fails validation.

    Carries a stable ErrorCode, the English message, and a mapping of
    language code to message. Only English is present at construction time;
    other languages are looked up from the message catalog on demand via
    localize() / localize_all().

    Context typically includes:
        - field: Name of the record field that failed
        - reason: Key of the detailed message template in the catalog
        - any template parameters (length, prefix, ...)

    Example:
        >>> error = ValidationError(
        ...     "ID number must be exactly 12 digits",
        ...     ErrorCode.INVALID_ID_NUMBER,
        ...     field="id_number",
        ...     reason="id_length",
        ...     length=12,
        ... )
        >>> error.localize("so")
        'Lambarka aqoonsiga waa inuu noqdaa 12 tiro oo keliya'
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        field: str | None = None,
        reason: str | None = None,
        **params: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Non-empty English description of the failure
            code: ErrorCode identifying the failure class
            field: Record field that failed validation
            reason: Catalog key of a detailed localized template
            **params: Parameters substituted into the localized template
        """
        if not message:
            raise ValueError("ValidationError message must not be empty")

        context: dict[str, Any] = {"code": code.value}
        if field is not None:
            context["field"] = field
        if reason is not None:
            context["reason"] = reason
        context.update(params)

        super().__init__(message, context)
        self.code = code
        self.field = field
        self.reason = reason
        self.params = params
        self.messages: dict[str, str] = {"en": message}
        self.language: str | None = None
        self.localized_message: str | None = None

    def __reduce__(self) -> tuple[Any, ...]:
        """Support pickle and copy, which only replay ``args`` by default."""
        return (self.__class__, (self.message, self.code), self.__dict__.copy())

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        field: str | None = None,
        reason: str | None = None,
        **params: Any,
    ) -> "ValidationError":
        """Build an error whose English message comes from the catalog."""
        message = (
            get_localized_message(code, "en", reason, field=field, **params) or code.value
        )
        return cls(message, code, field=field, reason=reason, **params)

    def localize(self, language: str) -> str:
        """Return the message for ``language``, caching it in ``messages``.

        Unknown languages, or codes the catalog has no entry for, fall back
        to the English message.
        """
        if language in self.messages:
            return self.messages[language]

        text = get_localized_message(
            self.code, language, self.reason, field=self.field, **self.params
        )
        if text is None:
            return self.message

        self.messages[language] = text
        return text

    def localize_all(self) -> dict[str, str]:
        """Populate ``messages`` for every supported language."""
        for language in SUPPORTED_LANGUAGES:
            self.localize(language)
        return dict(self.messages)

    @property
    def somali_message(self) -> str:
        return self.localize("so")

    @property
    def arabic_message(self) -> str:
        return self.localize("ar")

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the error as plain data (all languages included)."""
        snapshot: dict[str, Any] = {
            "message": self.message,
            "code": self.code.value,
            "field": self.field,
            "messages": self.localize_all(),
        }
        if self.language is not None:
            snapshot["language"] = self.language
            snapshot["localized_message"] = self.localized_message
        return snapshot


class RuleConfigurationError(SomalidError):
    """Exception raised when a Rule is configured with invalid parameters.

    Context typically includes:
        - parameter: Name of the invalid parameter
        - value: Invalid value provided
        - reason: Why the value is invalid

    Example:
        >>> raise RuleConfigurationError(
        ...     "id_length must be a positive integer",
        ...     parameter="id_length",
        ...     value=0,
        ...     reason="Non-positive length",
        ... )
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize rule configuration error.

        Args:
            message: Human-readable error description
            parameter: Name of the invalid parameter
            value: Invalid value provided
            reason: Why the value is invalid
            **extra_context: Additional context information
        """
        context: dict[str, Any] = {}
        if parameter is not None:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = value
        if reason is not None:
            context["reason"] = reason
        context.update(extra_context)

        super().__init__(message, context)
