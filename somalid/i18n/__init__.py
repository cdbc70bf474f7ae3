"""Localized message catalogs for somalid validation errors."""

from somalid.i18n.catalog import (
    DEFAULT_LANGUAGE,
    DETAIL_MESSAGES,
    MESSAGES,
    SUPPORTED_LANGUAGES,
    get_localized_message,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DETAIL_MESSAGES",
    "MESSAGES",
    "SUPPORTED_LANGUAGES",
    "get_localized_message",
]
