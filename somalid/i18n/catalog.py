"""Static message catalogs for validation errors.

The catalogs are pure lookup tables: a generic message per error code and
language, plus parameterized detail templates keyed by a reason string. They
carry no validation behaviour of their own.

Languages:
    - en: English (the canonical message language)
    - so: Somali (Af-Soomaali)
    - ar: Arabic
"""

from typing import Any

SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "so": "Somali",
    "ar": "Arabic",
}

DEFAULT_LANGUAGE = "en"

# Generic message per error code
MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "INVALID_ID_NUMBER": "ID number must be numeric",
        "INVALID_NAME": "Name contains invalid characters or is too long",
        "INVALID_SEX": "Sex must be Male/Female",
        "INVALID_DATE": "Date must be in one of the formats dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd, dd.mm.yyyy",
        "INCONSISTENT_DATES": "Dates are inconsistent",
        "INVALID_INPUT": "Input must be a record with the required fields",
        "MISSING_FIELD": "A required field is missing",
    },
    "so": {
        "INVALID_ID_NUMBER": "Lambarka aqoonsiga waa inuu noqdaa tiro sax ah",
        "INVALID_NAME": "Magaca wuxuu leeyahay xarfo aan la aqbali karin ama wuu dheer yahay",
        "INVALID_SEX": "Jinsiga waa inuu noqdaa Lab ama Dhedig",
        "INVALID_DATE": "Taariikhda waa inay noqoto qaabka dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd ama dd.mm.yyyy",
        "INCONSISTENT_DATES": "Taariikhyada ma wada waafaqsana",
        "INVALID_INPUT": "Xogta la geliyay ma ahan diiwaan sax ah",
        "MISSING_FIELD": "Goob loo baahan yahay ayaa maqan",
    },
    "ar": {
        "INVALID_ID_NUMBER": "رقم الهوية يجب أن يكون رقماً صحيحاً",
        "INVALID_NAME": "الاسم يحتوي على أحرف غير صالحة أو أنه طويل جداً",
        "INVALID_SEX": "الجنس يجب أن يكون ذكر أو أنثى",
        "INVALID_DATE": "التاريخ يجب أن يكون بإحدى الصيغ dd-mm-yyyy أو dd/mm/yyyy أو yyyy-mm-dd أو dd.mm.yyyy",
        "INCONSISTENT_DATES": "التواريخ غير متسقة",
        "INVALID_INPUT": "المدخلات يجب أن تكون سجلاً يحتوي على الحقول المطلوبة",
        "MISSING_FIELD": "حقل مطلوب مفقود",
    },
}

# Detail templates keyed by reason; placeholders use str.format syntax
DETAIL_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "id_length": "ID number must be exactly {length} digits",
        "id_prefix": "ID number must start with {prefix}",
        "id_checksum": "ID number failed the {algorithm} checksum",
        "dob_format": "Date of Birth must be a valid date (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd or dd.mm.yyyy)",
        "issue_format": "Date of Issue must be a valid date (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd or dd.mm.yyyy)",
        "expiry_format": "Date of Expiry must be a valid date (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd or dd.mm.yyyy)",
        "issue_before_dob": "Issue date must be after date of birth",
        "expiry_before_issue": "Expiry date must be after issue date",
        "expiry_not_future": "Expiry date must be in the future",
        "missing_field": "Required field is missing: {field}",
    },
    "so": {
        "id_length": "Lambarka aqoonsiga waa inuu noqdaa {length} tiro oo keliya",
        "id_prefix": "Lambarka aqoonsiga waa inuu ku bilaabmo {prefix}",
        "id_checksum": "Lambarka aqoonsiga ma gudbin hubinta {algorithm}",
        "dob_format": "Taariikhda dhalashada waa inay noqoto taariikh sax ah (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd ama dd.mm.yyyy)",
        "issue_format": "Taariikhda bixinta waa inay noqoto taariikh sax ah (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd ama dd.mm.yyyy)",
        "expiry_format": "Taariikhda dhicitaanka waa inay noqoto taariikh sax ah (dd-mm-yyyy, dd/mm/yyyy, yyyy-mm-dd ama dd.mm.yyyy)",
        "issue_before_dob": "Taariikhda bixinta waa inay ka dambayso taariikhda dhalashada",
        "expiry_before_issue": "Taariikhda dhicitaanka waa inay ka dambayso taariikhda bixinta",
        "expiry_not_future": "Taariikhda dhicitaanka waa inay mustaqbalka ku tahay",
        "missing_field": "Goobta loo baahan yahay waa maqan tahay: {field}",
    },
    "ar": {
        "id_length": "رقم الهوية يجب أن يتكون من {length} رقماً بالضبط",
        "id_prefix": "رقم الهوية يجب أن يبدأ بـ {prefix}",
        "id_checksum": "رقم الهوية لم يجتز التحقق {algorithm}",
        "dob_format": "تاريخ الميلاد يجب أن يكون تاريخاً صالحاً (dd-mm-yyyy أو dd/mm/yyyy أو yyyy-mm-dd أو dd.mm.yyyy)",
        "issue_format": "تاريخ الإصدار يجب أن يكون تاريخاً صالحاً (dd-mm-yyyy أو dd/mm/yyyy أو yyyy-mm-dd أو dd.mm.yyyy)",
        "expiry_format": "تاريخ الانتهاء يجب أن يكون تاريخاً صالحاً (dd-mm-yyyy أو dd/mm/yyyy أو yyyy-mm-dd أو dd.mm.yyyy)",
        "issue_before_dob": "تاريخ الإصدار يجب أن يكون بعد تاريخ الميلاد",
        "expiry_before_issue": "تاريخ الانتهاء يجب أن يكون بعد تاريخ الإصدار",
        "expiry_not_future": "تاريخ الانتهاء يجب أن يكون في المستقبل",
        "missing_field": "الحقل المطلوب مفقود: {field}",
    },
}


def get_localized_message(
    code: Any,
    language: str,
    reason: str | None = None,
    **params: Any,
) -> str | None:
    """Look up the message for an error code in the given language.

    The detail template for ``reason`` wins over the generic code message.
    Templates whose parameters are not all supplied fall back to the generic
    message.

    Args:
        code: Error code (an ErrorCode member or its string value)
        language: Language code (en, so, ar)
        reason: Optional detail template key
        **params: Template parameters

    Returns:
        The localized message, or None if the language or code is unknown.

    Example:
        >>> get_localized_message("INVALID_SEX", "so")
        'Jinsiga waa inuu noqdaa Lab ama Dhedig'
        >>> get_localized_message("INVALID_ID_NUMBER", "en", "id_length", length=12)
        'ID number must be exactly 12 digits'
    """
    key = getattr(code, "value", code)

    if reason is not None:
        template = DETAIL_MESSAGES.get(language, {}).get(reason)
        if template is not None:
            try:
                return template.format(**params)
            except KeyError:
                pass

    return MESSAGES.get(language, {}).get(key)
