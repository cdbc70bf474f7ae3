"""Tests for multilingual error reporting."""

import pytest

from somalid.core.exceptions import ErrorCode, ValidationError
from somalid.i18n.catalog import MESSAGES, SUPPORTED_LANGUAGES, get_localized_message
from somalid.validation.record import validate_record_multilingual

from tests.conftest import NOW


def _failure(record: dict[str, str], language: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        validate_record_multilingual(record, language=language, now=NOW)
    return exc_info.value


class TestValidateRecordMultilingual:
    def test_success_returns_record(self, valid_record: dict[str, str]) -> None:
        assert validate_record_multilingual(valid_record, language="so", now=NOW).sex == "Male"

    @pytest.mark.parametrize("language", list(SUPPORTED_LANGUAGES))
    def test_localized_message(self, valid_record: dict[str, str], language: str) -> None:
        valid_record["sex"] = "unknown"
        error = _failure(valid_record, language)
        assert error.code is ErrorCode.INVALID_SEX
        assert error.language == language
        assert error.localized_message == error.messages[language]
        assert set(error.messages) == set(SUPPORTED_LANGUAGES)

    def test_arabic_sex_message(self, valid_record: dict[str, str]) -> None:
        valid_record["sex"] = "x"
        assert "الجنس" in _failure(valid_record, "ar").localized_message

    def test_arabic_id_message(self, valid_record: dict[str, str]) -> None:
        valid_record["id_number"] = "12"
        assert "رقم الهوية" in _failure(valid_record, "ar").localized_message

    def test_somali_detail_message(self, valid_record: dict[str, str]) -> None:
        valid_record["id_number"] = "12"
        error = _failure(valid_record, "so")
        assert error.localized_message == "Lambarka aqoonsiga waa inuu noqdaa 12 tiro oo keliya"

    def test_unknown_language_falls_back_to_english(self, valid_record: dict[str, str]) -> None:
        valid_record["name"] = ""
        error = _failure(valid_record, "fr")
        assert error.language == "en"
        assert error.localized_message == error.message

    def test_english_message_unchanged(self, valid_record: dict[str, str]) -> None:
        valid_record["dob"] = "bad"
        error = _failure(valid_record, "ar")
        assert error.message == error.messages["en"]
        assert "Date of Birth" in error.message


class TestCatalog:
    def test_every_code_in_every_language(self) -> None:
        for language in SUPPORTED_LANGUAGES:
            assert set(MESSAGES[language]) == {code.value for code in ErrorCode}

    def test_unknown_language(self) -> None:
        assert get_localized_message(ErrorCode.INVALID_SEX, "fr") is None

    def test_detail_wins_over_generic(self) -> None:
        assert get_localized_message("INVALID_ID_NUMBER", "en", "id_prefix", prefix="93") == (
            "ID number must start with 93"
        )

    def test_missing_template_param_falls_back(self) -> None:
        assert get_localized_message("INVALID_ID_NUMBER", "en", "id_length") == (
            MESSAGES["en"]["INVALID_ID_NUMBER"]
        )

    def test_unknown_reason_falls_back(self) -> None:
        assert get_localized_message("INVALID_SEX", "so", "nope") == MESSAGES["so"]["INVALID_SEX"]
