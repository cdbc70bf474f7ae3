"""Tests for the pluggable ID checksum gate."""

import pytest

from somalid.checksum import (
    CHECKSUM_ALGORITHMS,
    enable_checksum,
    get_checksum,
    luhn_check,
    register_checksum,
)


class TestLuhn:
    @pytest.mark.parametrize("digits", ["79927398713", "4539578763621486", "0"])
    def test_valid(self, digits: str) -> None:
        assert luhn_check(digits)

    @pytest.mark.parametrize("digits", ["79927398710", "4539578763621487"])
    def test_invalid(self, digits: str) -> None:
        assert not luhn_check(digits)

    @pytest.mark.parametrize("digits", ["", "12a4", "١٢٣"])
    def test_non_digits(self, digits: str) -> None:
        assert not luhn_check(digits)


class TestRegistry:
    def test_get_known(self) -> None:
        assert get_checksum("luhn") is luhn_check

    def test_get_unknown_lists_available(self) -> None:
        with pytest.raises(KeyError, match="Available: .*luhn"):
            get_checksum("crc32")

    def test_register(self) -> None:
        register_checksum("even", lambda digits: int(digits[-1]) % 2 == 0)
        try:
            assert get_checksum("even")("1234")
            assert not get_checksum("even")("1235")
        finally:
            del CHECKSUM_ALGORITHMS["even"]


class TestGate:
    def test_disabled_by_default(self) -> None:
        gate = enable_checksum()
        assert gate("79927398710")

    def test_enabled(self) -> None:
        gate = enable_checksum(enabled=True)
        assert gate("79927398713")
        assert not gate("79927398710")

    def test_unknown_algorithm_passes(self) -> None:
        gate = enable_checksum(enabled=True, algorithm="nope")
        assert gate("79927398710")
