"""Tests for identifier format checks."""

import pytest

from letscrate.core.domain.identifiers import are_identifiers, is_identifier


class TestIsIdentifier:
    @pytest.mark.parametrize("value", ["00000", "12345", "00042", "99999"])
    def test_five_digits(self, value: str) -> None:
        assert is_identifier(value)

    @pytest.mark.parametrize(
        "value",
        ["", "1234", "123456", "1234a", "12 45", " 12345", "12345\n", "abcde", "-1234", "١٢٣٤٥"],
    )
    def test_rejects_other_strings(self, value: str) -> None:
        assert not is_identifier(value)

    def test_rejects_non_strings(self) -> None:
        assert not is_identifier(12345)
        assert not is_identifier(None)


class TestAreIdentifiers:
    def test_all_valid(self) -> None:
        assert are_identifiers(["00010", "00020"])

    def test_one_invalid(self) -> None:
        assert not are_identifiers(["00010", "Photos"])

    def test_empty_is_vacuously_true(self) -> None:
        assert are_identifiers([])
