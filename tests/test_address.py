"""
Tests for splynx_geo.core.utils.address.

Covers:
- title_case_words: per-word capitalization, None/empty handling
- compose_address: street/town joining rules
- canonicalize: install address, customer fallback, idempotence
"""

import pytest

from splynx_geo.core.utils.address import (
    CanonicalAddress,
    canonicalize,
    compose_address,
    title_case_words,
)


# ===========================================================================
# title_case_words
# ===========================================================================


class TestTitleCaseWords:
    def test_mixed_case(self) -> None:
        assert title_case_words("123 MAIN street") == "123 Main Street"

    def test_none_and_empty(self) -> None:
        assert title_case_words(None) == ""
        assert title_case_words("") == ""

    def test_only_first_letter_of_each_word(self) -> None:
        """Apostrophes and digits do not start a new word."""
        assert title_case_words("o'BRIEN road") == "O'brien Road"
        assert title_case_words("12A high ST") == "12a High St"

    def test_whitespace_preserved(self) -> None:
        assert title_case_words("west  coast\troad") == "West  Coast\tRoad"

    @pytest.mark.parametrize(
        "value",
        ["123 main street", "AUCKLAND", "mt. EDEN rd", "st john's lane", "Level 2/ 45 queen st"],
    )
    def test_idempotent(self, value: str) -> None:
        once = title_case_words(value)
        assert title_case_words(once) == once


# ===========================================================================
# compose_address
# ===========================================================================


def test_compose_address_rules() -> None:
    assert compose_address("12 Queen St", "Auckland") == "12 Queen St, Auckland"
    assert compose_address("12 Queen St", "") == "12 Queen St"
    assert compose_address("", "Auckland") == ""


# ===========================================================================
# canonicalize
# ===========================================================================


class TestCanonicalize:
    def test_uses_install_address(self) -> None:
        result = canonicalize("12 queen st", "AUCKLAND", "1 other rd", "wellington")
        assert result == CanonicalAddress(
            street="12 Queen St",
            town="Auckland",
            address="12 Queen St, Auckland",
            used_fallback=False,
        )

    def test_falls_back_to_customer_address(self) -> None:
        result = canonicalize(None, None, "123 main street", "auckland")
        assert result.used_fallback is True
        assert result.street == "123 Main Street"
        assert result.town == "Auckland"
        assert result.address == "123 Main Street, Auckland"

    def test_empty_install_street_ignores_install_town(self) -> None:
        """The customer's city replaces the install town along with the street."""
        result = canonicalize("", "Hamilton", "5 river rd", "tauranga")
        assert result.used_fallback is True
        assert result.town == "Tauranga"

    def test_no_town_gives_street_only(self) -> None:
        result = canonicalize("7 beach rd", None, None, None)
        assert result.address == "7 Beach Rd"
        assert result.town == ""

    def test_no_street_anywhere(self) -> None:
        result = canonicalize(None, "nelson", None, "nelson")
        assert result.used_fallback is True
        assert result.street == ""
        assert result.address == ""

    @pytest.mark.parametrize(
        "street,town",
        [("123 MAIN street", "auckland"), ("flat 2, 9 ridge RD", "new PLYMOUTH"), ("1 a st", "")],
    )
    def test_canonicalizing_output_again_is_stable(self, street: str, town: str) -> None:
        first = canonicalize(street, town, None, None)
        second = canonicalize(first.street, first.town, None, None)
        assert second == first
