# ABOUTME: Tests for the value coercion helpers used by the payload transformers.
# ABOUTME: Covers text trimming, list wrapping, network distance, languages, flags and job offers.

import pytest

from linkedin_search.search.values import (
    as_string_list,
    clean_text,
    coerce_job_offers,
    coerce_network_distance,
    filter_profile_languages,
    is_flag_set,
    is_non_empty_list,
)


class TestCleanText:
    """Tests for clean_text."""

    def test_trims_whitespace(self) -> None:
        """Test that surrounding whitespace is removed."""
        assert clean_text("  engineer ") == "engineer"

    @pytest.mark.parametrize("value", ["", "   ", None, 42, ["engineer"]])
    def test_blank_or_non_string_is_none(self, value: object) -> None:
        """Test that blank strings and non-strings yield None."""
        assert clean_text(value) is None


class TestAsStringList:
    """Tests for string-or-list normalization."""

    def test_bare_string_is_wrapped(self) -> None:
        """Test that a single string becomes a one-element list."""
        assert as_string_list("Paris") == ["Paris"]

    def test_list_is_kept(self) -> None:
        """Test that a list of strings is returned as is."""
        assert as_string_list(["Paris", "Lyon"]) == ["Paris", "Lyon"]

    def test_non_string_members_are_dropped(self) -> None:
        """Test that only string members survive."""
        assert as_string_list(["Paris", 3, None]) == ["Paris"]

    @pytest.mark.parametrize("value", [None, "", "  ", [], [1, 2], {"include": ["x"]}])
    def test_nothing_to_send_is_none(self, value: object) -> None:
        """Test that empty or unusable values yield None."""
        assert as_string_list(value) is None


class TestIsNonEmptyList:
    """Tests for is_non_empty_list."""

    def test_values(self) -> None:
        """Test lists, tuples and other values."""
        assert is_non_empty_list(["a"]) is True
        assert is_non_empty_list(("a",)) is True
        assert is_non_empty_list([]) is False
        assert is_non_empty_list("a") is False
        assert is_non_empty_list(None) is False


class TestCoerceNetworkDistance:
    """Tests for network distance code mapping."""

    def test_codes_are_mapped(self) -> None:
        """Test that numeric codes become ints and GROUP is kept."""
        assert coerce_network_distance(["1", "2", "3", "GROUP"]) == [1, 2, 3, "GROUP"]

    def test_unknown_codes_are_dropped(self) -> None:
        """Test that unrecognized codes are silently removed."""
        assert coerce_network_distance(["1", "2", "BOGUS"]) == [1, 2]

    def test_only_unknown_codes_is_none(self) -> None:
        """Test that nothing is sent when no code survives."""
        assert coerce_network_distance(["BOGUS"]) is None

    def test_int_codes_are_accepted(self) -> None:
        """Test that already-numeric codes are kept."""
        assert coerce_network_distance([1, 3]) == [1, 3]

    def test_booleans_are_not_codes(self) -> None:
        """Test that True is not mistaken for 1."""
        assert coerce_network_distance([True, "2"]) == [2]

    @pytest.mark.parametrize("value", [None, [], "1"])
    def test_missing_or_malformed_is_none(self, value: object) -> None:
        """Test that a missing or non-list value yields None."""
        assert coerce_network_distance(value) is None


class TestFilterProfileLanguages:
    """Tests for language code filtering."""

    def test_two_character_codes_are_kept(self) -> None:
        """Test that only two-character codes survive."""
        assert filter_profile_languages(["en", "fra", "de", ""]) == ["en", "de"]

    def test_case_is_not_normalized(self) -> None:
        """Test that codes are passed through without case changes."""
        assert filter_profile_languages(["EN"]) == ["EN"]

    def test_no_valid_code_is_none(self) -> None:
        """Test that nothing is sent when no code is valid."""
        assert filter_profile_languages(["english"]) is None


class TestFlagsAndJobOffers:
    """Tests for boolean flag handling."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), ("true", True), (False, False), ("false", False), (None, False), (1, False)],
    )
    def test_is_flag_set(self, value: object, expected: bool) -> None:
        """Test that only an explicit true sets a flag."""
        assert is_flag_set(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), ("true", True), (False, False), ("false", False), (None, None)],
    )
    def test_recognized_job_offer_values(self, value: object, expected: bool | None) -> None:
        """Test the recognized has_job_offers values."""
        assert coerce_job_offers(value) is expected
        assert coerce_job_offers(value, lenient=True) is expected

    def test_unrecognized_value_strict(self) -> None:
        """Test that strict coercion drops an unrecognized value."""
        assert coerce_job_offers("yes") is None

    def test_unrecognized_value_lenient(self) -> None:
        """Test that lenient coercion sends False for an unrecognized value."""
        assert coerce_job_offers("yes", lenient=True) is False
