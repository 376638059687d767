# tests/unit/application/processing/matching/test_age_matcher.py

"""Tests for age matching against a date of birth"""

# Standard library imports
from datetime import date

# Third party imports
import pytest

# Local imports
from pet_identity_validator.application.processing.matching import AgeMatcher
from pet_identity_validator.core.domain import MatchField

TODAY = date(2026, 10, 19)
THREE_YEARS_AGO = date(2023, 10, 19)


class TestAgeMatcher:
    """Test AgeMatcher.match_age"""

    def test_exact_age(self):
        result = AgeMatcher.match_age("3 years", THREE_YEARS_AGO, today=TODAY)

        assert result.field is MatchField.AGE
        assert result.matches is True
        assert result.extracted_years == 3.0
        assert result.actual_years == 3.0
        assert result.difference == 0.0
        assert result.expected_value == "2023-10-19"

    def test_within_tolerance(self):
        result = AgeMatcher.match_age("2 years 6 months", THREE_YEARS_AGO, today=TODAY)

        assert result.matches is True
        assert result.difference == pytest.approx(0.5)

    @pytest.mark.parametrize(
        ("phrase", "date_of_birth"),
        [
            ("1 year 1 month", date(2024, 9, 19)),
            ("1 year 4 months", date(2024, 6, 19)),
            ("3 years 2 months", date(2022, 8, 19)),
        ],
    )
    def test_difference_equal_to_tolerance_matches(self, phrase, date_of_birth):
        result = AgeMatcher.match_age(phrase, date_of_birth, today=TODAY)

        assert result.difference == pytest.approx(1.0)
        assert result.matches is True

    @pytest.mark.parametrize(
        ("phrase", "date_of_birth"),
        [
            ("2 years 2 months", date(2022, 8, 19)),
            ("2 years 5 months", date(2022, 5, 19)),
        ],
    )
    def test_difference_equal_to_relaxed_tolerance_matches(self, phrase, date_of_birth):
        result = AgeMatcher.match_age(phrase, date_of_birth, relaxed=True, today=TODAY)

        assert result.difference == pytest.approx(2.0)
        assert result.matches is True

    def test_just_past_tolerance(self):
        result = AgeMatcher.match_age("1 year 11 months", THREE_YEARS_AGO, today=TODAY)

        assert result.difference == pytest.approx(13 / 12)
        assert result.matches is False

    def test_outside_tolerance(self):
        result = AgeMatcher.match_age("6 years", THREE_YEARS_AGO, today=TODAY)

        assert result.matches is False
        assert result.difference == pytest.approx(3.0)
        assert result.is_available is True

    def test_relaxed_tolerance(self):
        strict = AgeMatcher.match_age("5 years", THREE_YEARS_AGO, today=TODAY)
        relaxed = AgeMatcher.match_age("5 years", THREE_YEARS_AGO, relaxed=True, today=TODAY)

        assert strict.matches is False
        assert relaxed.matches is True
        assert relaxed.tolerance_years == 2.0

    def test_custom_multiplier(self):
        result = AgeMatcher.match_age(
            "6 years", THREE_YEARS_AGO, relaxed=True, relaxed_multiplier=3.0, today=TODAY
        )

        assert result.tolerance_years == 3.0
        assert result.matches is True

    def test_unparseable_phrase_is_unavailable(self):
        result = AgeMatcher.match_age("senior", THREE_YEARS_AGO, today=TODAY)

        assert result.matches is False
        assert result.is_available is False
        assert result.extracted_years is None
        assert result.actual_years == 3.0

    def test_missing_date_of_birth_is_unavailable(self):
        result = AgeMatcher.match_age("3 years", None, today=TODAY)

        assert result.is_available is False
        assert result.expected_value is None
        assert result.difference is None
