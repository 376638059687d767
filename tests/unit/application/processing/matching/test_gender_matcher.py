# tests/unit/application/processing/matching/test_gender_matcher.py

"""Tests for sex/gender normalization and matching"""

# Third party imports
import pytest

# Local imports
from pet_identity_validator.application.processing.matching import GenderMatcher
from pet_identity_validator.application.processing.matching import normalize_gender


class TestNormalizeGender:
    """Test normalize_gender"""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("M", "male"),
            ("male", "male"),
            ("Neutered Male", "male"),
            ("MN", "male"),
            ("Neutered", "male"),
            ("castrated", "male"),
            ("F", "female"),
            ("FEMALE", "female"),
            ("Spayed Female", "female"),
            ("FS", "female"),
            ("Spayed", "female"),
            ("Female (spayed)", "female"),
        ],
    )
    def test_resolves(self, raw, expected):
        assert normalize_gender(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "unknown", "Male/Female", "M or F", "?"])
    def test_unresolvable(self, raw):
        assert normalize_gender(raw) is None

    def test_female_is_not_read_as_male(self):
        """'female' contains 'male' as a substring"""
        assert normalize_gender("female") == "female"


class TestGenderMatcher:
    """Test GenderMatcher.match_gender"""

    def test_code_matches_word(self):
        result = GenderMatcher.match_gender("F", "Female")

        assert result.matches is True
        assert result.similarity is None

    def test_female_vs_male(self):
        assert GenderMatcher.match_gender("Female", "Male").matches is False

    def test_unresolvable_never_matches(self):
        result = GenderMatcher.match_gender("unknown", "unknown")

        assert result.matches is False
        assert result.extracted_value == "unknown"
