# tests/unit/application/processing/matching/test_microchip_matcher.py

"""Tests for exact microchip matching"""

# Local imports
from pet_identity_validator.application.processing.matching import MicrochipMatcher
from pet_identity_validator.core.domain import MatchField


class TestMicrochipMatcher:
    """Test MicrochipMatcher.match_microchip"""

    def test_whitespace_is_ignored(self):
        result = MicrochipMatcher.match_microchip("123456789012345", "123 456 789\t012 345")

        assert result.field is MatchField.MICROCHIP
        assert result.matches is True

    def test_different_numbers(self):
        assert MicrochipMatcher.match_microchip("999", "111").matches is False

    def test_no_fuzzy_tolerance(self):
        """One digit off is a different chip"""
        assert MicrochipMatcher.match_microchip("123456789012346", "123456789012345").matches is False

    def test_missing_record_chip(self):
        result = MicrochipMatcher.match_microchip("123456789012345", None)

        assert result.matches is False
        assert result.expected_value is None

    def test_whitespace_only_chips_never_match(self):
        assert MicrochipMatcher.match_microchip(" ", "\t").matches is False
        assert MicrochipMatcher.match_microchip("   ", "123456789012345").matches is False
