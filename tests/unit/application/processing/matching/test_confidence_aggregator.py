# tests/unit/application/processing/matching/test_confidence_aggregator.py

"""Tests for weighted confidence aggregation"""

# Third party imports
import pytest

# Local imports
from pet_identity_validator.application.processing.matching import ConfidenceAggregator
from pet_identity_validator.core.domain import AgeMatchResult
from pet_identity_validator.core.domain import ConfidenceBand
from pet_identity_validator.core.domain import FieldMatchResult
from pet_identity_validator.core.domain import MatchDetails
from pet_identity_validator.core.domain import MatchField


def _result(field: MatchField, matches: bool, similarity: float | None = None) -> FieldMatchResult:
    return FieldMatchResult(
        field=field, matches=matches, similarity=similarity, extracted_value="x", expected_value="y"
    )


class TestConfidenceAggregator:
    """Test ConfidenceAggregator"""

    @pytest.fixture(autouse=True)
    def _aggregator(self, default_config):
        """Build the aggregator from default configuration"""
        self.aggregator = ConfidenceAggregator(default_config)

    def test_no_evidence(self):
        assessment = self.aggregator.calculate_confidence(MatchDetails())

        assert assessment.confidence == 0.0
        assert assessment.band is ConfidenceBand.VERY_LOW
        assert assessment.field_breakdown == ()

    def test_microchip_match(self):
        details = MatchDetails(microchip=_result(MatchField.MICROCHIP, True))

        assessment = self.aggregator.calculate_confidence(details)

        assert assessment.confidence == 100.0
        assert assessment.band is ConfidenceBand.HIGH

    def test_normalizes_over_available_weight(self):
        """Name at 50% plus a gender match: (40*0.5 + 10) / 50"""
        details = MatchDetails(
            name=_result(MatchField.NAME, False, 0.5), gender=_result(MatchField.GENDER, True)
        )

        assessment = self.aggregator.calculate_confidence(details)

        assert assessment.confidence == pytest.approx(60.0)
        assert assessment.band is ConfidenceBand.LOW
        assert assessment.breakdown() == {"name": 50.0, "gender": 100.0}

    def test_variation_earns_raw_similarity(self):
        details = MatchDetails(name=_result(MatchField.NAME, True, 0.4))

        assert self.aggregator.calculate_confidence(details).confidence == pytest.approx(40.0)

    def test_unavailable_age_excluded(self):
        details = MatchDetails(
            breed=_result(MatchField.BREED, True, 1.0),
            age=AgeMatchResult(matches=False, extracted_value="senior", actual_years=3.0),
        )

        assessment = self.aggregator.calculate_confidence(details)

        assert assessment.confidence == 100.0
        assert "age" not in assessment.breakdown()

    @pytest.mark.parametrize(
        ("confidence", "band"),
        [
            (100.0, ConfidenceBand.HIGH),
            (90.0, ConfidenceBand.HIGH),
            (89.9, ConfidenceBand.MEDIUM),
            (70.0, ConfidenceBand.MEDIUM),
            (69.9, ConfidenceBand.LOW),
            (50.0, ConfidenceBand.LOW),
            (49.9, ConfidenceBand.VERY_LOW),
            (0.0, ConfidenceBand.VERY_LOW),
        ],
    )
    def test_band_boundaries(self, confidence, band):
        assert self.aggregator.band_for(confidence) is band

    def test_field_score(self):
        assert ConfidenceAggregator.field_score(_result(MatchField.GENDER, True)) == 1.0
        assert ConfidenceAggregator.field_score(_result(MatchField.GENDER, False)) == 0.0
        assert ConfidenceAggregator.field_score(_result(MatchField.NAME, False, 0.25)) == 0.25
