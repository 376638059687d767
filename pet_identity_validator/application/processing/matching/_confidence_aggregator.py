# pet_identity_validator/application/processing/matching/_confidence_aggregator.py

"""Weighted confidence scoring over the fields that carried evidence"""

# Standard library imports
from logging import getLogger

# Local imports
from pet_identity_validator.core.domain.enums import ConfidenceBand
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.match_result import ConfidenceAssessment
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.core.domain.match_result import MatchDetails
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class ConfidenceAggregator(ConfigurableMixin):
    """Combines field results into a 0-100 confidence and a qualitative band"""

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize with configuration

        Args:
            config: Configuration loader
        """
        self.config = self._init_config(config)
        weights = self.config.weights
        self.field_weights: dict[MatchField, float] = {
            MatchField.MICROCHIP: weights.microchip,
            MatchField.NAME: weights.name,
            MatchField.BREED: weights.breed,
            MatchField.AGE: weights.age,
            MatchField.GENDER: weights.gender,
        }
        self.bands = self.config.bands

    @staticmethod
    def field_score(result: FieldMatchResult) -> float:
        """Credit earned by one field, from 0 to 1

        Fuzzy fields earn their raw similarity even when a nickname or
        abbreviation made them match; exact fields earn all or nothing.
        """
        if result.similarity is not None:
            return result.similarity
        return 1.0 if result.matches else 0.0

    def calculate_confidence(self, match_details: MatchDetails) -> ConfidenceAssessment:
        """Calculate weighted confidence score based on field matches

        Only fields with evidence enter the denominator, so a document that
        mentions two fields is judged on those two alone.

        Args:
            match_details: Field results computed for one validation call

        Returns:
            Confidence percentage, band and per-field breakdown
        """
        total_score = 0.0
        max_possible_score = 0.0
        field_breakdown: dict[str, float] = {}

        for result in match_details.available():
            weight = self.field_weights[result.field]
            score = self.field_score(result)
            max_possible_score += weight
            total_score += weight * score
            field_breakdown[result.field.value] = score * 100

        confidence = (total_score / max_possible_score) * 100 if max_possible_score > 0 else 0.0
        # Guard against float drift past the bounds
        confidence = min(max(confidence, 0.0), 100.0)
        band = self.band_for(confidence)

        logger.debug(
            f"Weighted confidence: {confidence:.1f}% ({band.value}) "
            f"over {max_possible_score:.0f} available weight, breakdown={field_breakdown}"
        )

        return ConfidenceAssessment(
            confidence=confidence, band=band, field_breakdown=tuple(field_breakdown.items())
        )

    def band_for(self, confidence: float) -> ConfidenceBand:
        """Map a confidence percentage to its qualitative band"""
        if confidence >= self.bands.high:
            return ConfidenceBand.HIGH
        elif confidence >= self.bands.medium:
            return ConfidenceBand.MEDIUM
        elif confidence >= self.bands.low:
            return ConfidenceBand.LOW
        return ConfidenceBand.VERY_LOW
