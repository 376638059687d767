# pet_identity_validator/application/processing/validation_engine.py

"""Decision policy for validating a document against a registered pet

Microchip evidence is the sole arbiter when present. Without it, the available
attributes are matched and the document is accepted when enough of them agree
or when strong partial evidence makes the count irrelevant.
"""

# Standard library imports
from datetime import date
from logging import getLogger

# Local imports
from pet_identity_validator.application.processing.matching._age_matcher import AgeMatcher
from pet_identity_validator.application.processing.matching._confidence_aggregator import (
    ConfidenceAggregator,
)
from pet_identity_validator.application.processing.matching._fuzzy_matcher import (
    FuzzyFieldMatcher,
)
from pet_identity_validator.application.processing.matching._gender_matcher import GenderMatcher
from pet_identity_validator.application.processing.matching._microchip_matcher import (
    MicrochipMatcher,
)
from pet_identity_validator.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from pet_identity_validator.core.domain.attributes import ExtractedAttributes
from pet_identity_validator.core.domain.attributes import RegisteredPet
from pet_identity_validator.core.domain.enums import AcceptanceRule
from pet_identity_validator.core.domain.enums import SkipReason
from pet_identity_validator.core.domain.enums import ValidationMethod
from pet_identity_validator.core.domain.match_result import AgeMatchResult
from pet_identity_validator.core.domain.match_result import ConfidenceAssessment
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.core.domain.match_result import MatchDetails
from pet_identity_validator.core.domain.verdict import ValidationVerdict
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class PetValidator(ConfigurableMixin):
    """Validates extracted document attributes against a registered pet

    Holds only read-only configuration, so one instance can serve concurrent
    calls.
    """

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
        fuzzy_matcher: FuzzyFieldMatcher | None = None,
    ):
        """Initialize validator with components

        Args:
            config: Configuration loader
            similarity_calculator: Similarity calculator for name/breed
            fuzzy_matcher: Name/breed matcher, built from config if omitted
        """
        self.config = self._init_config(config)
        self.thresholds = self.config.thresholds

        self.microchip_matcher = MicrochipMatcher()
        self.fuzzy_matcher = fuzzy_matcher or FuzzyFieldMatcher(
            self.config, similarity_calculator=similarity_calculator
        )
        self.age_matcher = AgeMatcher()
        self.gender_matcher = GenderMatcher()
        self.confidence_aggregator = ConfidenceAggregator(self.config)

    def validate(
        self, extracted: ExtractedAttributes, pet: RegisteredPet, today: date | None = None
    ) -> ValidationVerdict:
        """Validate extracted attributes against a pet record

        Never raises for missing or malformed evidence; every outcome is a verdict.

        Args:
            extracted: Attributes read from the document
            pet: Pet the document is claimed to belong to
            today: Reference date for age checks, defaults to the current date

        Returns:
            Immutable validation verdict
        """
        logger.info(f"Validating document against pet {pet.name!r}")

        if not extracted.has_any_identifier():
            logger.info("No pet identification info found in document")
            return ValidationVerdict(
                is_valid=False,
                method=ValidationMethod.NONE,
                extracted=extracted,
                pet=pet,
                confidence=self.confidence_aggregator.calculate_confidence(MatchDetails()),
                skip_reason=SkipReason.NO_PET_INFO,
            )

        # PRIORITY 1: Microchip validation
        if extracted.microchip:
            return self._validate_microchip(extracted, pet)

        # PRIORITY 2: Attributes validation
        return self._validate_attributes(extracted, pet, today)

    def _validate_microchip(
        self, extracted: ExtractedAttributes, pet: RegisteredPet
    ) -> ValidationVerdict:
        """Decide on the microchip alone; no other field is consulted"""
        microchip_result = self.microchip_matcher.match_microchip(
            extracted.microchip, pet.microchip_number
        )
        match_details = MatchDetails(microchip=microchip_result)
        confidence = self.confidence_aggregator.calculate_confidence(match_details)

        if microchip_result.matches:
            logger.info(f"Microchip validated for pet {pet.name!r}")
        else:
            logger.info(
                f"Microchip mismatch for pet {pet.name!r}: document does not belong to this pet"
            )

        return ValidationVerdict(
            is_valid=microchip_result.matches,
            method=ValidationMethod.MICROCHIP,
            extracted=extracted,
            pet=pet,
            match_details=match_details,
            confidence=confidence,
            skip_reason=None if microchip_result.matches else SkipReason.MICROCHIP_MISMATCH,
            match_count=int(microchip_result.matches),
            available_attributes=1,
        )

    def _validate_attributes(
        self, extracted: ExtractedAttributes, pet: RegisteredPet, today: date | None
    ) -> ValidationVerdict:
        """Match every available attribute and apply the acceptance rules"""
        logger.debug("Attributes validation (no microchip found)")

        name_result = (
            self.fuzzy_matcher.match_name(extracted.name, pet.name) if extracted.name else None
        )
        breed_result = (
            self.fuzzy_matcher.match_breed(extracted.breed, pet.breed) if extracted.breed else None
        )

        has_strong_matches = self._is_strong(name_result) and self._is_strong(breed_result)

        age_result = (
            self.age_matcher.match_age(
                extracted.age,
                pet.date_of_birth,
                tolerance_years=self.thresholds.age_tolerance_years,
                relaxed=has_strong_matches,
                relaxed_multiplier=self.thresholds.relaxed_age_multiplier,
                today=today,
            )
            if extracted.age
            else None
        )
        gender_result = (
            self.gender_matcher.match_gender(extracted.gender, pet.sex)
            if extracted.gender
            else None
        )

        match_details = MatchDetails(
            name=name_result, breed=breed_result, age=age_result, gender=gender_result
        )
        available = list(match_details.available())
        match_count = sum(1 for result in available if result.matches)
        available_attributes = len(available)
        required_matches = available_attributes * self.thresholds.attribute_match_ratio

        logger.debug(
            f"Attribute matches: {match_count}/{available_attributes} found, "
            f"{required_matches:.1f} required"
        )

        confidence = self.confidence_aggregator.calculate_confidence(match_details)
        accepted_by = self._acceptance_rules(
            match_count,
            available_attributes,
            required_matches,
            confidence,
            has_strong_matches,
            name_result,
            age_result,
        )
        is_valid = bool(accepted_by)

        if is_valid:
            logger.info(
                f"Attributes validated for pet {pet.name!r} "
                f"({', '.join(rule.value for rule in accepted_by)}; "
                f"confidence {confidence.confidence:.1f}%)"
            )
        else:
            logger.info(
                f"Insufficient attribute matches for pet {pet.name!r}: "
                f"{match_count}/{available_attributes}, confidence {confidence.confidence:.1f}%"
            )

        return ValidationVerdict(
            is_valid=is_valid,
            method=ValidationMethod.ATTRIBUTES,
            extracted=extracted,
            pet=pet,
            match_details=match_details,
            confidence=confidence,
            skip_reason=None if is_valid else SkipReason.ATTRIBUTES_MISMATCH,
            match_count=match_count,
            available_attributes=available_attributes,
            required_matches=required_matches,
            has_strong_matches=has_strong_matches,
            accepted_by=accepted_by,
        )

    def _is_strong(self, result: FieldMatchResult | None) -> bool:
        """Whether a fuzzy result reaches the strong-match similarity"""
        return (
            result is not None
            and result.similarity is not None
            and result.similarity >= self.thresholds.strong_match
        )

    def _acceptance_rules(
        self,
        match_count: int,
        available_attributes: int,
        required_matches: float,
        confidence: ConfidenceAssessment,
        has_strong_matches: bool,
        name_result: FieldMatchResult | None,
        age_result: AgeMatchResult | None,
    ) -> tuple[AcceptanceRule, ...]:
        """Return every acceptance condition the evidence satisfies

        Any single condition accepts the document. A document whose only
        evidence failed to parse satisfies none of them.
        """
        if available_attributes == 0:
            return ()

        rules: list[AcceptanceRule] = []
        if match_count >= required_matches:
            rules.append(AcceptanceRule.MATCH_COUNT)
        if confidence.confidence >= self.thresholds.partial_match_min_confidence:
            rules.append(AcceptanceRule.PARTIAL_CONFIDENCE)
        if has_strong_matches:
            rules.append(AcceptanceRule.STRONG_NAME_AND_BREED)
        if (
            name_result is not None
            and name_result.matches
            and self._is_strong(name_result)
            and age_result is not None
            and age_result.is_available
            and age_result.matches
        ):
            rules.append(AcceptanceRule.STRONG_NAME_AND_AGE)
        return tuple(rules)
