# pet_identity_validator/application/processing/matching/_fuzzy_matcher.py

"""Fuzzy name and breed matching with nickname/abbreviation detection"""

# Standard library imports
from logging import getLogger

# Local imports
from pet_identity_validator.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.shared.mixins.mixins import ConfigurableMixin
from pet_identity_validator.shared.utils.text_utils import normalize_for_comparison
from pet_identity_validator.shared.utils.text_utils import split_tokens

logger = getLogger(__name__)


def _ordered_by_length(first: str, second: str) -> tuple[str, str]:
    """Return (shorter, longer); ties keep the second value as the shorter one"""
    if len(first) < len(second):
        return first, second
    return second, first


def _is_contained(first: str, second: str) -> bool:
    """Whether either string contains the other"""
    return first in second or second in first


class FuzzyFieldMatcher(ConfigurableMixin):
    """Fuzzy comparison for free-text identity fields"""

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
        nicknames: dict[str, frozenset[str]] | None = None,
    ) -> None:
        """Initialize with configuration and an optional diminutive table

        Args:
            config: Configuration loader
            similarity_calculator: Similarity calculator
            nicknames: Canonical name -> diminutives, overrides the wordlists table
        """
        self.config = self._init_config(config)
        self.similarity_calculator = similarity_calculator or SimilarityCalculator(self.config)
        self.thresholds = self.config.thresholds
        self.nicknames = nicknames if nicknames is not None else self.config.nicknames

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------

    def is_known_diminutive(self, name1: str, name2: str) -> bool:
        """Whether the pair appears in the diminutive table (either direction)

        Args:
            name1: Normalized name
            name2: Normalized name

        Returns:
            True if one name is a listed diminutive of the other
        """
        return name2 in self.nicknames.get(name1, frozenset()) or name1 in self.nicknames.get(
            name2, frozenset()
        )

    def is_contained_nickname(self, name1: str, name2: str) -> bool:
        """Check if one name is a shortened form contained in the other

        "Max" inside "Maxine" qualifies only when the shorter name is long
        enough relative to the longer one.

        Args:
            name1: Normalized name
            name2: Normalized name

        Returns:
            True if contained and the length ratio reaches the configured minimum
        """
        if not name1 or not name2 or not _is_contained(name1, name2):
            return False
        shorter, longer = _ordered_by_length(name1, name2)
        return len(shorter) >= len(longer) * self.thresholds.nickname_length_ratio

    def is_breed_abbreviation(self, breed1: str, breed2: str) -> bool:
        """Check if one breed is an abbreviation or partial form of the other

        Accepts "Golden" for "Golden Retriever" and "Lab" for "Labrador".

        Args:
            breed1: Normalized breed
            breed2: Normalized breed

        Returns:
            True if one contains the other with enough length, or every token of
            the breed with fewer tokens matches a token of the other
        """
        if not breed1 or not breed2:
            return False

        if _is_contained(breed1, breed2):
            shorter, longer = _ordered_by_length(breed1, breed2)
            if len(shorter) >= len(longer) * self.thresholds.abbreviation_length_ratio:
                return True

        words1 = split_tokens(breed1)
        words2 = split_tokens(breed2)
        if not words1 or not words2:
            return False

        fewer, more = (words1, words2) if len(words1) < len(words2) else (words2, words1)
        return all(any(_is_contained(word, other) for other in more) for word in fewer)

    def _shares_breed_token(self, breed1: str, breed2: str) -> bool:
        """Whether any token of one breed overlaps a token of the other"""
        return any(
            _is_contained(word, other)
            for word in split_tokens(breed1)
            for other in split_tokens(breed2)
        )

    # ------------------------------------------------------------------
    # Field matchers
    # ------------------------------------------------------------------

    def match_name(self, extracted_name: str, expected_name: str) -> FieldMatchResult:
        """Fuzzy-match a pet name, accepting likely nicknames

        Below the similarity threshold the diminutive table is always consulted;
        the containment rule only applies from ``name_variation_floor`` upwards.

        Args:
            extracted_name: Name read from the document
            expected_name: Name on the pet record

        Returns:
            Field result with similarity and variation flags
        """
        threshold = self.thresholds.name_similarity
        floor = self.thresholds.name_variation_floor
        fold = self.similarity_calculator.fold_unicode

        similarity = self.similarity_calculator.calculate_similarity(extracted_name, expected_name)
        normalized_extracted = normalize_for_comparison(extracted_name, fold)
        normalized_expected = normalize_for_comparison(expected_name, fold)

        is_likely_variation = False
        is_near_variation = False
        if similarity < threshold:
            is_likely_variation = self.is_known_diminutive(
                normalized_extracted, normalized_expected
            ) or (
                similarity >= floor
                and self.is_contained_nickname(normalized_extracted, normalized_expected)
            )
            if not is_likely_variation:
                is_near_variation = similarity >= floor or (
                    bool(normalized_extracted)
                    and bool(normalized_expected)
                    and _is_contained(normalized_extracted, normalized_expected)
                )

        return self._build_result(
            MatchField.NAME,
            extracted_name,
            expected_name,
            similarity,
            threshold,
            is_likely_variation,
            is_near_variation,
        )

    def match_breed(self, extracted_breed: str, expected_breed: str) -> FieldMatchResult:
        """Fuzzy-match a breed, accepting likely abbreviations

        Args:
            extracted_breed: Breed read from the document
            expected_breed: Breed on the pet record

        Returns:
            Field result with similarity and variation flags
        """
        threshold = self.thresholds.breed_similarity
        floor = self.thresholds.breed_variation_floor
        fold = self.similarity_calculator.fold_unicode

        similarity = self.similarity_calculator.calculate_similarity(
            extracted_breed, expected_breed
        )
        normalized_extracted = normalize_for_comparison(extracted_breed, fold)
        normalized_expected = normalize_for_comparison(expected_breed, fold)

        is_likely_variation = False
        is_near_variation = False
        if similarity < threshold:
            if similarity >= floor:
                is_likely_variation = self.is_breed_abbreviation(
                    normalized_extracted, normalized_expected
                )
            if not is_likely_variation:
                is_near_variation = self._shares_breed_token(
                    normalized_extracted, normalized_expected
                )

        return self._build_result(
            MatchField.BREED,
            extracted_breed,
            expected_breed,
            similarity,
            threshold,
            is_likely_variation,
            is_near_variation,
        )

    def _build_result(
        self,
        field: MatchField,
        extracted: str,
        expected: str,
        similarity: float,
        threshold: float,
        is_likely_variation: bool,
        is_near_variation: bool,
    ) -> FieldMatchResult:
        """Log the comparison and wrap it in a field result"""
        # Accept if above threshold OR if it's a likely variation
        matches = similarity >= threshold or is_likely_variation

        logger.debug(
            f"Fuzzy {field.value} match: extracted={extracted!r} expected={expected!r} "
            f"similarity={similarity * 100:.1f}% threshold={threshold * 100:.0f}% "
            f"matches={matches} variation={is_likely_variation} near={is_near_variation}"
        )

        return FieldMatchResult(
            field=field,
            matches=matches,
            similarity=similarity,
            is_likely_variation=is_likely_variation,
            is_near_variation=is_near_variation,
            extracted_value=extracted,
            expected_value=expected,
        )
