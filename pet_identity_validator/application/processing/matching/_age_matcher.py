# pet_identity_validator/application/processing/matching/_age_matcher.py

"""Age matching against a date of birth"""

# Standard library imports
from datetime import date
from logging import getLogger
from math import isclose

# Local imports
from pet_identity_validator.core.domain.match_result import AgeMatchResult
from pet_identity_validator.shared.utils.age_utils import calculate_age_in_years
from pet_identity_validator.shared.utils.age_utils import parse_age_to_years

logger = getLogger(__name__)


class AgeMatcher:
    """Handles age comparison with a tolerance window"""

    @staticmethod
    def match_age(
        extracted_age: str | None,
        date_of_birth: date | None,
        tolerance_years: float = 1.0,
        relaxed: bool = False,
        relaxed_multiplier: float = 2.0,
        today: date | None = None,
    ) -> AgeMatchResult:
        """Check if an extracted age phrase agrees with the pet's date of birth

        The caller sets ``relaxed`` when other fields already identify the pet
        strongly; the tolerance is then multiplied by ``relaxed_multiplier``.

        Args:
            extracted_age: Age phrase read from the document
            date_of_birth: Pet's date of birth
            tolerance_years: Base tolerance in years
            relaxed: Whether to widen the tolerance
            relaxed_multiplier: Factor applied to the tolerance when relaxed
            today: Reference date, defaults to the current date

        Returns:
            Age result; unavailable when the phrase does not parse or the
            date of birth is unknown
        """
        effective_tolerance = tolerance_years * relaxed_multiplier if relaxed else tolerance_years

        expected_value = date_of_birth.isoformat() if date_of_birth is not None else None
        extracted_years = parse_age_to_years(extracted_age)
        actual_years = (
            calculate_age_in_years(date_of_birth, today) if date_of_birth is not None else None
        )

        if extracted_years is None or actual_years is None:
            logger.debug(
                f"Age match: extracted={extracted_age!r} dob={date_of_birth} "
                f"not comparable (parsed={extracted_years}, actual={actual_years})"
            )
            return AgeMatchResult(
                matches=False,
                extracted_value=extracted_age,
                expected_value=expected_value,
                extracted_years=extracted_years,
                actual_years=actual_years,
                tolerance_years=effective_tolerance,
            )

        difference = abs(extracted_years - actual_years)
        # Inclusive boundary; month fractions leave float residue around it
        matches = difference < effective_tolerance or isclose(difference, effective_tolerance)

        logger.debug(
            f"Age match: extracted={extracted_age!r} ({extracted_years:.1f} years) "
            f"dob={date_of_birth} ({actual_years:.1f} years) diff={difference:.1f} "
            f"tolerance={effective_tolerance} matches={matches}"
        )

        return AgeMatchResult(
            matches=matches,
            extracted_value=extracted_age,
            expected_value=expected_value,
            extracted_years=extracted_years,
            actual_years=actual_years,
            difference=difference,
            tolerance_years=effective_tolerance,
        )
