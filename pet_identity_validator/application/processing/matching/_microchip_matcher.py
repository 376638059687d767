# pet_identity_validator/application/processing/matching/_microchip_matcher.py

"""Microchip-based matching"""

# Standard library imports
from logging import getLogger

# Local imports
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.shared.utils.text_utils import strip_whitespace

logger = getLogger(__name__)


class MicrochipMatcher:
    """Handles exact microchip comparison"""

    @staticmethod
    def match_microchip(
        extracted_microchip: str | None, expected_microchip: str | None
    ) -> FieldMatchResult:
        """Check if microchip numbers match (exact match, ignoring whitespace)

        A chip is either identical or it is not; there is no fuzzy tolerance.

        Args:
            extracted_microchip: Chip number read from the document
            expected_microchip: Chip number on the pet record

        Returns:
            Field result; never a match when either side is absent
        """
        extracted_digits = strip_whitespace(extracted_microchip or "")
        expected_digits = strip_whitespace(expected_microchip or "")
        matches = bool(extracted_digits) and extracted_digits == expected_digits

        logger.debug(
            f"Microchip match: extracted={extracted_microchip!r} "
            f"expected={expected_microchip!r} matches={matches}"
        )

        return FieldMatchResult(
            field=MatchField.MICROCHIP,
            matches=matches,
            extracted_value=extracted_microchip,
            expected_value=expected_microchip,
        )
