# pet_identity_validator/application/processing/matching/_gender_matcher.py

"""Sex/gender normalization and matching"""

# Standard library imports
from logging import getLogger
from re import findall

# Local imports
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.match_result import FieldMatchResult

logger = getLogger(__name__)

MALE = "male"
FEMALE = "female"

# Single-token codes used on vet records (MN = male neutered, FS = female spayed, ...)
_MALE_CODES = frozenset({"m", "mn", "mc", "mi"})
_FEMALE_CODES = frozenset({"f", "fs", "fi"})

# Procedure words imply a sex only when no explicit sex token is present
_MALE_PROCEDURE_PREFIXES = ("neuter", "castrat")
_FEMALE_PROCEDURE_PREFIXES = ("spay",)


def normalize_gender(gender: str | None) -> str | None:
    """Normalize a free-text sex marker to "male" or "female"

    Examples: "M", "Neutered Male", "FS", "Spayed" all resolve. Text that names
    both sexes, or neither, is unresolvable.

    Args:
        gender: Raw value from a document or pet record

    Returns:
        "male", "female" or None when the value cannot be resolved
    """
    if not gender:
        return None

    tokens = findall(r"[a-z]+", gender.lower())

    explicit: set[str] = set()
    implied: set[str] = set()
    for token in tokens:
        # "female" contains "male", so it is checked first
        if FEMALE in token or token in _FEMALE_CODES:
            explicit.add(FEMALE)
        elif MALE in token or token in _MALE_CODES:
            explicit.add(MALE)
        elif token.startswith(_MALE_PROCEDURE_PREFIXES):
            implied.add(MALE)
        elif token.startswith(_FEMALE_PROCEDURE_PREFIXES):
            implied.add(FEMALE)

    if explicit:
        return explicit.pop() if len(explicit) == 1 else None
    if len(implied) == 1:
        return implied.pop()
    return None


class GenderMatcher:
    """Handles normalized sex comparison"""

    @staticmethod
    def match_gender(extracted_gender: str | None, expected_gender: str | None) -> FieldMatchResult:
        """Check if genders match after normalization

        Args:
            extracted_gender: Sex marker read from the document
            expected_gender: Sex on the pet record

        Returns:
            Field result; unresolvable values on either side never match
        """
        normalized_extracted = normalize_gender(extracted_gender)
        normalized_expected = normalize_gender(expected_gender)

        matches = (
            normalized_extracted is not None
            and normalized_expected is not None
            and normalized_extracted == normalized_expected
        )

        logger.debug(
            f"Gender match: extracted={extracted_gender!r} ({normalized_extracted}) "
            f"expected={expected_gender!r} ({normalized_expected}) matches={matches}"
        )

        return FieldMatchResult(
            field=MatchField.GENDER,
            matches=matches,
            extracted_value=extracted_gender,
            expected_value=expected_gender,
        )
