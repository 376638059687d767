# pet_identity_validator/core/domain/enums.py

"""Domain enumerations for the pet identity validator"""

# Standard library imports
from enum import Enum


class ValidationMethod(Enum):
    """Which path of the decision policy produced the verdict"""

    MICROCHIP = "microchip"  # Microchip present in document, sole arbiter
    ATTRIBUTES = "attributes"  # Name/breed/age/gender fallback
    NONE = "none"  # Nothing identifiable in the document


class SkipReason(Enum):
    """Why a document was not accepted for a pet"""

    NO_PET_INFO = "no_pet_info"  # No identifiable info found in document
    MICROCHIP_MISMATCH = "microchip_mismatch"  # Microchip found but doesn't match pet record
    ATTRIBUTES_MISMATCH = "attributes_mismatch"  # Name/age/breed/gender don't match


class MatchField(Enum):
    """Attributes compared between a document and a pet record"""

    MICROCHIP = "microchip"
    NAME = "name"
    BREED = "breed"
    AGE = "age"
    GENDER = "gender"


class ConfidenceBand(Enum):
    """Qualitative label for an aggregated confidence score"""

    HIGH = "High confidence"
    MEDIUM = "Medium confidence"
    LOW = "Low confidence - manual review needed"
    VERY_LOW = "Very low confidence"


class AcceptanceRule(Enum):
    """Condition of the attribute path that accepted a document"""

    MATCH_COUNT = "match_count"  # Enough fields matched
    PARTIAL_CONFIDENCE = "partial_confidence"  # Weighted confidence above the floor
    STRONG_NAME_AND_BREED = "strong_name_and_breed"  # Name and breed both near-identical
    STRONG_NAME_AND_AGE = "strong_name_and_age"  # Near-identical name plus matching age


# Human-readable labels used by diagnostics
FIELD_LABELS = {
    MatchField.MICROCHIP: "microchip number",
    MatchField.NAME: "pet name",
    MatchField.BREED: "breed",
    MatchField.AGE: "age",
    MatchField.GENDER: "gender",
}
