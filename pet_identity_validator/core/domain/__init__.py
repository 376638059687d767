# pet_identity_validator/core/domain/__init__.py

"""Core domain models"""

# Local imports
from pet_identity_validator.core.domain.attributes import ExtractedAttributes
from pet_identity_validator.core.domain.attributes import RegisteredPet
from pet_identity_validator.core.domain.enums import AcceptanceRule
from pet_identity_validator.core.domain.enums import ConfidenceBand
from pet_identity_validator.core.domain.enums import FIELD_LABELS
from pet_identity_validator.core.domain.enums import MatchField
from pet_identity_validator.core.domain.enums import SkipReason
from pet_identity_validator.core.domain.enums import ValidationMethod
from pet_identity_validator.core.domain.match_result import AgeMatchResult
from pet_identity_validator.core.domain.match_result import ConfidenceAssessment
from pet_identity_validator.core.domain.match_result import FieldMatchResult
from pet_identity_validator.core.domain.match_result import MatchDetails
from pet_identity_validator.core.domain.verdict import ValidationVerdict

__all__ = [
    "AcceptanceRule",
    "AgeMatchResult",
    "ConfidenceAssessment",
    "ConfidenceBand",
    "ExtractedAttributes",
    "FIELD_LABELS",
    "FieldMatchResult",
    "MatchDetails",
    "MatchField",
    "RegisteredPet",
    "SkipReason",
    "ValidationMethod",
    "ValidationVerdict",
]
