# pet_identity_validator/core/domain/verdict.py

"""Validation verdict domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from pet_identity_validator.core.domain.attributes import ExtractedAttributes
from pet_identity_validator.core.domain.attributes import RegisteredPet
from pet_identity_validator.core.domain.enums import AcceptanceRule
from pet_identity_validator.core.domain.enums import SkipReason
from pet_identity_validator.core.domain.enums import ValidationMethod
from pet_identity_validator.core.domain.match_result import ConfidenceAssessment
from pet_identity_validator.core.domain.match_result import MatchDetails


class ValidationVerdict(BaseModel):
    """Immutable outcome of validating one document against one pet

    Created once per call and never mutated. Carries the evidence, the pet
    snapshot and every field result so it can be explained after the fact.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_valid: bool
    method: ValidationMethod
    extracted: ExtractedAttributes
    pet: RegisteredPet
    match_details: MatchDetails = Field(default_factory=MatchDetails)
    confidence: ConfidenceAssessment
    skip_reason: SkipReason | None = None

    # Attribute path bookkeeping
    match_count: int = Field(default=0, ge=0)
    available_attributes: int = Field(default=0, ge=0)
    required_matches: float = Field(default=0.0, ge=0.0)
    has_strong_matches: bool = False
    accepted_by: tuple[AcceptanceRule, ...] = ()
