# pet_identity_validator/core/domain/match_result.py

"""Per-field match results and the aggregated confidence assessment"""

# Standard library imports
from typing import Iterator

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from pet_identity_validator.core.domain.enums import ConfidenceBand
from pet_identity_validator.core.domain.enums import MatchField

RESULT_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


class FieldMatchResult(BaseModel):
    """Outcome of comparing one extracted attribute with the pet record

    ``similarity`` is only set for fuzzy fields (name, breed). Exact fields
    (microchip, gender) carry the boolean verdict alone.
    """

    model_config = RESULT_MODEL_CONFIG

    field: MatchField
    matches: bool
    similarity: float | None = Field(default=None, ge=0.0, le=1.0)
    is_likely_variation: bool = Field(
        default=False, description="Nickname/abbreviation heuristic accepted the pair"
    )
    is_near_variation: bool = Field(
        default=False, description="Heuristic came close but did not accept the pair"
    )
    extracted_value: str | None = None
    expected_value: str | None = None

    @property
    def is_available(self) -> bool:
        """Whether this result carries usable evidence"""
        return self.extracted_value is not None


class AgeMatchResult(FieldMatchResult):
    """Age comparison with the numbers needed to explain it"""

    field: MatchField = MatchField.AGE
    extracted_years: float | None = None
    actual_years: float | None = None
    difference: float | None = None
    tolerance_years: float = 1.0

    @property
    def is_available(self) -> bool:
        """Unparseable phrases and unknown birth dates are not evidence"""
        return self.extracted_years is not None and self.actual_years is not None


class MatchDetails(BaseModel):
    """All field results computed during one validation call"""

    model_config = RESULT_MODEL_CONFIG

    microchip: FieldMatchResult | None = None
    name: FieldMatchResult | None = None
    breed: FieldMatchResult | None = None
    age: AgeMatchResult | None = None
    gender: FieldMatchResult | None = None

    def results(self) -> Iterator[FieldMatchResult]:
        """Yield every computed result in priority order"""
        for result in (self.microchip, self.name, self.breed, self.age, self.gender):
            if result is not None:
                yield result

    def available(self) -> Iterator[FieldMatchResult]:
        """Yield computed results that carry evidence"""
        return (result for result in self.results() if result.is_available)


class ConfidenceAssessment(BaseModel):
    """Weighted confidence over the fields that carried evidence"""

    model_config = RESULT_MODEL_CONFIG

    confidence: float = Field(ge=0.0, le=100.0)
    band: ConfidenceBand
    field_breakdown: tuple[tuple[str, float], ...] = Field(
        default=(), description="Percentage credit earned by each available field"
    )

    def breakdown(self) -> dict[str, float]:
        """Per-field credit as a fresh dict, in priority order"""
        return dict(self.field_breakdown)
