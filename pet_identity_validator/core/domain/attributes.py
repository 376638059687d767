# pet_identity_validator/core/domain/attributes.py

"""Evidence extracted from a document and the pet record it is checked against"""

# Standard library imports
from datetime import date

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Local imports
from pet_identity_validator.core.types.json import JSONDict

# Placeholder strings some extraction models emit instead of a real null
_NULL_MARKERS = frozenset({"null", "undefined"})

DOMAIN_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


def _clean_optional_text(value: object) -> str | None:
    """Map blank strings and null placeholders to None"""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    if not value.strip() or value.strip().lower() in _NULL_MARKERS:
        return None
    return value


class ExtractedAttributes(BaseModel):
    """Pet identification evidence pulled from a document by the extraction step

    Every field is independently optional. A missing field is unavailable
    evidence, never a mismatch.
    """

    model_config = DOMAIN_MODEL_CONFIG

    microchip: str | None = None
    name: str | None = None
    age: str | None = Field(default=None, description="Free-text age, e.g. '2 years 4 months'")
    breed: str | None = None
    gender: str | None = Field(default=None, description="Free text, e.g. 'Neutered Male'")
    extraction_confidence: float = Field(
        default=0.0, ge=0.0, le=100.0, description="Advisory score from the extraction step"
    )

    @field_validator("microchip", "name", "age", "breed", "gender", mode="before")
    @classmethod
    def normalize_missing(cls, v: object) -> str | None:
        """Treat blank values and 'null'/'undefined' placeholders as absent"""
        return _clean_optional_text(v)

    def has_any_identifier(self) -> bool:
        """Whether at least one identity field carries evidence"""
        return any((self.microchip, self.name, self.age, self.breed, self.gender))

    @classmethod
    def from_payload(cls, payload: JSONDict) -> "ExtractedAttributes":
        """Build attributes from a raw extraction response

        Unknown keys are ignored, a missing or unusable ``confidence`` becomes 0
        and out-of-range confidence values are clamped to 0-100.

        Args:
            payload: Decoded JSON object returned by the extraction model

        Returns:
            Normalized ExtractedAttributes
        """
        raw_confidence = payload.get("confidence", 0)
        try:
            confidence = float(raw_confidence)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            confidence = 0.0
        if confidence != confidence:  # NaN
            confidence = 0.0

        return cls(
            microchip=_clean_optional_text(payload.get("microchip")),
            name=_clean_optional_text(payload.get("name")),
            age=_clean_optional_text(payload.get("age")),
            breed=_clean_optional_text(payload.get("breed")),
            gender=_clean_optional_text(payload.get("gender")),
            extraction_confidence=min(max(confidence, 0.0), 100.0),
        )


class RegisteredPet(BaseModel):
    """Read-only snapshot of the pet record a document is checked against"""

    model_config = DOMAIN_MODEL_CONFIG

    name: str
    breed: str
    sex: str
    date_of_birth: date | None = None
    microchip_number: str | None = None

    @field_validator("microchip_number", mode="before")
    @classmethod
    def normalize_microchip(cls, v: object) -> str | None:
        """Registry rows store an empty string for pets without a chip"""
        return _clean_optional_text(v)
