# pet_identity_validator/infrastructure/config/_models.py

"""Validator configuration: thresholds, field weights, bands, text and logging"""

# Standard library imports
from json import loads
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

# Local imports
from pet_identity_validator.core.types.json import JSONDict

logger = getLogger(__name__)


class ThresholdsConfig(BaseModel):
    """Matching and acceptance thresholds

    Values were tuned empirically on inbound vet documents and are kept as
    configuration rather than treated as validated optima.
    """

    name_similarity: float = Field(0.70, ge=0.0, le=1.0, description="Fuzzy name threshold")
    name_variation_floor: float = Field(
        0.60, ge=0.0, le=1.0, description="Lowest similarity checked for name containment"
    )
    nickname_length_ratio: float = Field(
        0.60, gt=0.0, le=1.0, description="Shorter/longer length ratio for a contained nickname"
    )
    breed_similarity: float = Field(0.70, ge=0.0, le=1.0, description="Fuzzy breed threshold")
    breed_variation_floor: float = Field(
        0.0, ge=0.0, le=1.0, description="Lowest similarity checked for breed abbreviations"
    )
    abbreviation_length_ratio: float = Field(
        0.70, gt=0.0, le=1.0, description="Shorter/longer length ratio for a contained breed"
    )
    strong_match: float = Field(
        0.90, ge=0.0, le=1.0, description="Similarity at which name/breed count as strong"
    )
    attribute_match_ratio: float = Field(
        0.70, ge=0.0, le=1.0, description="Share of available attributes that must match"
    )
    partial_match_min_confidence: float = Field(
        75.0, ge=0.0, le=100.0, description="Weighted confidence that accepts a partial match"
    )
    age_tolerance_years: float = Field(1.0, ge=0.0, le=30.0, description="Age tolerance")
    relaxed_age_multiplier: float = Field(
        2.0, ge=1.0, le=10.0, description="Tolerance multiplier when name and breed are strong"
    )

    @model_validator(mode="after")
    def validate_variation_floors(self) -> "ThresholdsConfig":
        """Variation heuristics only apply below their thresholds"""
        if self.name_variation_floor > self.name_similarity:
            raise ValueError("name_variation_floor must not exceed name_similarity")
        if self.breed_variation_floor > self.breed_similarity:
            raise ValueError("breed_variation_floor must not exceed breed_similarity")
        return self


class FieldWeightsConfig(BaseModel):
    """Weights of each field in the confidence score"""

    microchip: float = Field(100.0, gt=0.0)
    name: float = Field(40.0, gt=0.0)
    breed: float = Field(30.0, gt=0.0)
    age: float = Field(20.0, gt=0.0)
    gender: float = Field(10.0, gt=0.0)


class ConfidenceBandsConfig(BaseModel):
    """Lower bounds (percent) of the qualitative confidence bands"""

    high: float = Field(90.0, ge=0.0, le=100.0)
    medium: float = Field(70.0, ge=0.0, le=100.0)
    low: float = Field(50.0, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def validate_order(self) -> "ConfidenceBandsConfig":
        """Ensure bands are ordered high >= medium >= low"""
        if not (self.high >= self.medium >= self.low):
            raise ValueError(
                f"Bands must be ordered high >= medium >= low, got "
                f"{self.high}/{self.medium}/{self.low}"
            )
        return self


class TextConfig(BaseModel):
    """Text normalization applied before fuzzy comparison"""

    fold_unicode: bool = Field(
        False, description="Fold accented characters to ASCII before comparing"
    )


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    weights: FieldWeightsConfig = Field(default_factory=FieldWeightsConfig)
    bands: ConfidenceBandsConfig = Field(default_factory=ConfidenceBandsConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load validator configuration from JSON, falling back to defaults

        Without a path, ``config.json`` in the working directory is used when it
        exists. A missing file yields defaults; an unreadable one also logs a
        warning.

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        path = Path(config_path) if config_path is not None else Path("config.json")
        if not path.exists():
            return cls()

        try:
            return cls.model_validate(loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
