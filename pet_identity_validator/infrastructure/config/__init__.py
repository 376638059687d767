# pet_identity_validator/infrastructure/config/__init__.py

"""Configuration infrastructure for the Pet Identity Validator.

This module manages configuration loading, validation, and models.
"""

# Local imports
from pet_identity_validator.infrastructure.config._loader import ConfigLoader
from pet_identity_validator.infrastructure.config._loader import get_config
from pet_identity_validator.infrastructure.config._models import AppConfig
from pet_identity_validator.infrastructure.config._models import ConfidenceBandsConfig
from pet_identity_validator.infrastructure.config._models import FieldWeightsConfig
from pet_identity_validator.infrastructure.config._models import TextConfig
from pet_identity_validator.infrastructure.config._models import ThresholdsConfig
from pet_identity_validator.infrastructure.config._wordlists import DEFAULT_NICKNAMES
from pet_identity_validator.infrastructure.config._wordlists import WordlistsConfig

__all__ = [
    "AppConfig",
    "ConfidenceBandsConfig",
    "ConfigLoader",
    "DEFAULT_NICKNAMES",
    "FieldWeightsConfig",
    "get_config",
    "TextConfig",
    "ThresholdsConfig",
    "WordlistsConfig",
]
