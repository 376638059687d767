# pet_identity_validator/infrastructure/logging/__init__.py

"""Logging infrastructure for the Pet Identity Validator.

This module provides centralized logging configuration and setup.
"""

# Local imports
from pet_identity_validator.infrastructure.logging._setup import get_default_log_path
from pet_identity_validator.infrastructure.logging._setup import set_up_logging as setup_logging
from pet_identity_validator.infrastructure.logging._setup import (
    set_up_logging_from_config as setup_logging_from_config,
)

__all__ = ["setup_logging", "setup_logging_from_config", "get_default_log_path"]
