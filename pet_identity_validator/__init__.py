# pet_identity_validator/__init__.py

"""Pet Identity Validator Package

A library for deciding whether a veterinary document, described by attributes an
external extraction step pulled from it, belongs to a registered pet before the
document is filed against that pet's medical history.
"""

# Local imports
# High-level API
from pet_identity_validator.adapters.api import DocumentValidator
from pet_identity_validator.adapters.api import RoutingAction
from pet_identity_validator.adapters.api import route_verdict
from pet_identity_validator.adapters.api import validate
from pet_identity_validator.adapters.diagnostics import format_validation_summary
from pet_identity_validator.adapters.diagnostics import format_verdict

# Data models
from pet_identity_validator.core.domain import ConfidenceAssessment
from pet_identity_validator.core.domain import ConfidenceBand
from pet_identity_validator.core.domain import ExtractedAttributes
from pet_identity_validator.core.domain import FieldMatchResult
from pet_identity_validator.core.domain import RegisteredPet
from pet_identity_validator.core.domain import SkipReason
from pet_identity_validator.core.domain import ValidationMethod
from pet_identity_validator.core.domain import ValidationVerdict

# For users who want lower-level control
from pet_identity_validator.application.processing.validation_engine import PetValidator
from pet_identity_validator.infrastructure.config import ConfigLoader

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "validate",
    "DocumentValidator",
    "route_verdict",
    "RoutingAction",
    "format_verdict",
    "format_validation_summary",
    # Data models
    "ExtractedAttributes",
    "RegisteredPet",
    "FieldMatchResult",
    "ConfidenceAssessment",
    "ConfidenceBand",
    "SkipReason",
    "ValidationMethod",
    "ValidationVerdict",
    # Advanced usage
    "PetValidator",
    "ConfigLoader",
    # Version
    "__version__",
]
