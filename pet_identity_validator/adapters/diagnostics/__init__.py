# pet_identity_validator/adapters/diagnostics/__init__.py

"""Human-readable explanations of validation verdicts"""

# Local imports
from pet_identity_validator.adapters.diagnostics._formatter import format_validation_summary
from pet_identity_validator.adapters.diagnostics._formatter import format_verdict

__all__ = ["format_validation_summary", "format_verdict"]
