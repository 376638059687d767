# pet_identity_validator/adapters/api/_routing.py

"""Map a verdict to what the ingestion pipeline should do with the document"""

# Standard library imports
from enum import Enum

# Local imports
from pet_identity_validator.core.domain.enums import SkipReason
from pet_identity_validator.core.domain.verdict import ValidationVerdict


class RoutingAction(Enum):
    """Next step for a validated document"""

    AUTO_FILE = "auto_file"  # File against the pet's records
    MANUAL_REVIEW = "manual_review"  # Queue for a human to adjudicate
    REJECT = "reject"  # Belongs to another animal, never file for this pet


def route_verdict(verdict: ValidationVerdict) -> RoutingAction:
    """Decide the routing action for a verdict

    A microchip mismatch is definitive; missing or weak attribute evidence is
    soft and goes to a reviewer.

    Args:
        verdict: Verdict returned by the validator

    Returns:
        Routing action
    """
    if verdict.is_valid:
        return RoutingAction.AUTO_FILE
    if verdict.skip_reason is SkipReason.MICROCHIP_MISMATCH:
        return RoutingAction.REJECT
    return RoutingAction.MANUAL_REVIEW
