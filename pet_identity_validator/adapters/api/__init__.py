# pet_identity_validator/adapters/api/__init__.py

"""API module for pet document validation

This module provides the high-level API for checking extracted document
attributes against a registered pet and routing the outcome.
"""

# Local imports
from pet_identity_validator.adapters.api._routing import RoutingAction
from pet_identity_validator.adapters.api._routing import route_verdict
from pet_identity_validator.adapters.api._validator import DocumentValidator
from pet_identity_validator.adapters.api._validator import validate

__all__ = ["DocumentValidator", "RoutingAction", "route_verdict", "validate"]
