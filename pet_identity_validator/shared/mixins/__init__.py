# pet_identity_validator/shared/mixins/__init__.py

"""Reusable mixins"""

# Local imports
from pet_identity_validator.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
