# pet_identity_validator/core/types/__init__.py

"""Type definitions for the Pet Identity Validator

This package contains type aliases and protocols used throughout the codebase.
These are pure type definitions with no implementation logic.
"""

# Local imports
from pet_identity_validator.core.types.json import JSONDict
from pet_identity_validator.core.types.json import JSONList
from pet_identity_validator.core.types.json import JSONPrimitive
from pet_identity_validator.core.types.json import JSONType
from pet_identity_validator.core.types.protocols import DocumentInput
from pet_identity_validator.core.types.protocols import PetInfoExtractor

__all__ = [
    "DocumentInput",
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "PetInfoExtractor",
]
