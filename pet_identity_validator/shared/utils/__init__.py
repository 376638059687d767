# pet_identity_validator/shared/utils/__init__.py

"""Standalone helper functions"""

# Local imports
from pet_identity_validator.shared.utils.age_utils import calculate_age_in_years
from pet_identity_validator.shared.utils.age_utils import parse_age_to_years
from pet_identity_validator.shared.utils.text_utils import ascii_fold
from pet_identity_validator.shared.utils.text_utils import normalize_for_comparison
from pet_identity_validator.shared.utils.text_utils import split_tokens
from pet_identity_validator.shared.utils.text_utils import strip_whitespace

__all__ = [
    "ascii_fold",
    "calculate_age_in_years",
    "normalize_for_comparison",
    "parse_age_to_years",
    "split_tokens",
    "strip_whitespace",
]
