# pet_identity_validator/application/processing/matching/__init__.py

"""Field matchers and confidence aggregation"""

# Local imports
from pet_identity_validator.application.processing.matching._age_matcher import AgeMatcher
from pet_identity_validator.application.processing.matching._confidence_aggregator import (
    ConfidenceAggregator,
)
from pet_identity_validator.application.processing.matching._fuzzy_matcher import (
    FuzzyFieldMatcher,
)
from pet_identity_validator.application.processing.matching._gender_matcher import GenderMatcher
from pet_identity_validator.application.processing.matching._gender_matcher import (
    normalize_gender,
)
from pet_identity_validator.application.processing.matching._microchip_matcher import (
    MicrochipMatcher,
)

__all__ = [
    "AgeMatcher",
    "ConfidenceAggregator",
    "FuzzyFieldMatcher",
    "GenderMatcher",
    "MicrochipMatcher",
    "normalize_gender",
]
