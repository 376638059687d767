# pet_identity_validator/application/processing/similarity_calculator.py

"""Normalized edit-distance similarity used by every fuzzy comparison"""

# Third party imports
from rapidfuzz.distance.Levenshtein import distance as levenshtein_distance

# Local imports
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.shared.mixins.mixins import ConfigurableMixin
from pet_identity_validator.shared.utils.text_utils import ascii_fold


def similarity(str1: str, str2: str) -> float:
    """Calculate similarity ratio between two strings (0-1)

    Levenshtein distance between the lower-cased strings, normalized by the
    longer length. Two empty strings are identical.

    Args:
        str1: First string
        str2: Second string

    Returns:
        1 - distance / max(len(str1), len(str2))
    """
    lowered1 = str1.lower()
    lowered2 = str2.lower()

    # Lengths after lower-casing: some code points expand when lowered
    max_length = max(len(lowered1), len(lowered2))
    if max_length == 0:
        return 1.0

    return 1.0 - levenshtein_distance(lowered1, lowered2) / max_length


class SimilarityCalculator(ConfigurableMixin):
    """Applies the configured text normalization before computing similarity"""

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize with configuration

        Args:
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        self.fold_unicode = self.config.text.fold_unicode

    def calculate_similarity(self, extracted: str, expected: str) -> float:
        """Similarity between a document value and a pet record value

        Args:
            extracted: Value read from the document
            expected: Value stored on the pet record

        Returns:
            Similarity ratio from 0 to 1
        """
        extracted = extracted.strip()
        expected = expected.strip()
        if self.fold_unicode:
            extracted = ascii_fold(extracted)
            expected = ascii_fold(expected)
        return similarity(extracted, expected)
