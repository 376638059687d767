# pet_identity_validator/shared/mixins/mixins.py

"""Mixins shared by the configurable validation components

Components holding thresholds or weights take an optional ConfigLoader and
otherwise share the process-wide default. Stateless helpers live in
``shared.utils`` instead.
"""

# Local imports
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.infrastructure.config import get_config


class ConfigurableMixin:
    """Gives a component its configuration, explicit or default

    Used by SimilarityCalculator, FuzzyFieldMatcher, ConfidenceAggregator and
    PetValidator.
    """

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Return the given loader, or the shared default when None

        Args:
            config: Loader injected by the caller

        Returns:
            ConfigLoader the component should read thresholds from
        """
        return config if config is not None else get_config()
