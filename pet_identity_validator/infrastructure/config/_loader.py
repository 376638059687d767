# pet_identity_validator/infrastructure/config/_loader.py

"""Process-wide access to validator configuration and word lists"""

# Standard library imports
from functools import cached_property
from logging import getLogger
from pathlib import Path

# Local imports
from pet_identity_validator.infrastructure.config._models import AppConfig
from pet_identity_validator.infrastructure.config._models import ConfidenceBandsConfig
from pet_identity_validator.infrastructure.config._models import FieldWeightsConfig
from pet_identity_validator.infrastructure.config._models import LoggingConfig
from pet_identity_validator.infrastructure.config._models import TextConfig
from pet_identity_validator.infrastructure.config._models import ThresholdsConfig
from pet_identity_validator.infrastructure.config._wordlists import WordlistsConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Read-only view of validator thresholds, weights and the nickname table

    Shared by every validator in the process and never mutated after construction.
    """

    def __init__(
        self,
        config_path: str | None = None,
        app_config: AppConfig | None = None,
        wordlists: WordlistsConfig | None = None,
    ):
        """Load configuration and wordlists, unless prebuilt models are given

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
            app_config: Prebuilt configuration, bypasses file loading
            wordlists: Prebuilt wordlists, bypasses file loading
        """
        self.config_path = config_path
        self._app_config = app_config if app_config is not None else AppConfig.load(config_path)
        self._wordlists = (
            wordlists if wordlists is not None else WordlistsConfig.load(self._find_wordlists_path())
        )

    def _find_wordlists_path(self) -> Path | None:
        """Locate wordlists.json beside the config file, then in the working directory"""
        candidates = [Path("wordlists.json")]
        if self.config_path:
            candidates.insert(0, Path(self.config_path).parent / "wordlists.json")

        for candidate in candidates:
            if candidate.exists():
                logger.debug(f"Using nickname table from {candidate}")
                return candidate
        return None

    @property
    def thresholds(self) -> ThresholdsConfig:
        """Matching and acceptance thresholds"""
        return self._app_config.thresholds

    @property
    def weights(self) -> FieldWeightsConfig:
        """Confidence field weights"""
        return self._app_config.weights

    @property
    def bands(self) -> ConfidenceBandsConfig:
        """Confidence band boundaries"""
        return self._app_config.bands

    @property
    def text(self) -> TextConfig:
        """Text normalization configuration"""
        return self._app_config.text

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    @cached_property
    def nicknames(self) -> dict[str, frozenset[str]]:
        """Canonical name -> diminutives"""
        return self._wordlists.get_nicknames()


# Shared by every component built without an explicit loader
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Return the process-wide loader, or a fresh one for an explicit path

    Args:
        config_path: Configuration file to load instead of the default

    Returns:
        ConfigLoader; the same instance on every call without a path
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
