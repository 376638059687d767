# pet_identity_validator/infrastructure/config/_wordlists.py

"""Nickname table and other word lists loaded from wordlists.json"""

# Standard library imports
from json import loads
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

logger = getLogger(__name__)

# Canonical name -> diminutives seen on vet paperwork
DEFAULT_NICKNAMES: dict[str, list[str]] = {
    "maximus": ["max"],
    "maximilian": ["max"],
    "alexander": ["alex"],
    "alexandra": ["alex"],
    "christopher": ["chris"],
    "christina": ["chris"],
    "william": ["will", "bill"],
    "robert": ["rob", "bob"],
    "richard": ["rick", "dick"],
    "jennifer": ["jen", "jenny"],
    "elizabeth": ["liz", "beth"],
}


class WordlistsConfig(BaseModel):
    """Word tables used by the fuzzy matchers

    Extra top-level keys are kept so deployments can ship other tables in the
    same file.
    """

    model_config = ConfigDict(extra="allow")

    nicknames: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_NICKNAMES.items()}
    )

    @field_validator("nicknames")
    @classmethod
    def lowercase_nicknames(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Store names lower-cased and trimmed so lookups are case-insensitive"""
        return {
            name.strip().lower(): [d.strip().lower() for d in diminutives if d.strip()]
            for name, diminutives in v.items()
            if name.strip()
        }

    @classmethod
    def load(cls, wordlists_path: Path | str | None = None) -> "WordlistsConfig":
        """Load the nickname table from JSON

        Args:
            wordlists_path: Path to wordlists.json, None for the built-in table

        Returns:
            Validated WordlistsConfig; the built-in table when the file is
            missing or unreadable
        """
        if wordlists_path is None:
            return cls()

        path = Path(wordlists_path)
        if not path.exists():
            return cls()

        try:
            return cls.model_validate(loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load wordlists from {path}: {e}. Using defaults.")
            return cls()

    def get_nicknames(self) -> dict[str, frozenset[str]]:
        """Get the diminutive table

        Returns:
            Mapping of canonical name to its known diminutives
        """
        return {name: frozenset(diminutives) for name, diminutives in self.nicknames.items()}
