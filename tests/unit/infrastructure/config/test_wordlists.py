# tests/unit/infrastructure/config/test_wordlists.py

"""Tests for the wordlists configuration"""

# Standard library imports
from json import dumps
from pathlib import Path

# Local imports
from pet_identity_validator.infrastructure.config import DEFAULT_NICKNAMES
from pet_identity_validator.infrastructure.config import WordlistsConfig


class TestWordlistsConfig:
    """Test WordlistsConfig"""

    def test_defaults(self):
        nicknames = WordlistsConfig().get_nicknames()

        assert nicknames["maximus"] == frozenset({"max"})
        assert nicknames["william"] == frozenset({"will", "bill"})
        assert set(nicknames) == set(DEFAULT_NICKNAMES)

    def test_entries_are_normalized(self):
        config = WordlistsConfig(nicknames={" Rosalind ": ["Roz", " ROSIE ", ""], "  ": ["x"]})

        assert config.get_nicknames() == {"rosalind": frozenset({"roz", "rosie"})}

    def test_default_table_is_not_shared(self):
        first = WordlistsConfig()
        first.nicknames["maximus"].append("maxi")

        assert WordlistsConfig().nicknames["maximus"] == ["max"]

    def test_load_from_file(self, tmp_path: Path):
        path = tmp_path / "wordlists.json"
        path.write_text(dumps({"nicknames": {"penelope": ["penny"]}}), encoding="utf-8")

        config = WordlistsConfig.load(str(path))

        assert config.get_nicknames() == {"penelope": frozenset({"penny"})}

    def test_load_without_path(self):
        assert WordlistsConfig.load(None) == WordlistsConfig()

    def test_load_invalid_file_falls_back(self, tmp_path: Path, caplog):
        path = tmp_path / "wordlists.json"
        path.write_text("[1, 2", encoding="utf-8")

        config = WordlistsConfig.load(path)

        assert config == WordlistsConfig()
        assert "Failed to load wordlists" in caplog.text
