# tests/unit/shared/mixins/test_mixins.py

"""Tests for ConfigurableMixin"""

# Standard library imports
from unittest.mock import Mock
from unittest.mock import patch

# Local imports
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.shared.mixins import ConfigurableMixin


class TestConfigurableMixin:
    """Test ConfigurableMixin._init_config"""

    def test_returns_provided_config(self):
        mock_config = Mock(spec=ConfigLoader)

        assert ConfigurableMixin()._init_config(mock_config) is mock_config

    def test_falls_back_to_default(self):
        default = Mock(spec=ConfigLoader)

        with patch("pet_identity_validator.shared.mixins.mixins.get_config", return_value=default):
            assert ConfigurableMixin()._init_config() is default
