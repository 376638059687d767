# tests/unit/infrastructure/logging/test_setup.py

"""Tests for logging setup"""

# Standard library imports
from logging import DEBUG
from logging import INFO
from logging import WARNING
from logging import getLogger
from unittest import TestCase
from unittest.mock import Mock
from unittest.mock import patch

# Local imports
from pet_identity_validator.infrastructure.config import AppConfig
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.infrastructure.config import WordlistsConfig
from pet_identity_validator.infrastructure.logging import get_default_log_path
from pet_identity_validator.infrastructure.logging import setup_logging
from pet_identity_validator.infrastructure.logging import setup_logging_from_config

SETUP_MODULE = "pet_identity_validator.infrastructure.logging._setup"


class TestDefaultLogPath(TestCase):
    """Test get_default_log_path"""

    def test_format(self):
        with patch(f"{SETUP_MODULE}.datetime") as mock_datetime:
            mock_datetime.now.return_value.strftime.return_value = "20261019_143052"
            with patch(f"{SETUP_MODULE}.makedirs"):
                path = get_default_log_path()
                self.assertEqual(path, "logs/pet_validator_20261019_143052.log")

    def test_creates_directory(self):
        with patch(f"{SETUP_MODULE}.makedirs") as mock_makedirs:
            get_default_log_path("audit")
            mock_makedirs.assert_called_once_with("audit", exist_ok=True)


class TestSetupLogging(TestCase):
    """Test setup_logging"""

    def test_default_file_logging(self):
        with patch(f"{SETUP_MODULE}.FileHandler") as mock_file_handler:
            with patch(f"{SETUP_MODULE}.StreamHandler") as mock_stream_handler:
                with patch(
                    f"{SETUP_MODULE}.get_default_log_path", return_value="logs/test.log"
                ):
                    mock_file_handler.return_value = Mock(level=DEBUG)
                    mock_stream_handler.return_value = Mock(level=INFO)

                    log_file = setup_logging()

                    self.assertEqual(log_file, "logs/test.log")
                    mock_file_handler.assert_called_once_with("logs/test.log", encoding="utf-8")
                    mock_file_handler.return_value.setLevel.assert_called_once_with(DEBUG)
                    mock_stream_handler.return_value.setLevel.assert_called_once_with(INFO)
                    self.assertEqual(getLogger().level, DEBUG)

    def test_disable_file_logging(self):
        with patch(f"{SETUP_MODULE}.FileHandler") as mock_file_handler:
            log_file = setup_logging(log_level="WARNING", disable_file_logging=True)

            self.assertIsNone(log_file)
            mock_file_handler.assert_not_called()
            self.assertEqual(getLogger().level, WARNING)
            self.assertEqual(len(getLogger().handlers), 1)

    def test_silent_without_file(self):
        setup_logging(silent=True, disable_file_logging=True)

        self.assertEqual(getLogger().handlers, [])

    def test_unknown_level_defaults_to_info(self):
        setup_logging(log_level="chatty", disable_file_logging=True)

        self.assertEqual(getLogger().level, INFO)


class TestSetupLoggingFromConfig(TestCase):
    """Test setup_logging_from_config"""

    def test_no_log_file_configured(self):
        config = ConfigLoader(app_config=AppConfig(), wordlists=WordlistsConfig())

        with patch(f"{SETUP_MODULE}.set_up_logging", return_value=None) as mock_setup:
            setup_logging_from_config(config)

            mock_setup.assert_called_once_with(
                log_file=None, log_level="INFO", silent=False, disable_file_logging=True
            )

    def test_debug_with_log_file(self):
        config = ConfigLoader(
            app_config=AppConfig.model_validate(
                {"logging": {"debug": True, "log_file": "logs/custom.log"}}
            ),
            wordlists=WordlistsConfig(),
        )

        with patch(f"{SETUP_MODULE}.set_up_logging", return_value="logs/custom.log") as mock_setup:
            result = setup_logging_from_config(config, silent=True)

            self.assertEqual(result, "logs/custom.log")
            mock_setup.assert_called_once_with(
                log_file="logs/custom.log",
                log_level="DEBUG",
                silent=True,
                disable_file_logging=False,
            )
