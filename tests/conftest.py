# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from datetime import date
from logging import Logger
from logging import getLogger

# Third party imports
import pytest

# Local imports
from pet_identity_validator.core.domain import RegisteredPet
from pet_identity_validator.infrastructure.config import AppConfig
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.infrastructure.config import WordlistsConfig

# Fixed reference date so age checks never depend on the day the suite runs
TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Clear all logger instances
    Logger.manager.loggerDict.clear()

    yield


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration built from model defaults, independent of files in cwd"""
    return ConfigLoader(app_config=AppConfig(), wordlists=WordlistsConfig())


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def maximus() -> RegisteredPet:
    """Three-year-old Golden Retriever with a registered microchip"""
    return RegisteredPet(
        name="Maximus",
        breed="Golden Retriever",
        sex="Male",
        date_of_birth=date(2023, 10, 19),
        microchip_number="123 456 789 012 345",
    )


@pytest.fixture
def charlie() -> RegisteredPet:
    """Labrador without a microchip on record"""
    return RegisteredPet(
        name="Charlie",
        breed="Labrador",
        sex="Male",
        date_of_birth=date(2023, 10, 19),
    )
