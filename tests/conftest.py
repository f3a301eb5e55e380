"""Shared fixtures for deploy configuration tests."""

import pytest

from deploy_configuration import Configuration

REPOSITORY = "git@example.com/repo.git"


@pytest.fixture
def configuration() -> Configuration:
    """Fresh configuration with only the required repository set."""
    return Configuration(REPOSITORY)
