"""
================================================================================
API Testing Pytest Configuration
================================================================================

Shared fixtures for the authentication API tests.

Fixtures:
    - config: ConfigManager instance
    - base_url: service root from configuration.properties
    - auth_service: AuthService bound to base_url
    - auth_data: YAML test data loader

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import uuid
from typing import Generator

import pytest

from testsuites.api_testing.framework import ConfigManager, DataLoader, init_logger
from testsuites.api_testing.services import AuthService


# =============================================================================
# Session-Scoped Fixtures (Shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def config() -> ConfigManager:
    """
    Provide configuration manager instance.

    Session-scoped: the properties file is loaded once.
    """
    manager = ConfigManager()
    init_logger(config=manager)
    return manager


@pytest.fixture(scope="session")
def base_url(config: ConfigManager) -> str:
    """Get API base URL from configuration."""
    return config.get_base_url()


# =============================================================================
# Function-Scoped Fixtures (Fresh for each test)
# =============================================================================

@pytest.fixture
def auth_service(base_url: str) -> Generator[AuthService, None, None]:
    """
    Provide an AuthService for the configured base URL.

    Usage:
        def test_example(auth_service):
            response = auth_service.login(LoginRequest(username="u", password="p"))
    """
    with AuthService(base_url=base_url) as service:
        yield service


@pytest.fixture
def unique_id() -> str:
    """Unique identifier for data that must not collide across runs."""
    return f"autotest_{uuid.uuid4().hex[:8]}"


@pytest.fixture
def auth_data(unique_id: str) -> DataLoader:
    """Test data loader with `unique_id` available to placeholders."""
    loader = DataLoader()
    loader.set_variables({"unique_id": unique_id})
    return loader


# =============================================================================
# Allure Reporting Hooks
# =============================================================================

def pytest_exception_interact(node, call, report):
    """Attach additional info on test failure."""
    import allure

    if report.failed:
        allure.attach(
            str(call.excinfo.value),
            name="Error Details",
            attachment_type=allure.attachment_type.TEXT
        )
