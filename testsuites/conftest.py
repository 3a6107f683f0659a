"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project-wide markers and tags collected items by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "requires_external: Tests requiring the live service at BASE_URL"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "api: API-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Offline framework tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )


def pytest_collection_modifyitems(config, items):
    """Add directory-based markers to collected tests."""
    for item in items:
        path = str(item.path)

        if "api_testing" in path:
            item.add_marker(pytest.mark.api)

        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Auth API Automation Suite",
        "=" * 60,
        "",
    ]
