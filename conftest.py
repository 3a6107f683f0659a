"""
Repository-level pytest configuration.

  - `--run-external` option: live tests against BASE_URL are skipped unless
    the option (or RUN_EXTERNAL_TESTS=1) is given
  - Demo-safe environment defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked requires_external against the configured BASE_URL",
    )


def _external_enabled(config) -> bool:
    if config.getoption("--run-external"):
        return True
    return os.environ.get("RUN_EXTERNAL_TESTS", "").lower() in ("1", "true", "yes", "on")


def pytest_collection_modifyitems(config, items):
    if _external_enabled(config):
        return

    skip_external = pytest.mark.skip(
        reason="live service test; use --run-external or RUN_EXTERNAL_TESTS=1"
    )
    for item in items:
        if "requires_external" in item.keywords:
            item.add_marker(skip_external)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "LOG_LEVEL": "INFO",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
