"""
================================================================================
API Testing Framework
================================================================================

Building blocks shared by the API service wrappers and tests.

Modules:
    - config_manager: properties-file configuration
    - base_service: httpx request specification with Allure logging
    - response_helpers: content-type checks and model deserialization
    - data_loader: YAML test data with placeholder interpolation
    - log_setup: Loguru configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .base_service import BaseService
from .config_manager import ConfigManager, ConfigurationError
from .data_loader import DataLoader
from .log_setup import init_logger
from .response_helpers import ResponseFormatError, as_model, is_json, pretty_print

__all__ = [
    "BaseService",
    "ConfigManager",
    "ConfigurationError",
    "DataLoader",
    "ResponseFormatError",
    "as_model",
    "init_logger",
    "is_json",
    "pretty_print",
]
