"""
================================================================================
Test Data Loader
================================================================================

Loads YAML test data (credentials, emails, signup profiles) from
`testsuites/api_testing/data/`.

String values support placeholders:
    ${NAME}            variable or environment variable, left as-is if unset
    ${NAME:default}    falls back to `default` when NAME is unset

Variables registered with `set_variables` win over environment variables.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger


DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


class DataLoader:
    """
    YAML test data loader with placeholder interpolation.

    Example:
        loader = DataLoader()
        users = loader.load("auth_users")
        for user in users["login"]:
            print(user["username"])
    """

    VARIABLE_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

    def __init__(self, data_directory: Union[str, Path, None] = None):
        self.data_dir = Path(data_directory or DEFAULT_DATA_DIR)
        self.variables: Dict[str, Any] = {}

    def set_variables(self, variables: Dict[str, Any]) -> None:
        """Register variables available to placeholders."""
        self.variables.update(variables)

    def load(self, name: str) -> Dict[str, Any]:
        """
        Load `<name>.yaml` (or `.yml`) from the data directory.

        Raises:
            FileNotFoundError: When no data file with that name exists
            yaml.YAMLError: When the file is not valid YAML
        """
        file_path = self._resolve(name)
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}

        if not isinstance(content, dict):
            raise ValueError(f"Top level of {file_path.name} must be a mapping")

        logger.debug(f"Loaded test data from {file_path.name}")
        return self._interpolate(content)

    def load_section(self, name: str, section: str) -> List[Dict[str, Any]]:
        """Return one list section of a data file, e.g. ("auth_users", "login")."""
        entries = self.load(name).get(section) or []
        if isinstance(entries, dict):
            entries = [entries]
        return entries

    def _resolve(self, name: str) -> Path:
        for suffix in (".yaml", ".yml"):
            candidate = self.data_dir / f"{name}{suffix}"
            if candidate.exists():
                return candidate
        raise FileNotFoundError(f"Test data file not found: {self.data_dir / name}.yaml")

    def _interpolate(self, data: Any) -> Any:
        if isinstance(data, str):
            return self._interpolate_string(data)
        if isinstance(data, dict):
            return {k: self._interpolate(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._interpolate(item) for item in data]
        return data

    def _interpolate_string(self, text: str) -> str:
        def replace_var(match):
            var_name = match.group(1).strip()
            default: Optional[str] = match.group(2)

            if var_name in self.variables:
                return str(self.variables[var_name])
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            if default is not None:
                return default
            return match.group(0)

        return self.VARIABLE_PATTERN.sub(replace_var, text)


__all__ = [
    "DataLoader",
]
