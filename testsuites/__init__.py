"""
Test suites package.

This repository keeps `testsuites` importable to support:
  - programmatic runners (e.g., `run_tests.py`)
  - absolute imports from tests (`from testsuites.api_testing...`)
  - editable installs (`pip install -e .`)
"""
