"""API automation: framework, models, services and test suites."""
