"""Pytest configuration and shared fixtures."""

pytest_plugins = [
    "tests.fixtures.core.teams",
    "tests.fixtures.core.slack",
    "tests.fixtures.core.relay",
    "tests.fixtures.api",
]
