"""
Pytest configuration for cubemk test suite.

Integration tests are skipped unless the --full flag is given.
"""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--full",
        action="store_true",
        default=False,
        help="Run full test suite including integration tests",
    )


def pytest_configure(config):
    """Register the integration marker."""
    config.addinivalue_line("markers", "integration: end-to-end tests over real Makefiles")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --full is given."""
    if config.getoption("--full"):
        return

    skip_integration = pytest.mark.skip(reason="integration test, use --full to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
