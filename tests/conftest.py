"""Root pytest configuration for test discovery and auto-skip behavior.

All tests stay visible to the test explorer; PostgreSQL integration tests
are skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── finplan/
    │   ├── unit/          # Fast, isolated tests (domain, application, API)
    │   ├── persistence/   # Repository tests on a temporary SQLite file
    │   └── integration/   # Repository tests on Testcontainers PostgreSQL
    └── shared/            # Shared fixtures and factories

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from finplan_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load test overrides if present, same files as local development
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

TRUTHY = ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests against Testcontainers PostgreSQL (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_all = config.getoption("--run-all") or (
        os.environ.get("RUN_ALL_TESTS", "").lower() in TRUTHY
    )
    if run_all:
        return

    run_integration = config.getoption("--run-integration") or (
        os.environ.get("RUN_INTEGRATION", "").lower() in TRUTHY
    )
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
