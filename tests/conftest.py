"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['SORTLINT_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # The runner and CLI log per-file progress
    for logger_name in ['sortlint.engine.runner', 'sortlint.cli']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
