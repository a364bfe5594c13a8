"""Pytest configuration and fixtures for driver-resolver tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of the user's home directory
os.environ.setdefault(
    "DRIVER_RESOLVER_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "driver-resolver-test-logs"),
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees driver_resolver records."""
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("driver_resolver"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value
