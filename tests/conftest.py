# -*- coding: utf-8 -*-

"""
Pytest configuration and fixtures for rawport tests.
"""
import logging

import pytest

from unittest.mock import Mock
from unittest.mock import patch

# Import all fixtures
from .fixtures.ports import *


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

    config.addinivalue_line(
        "markers",
        "posix_only: tests that only work on POSIX systems"
    )

    config.addinivalue_line(
        "markers",
        "windows_only: tests that only work on Windows"
    )


@pytest.fixture
def rawport_logs(caplog):
    """Capture rawport log records down to DEBUG."""
    caplog.set_level(logging.DEBUG, logger='rawport')
    return caplog


@pytest.fixture
def mock_serial():
    """Mock serial port for testing."""
    with patch('serial.Serial') as mock:
        instance = Mock()
        instance.is_open = True
        instance.read.return_value = b""
        instance.write.return_value = 0
        instance.close.return_value = None
        instance.get_settings.return_value = {'baudrate': 9600}
        mock.return_value = instance
        yield instance
