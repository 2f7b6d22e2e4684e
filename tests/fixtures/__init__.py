"""
Test fixtures for rawport testing.

Provides fake backends and pseudo-terminal pairs for testing without
hardware.
"""

from .ports import (
    pty_pair,
    scripted_backend,
    silent_backend,
    standard_baudrate,
)

__all__ = [
    'pty_pair',
    'scripted_backend',
    'silent_backend',
    'standard_baudrate',
]
