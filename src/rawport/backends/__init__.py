# -*- coding: utf-8 -*-

"""
Platform backends. One variant per OS family, picked at runtime.
"""

import os

from .base import SerialBackend
from ..exceptions import PlatformNotSupportedError


def create_backend() -> SerialBackend:
    """Return a fresh backend for the running OS"""
    if os.name == 'posix':
        from .posix import PosixBackend
        return PosixBackend()
    elif os.name == 'nt':
        from .windows import WindowsBackend
        return WindowsBackend()
    else:
        raise PlatformNotSupportedError(
            f'Platform {os.name} not supported for serial ports'
        )


__all__ = ['SerialBackend', 'create_backend']
