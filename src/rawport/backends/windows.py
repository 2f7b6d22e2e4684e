# -*- coding: utf-8 -*-

"""
Windows variant: COMM API via pyserial's ``serialwin32``.
"""

import serial

from .base import SerialBackend
from ..exceptions import DeviceNotFoundError
from ..exceptions import PortBusyError
from ..exceptions import PortOpenError
from ..timeouts import WINDOWS_MAX_TIMEOUT_MS
from ..timeouts import WINDOWS_RESOLUTION_MS

DEVICE_PREFIX = '\\\\.\\'


def normalize_port_name(port: str) -> str:
    """
    Device path for a COM port name.

    ``COM10`` and above are only reachable through the ``\\\\.\\``
    namespace; it works for ``COM1``-``COM9`` too. Names already starting
    with a backslash are passed through.
    """
    if port.startswith('\\'):
        return port
    return DEVICE_PREFIX + port


def open_error(port: str, exc: serial.SerialException) -> PortOpenError:
    """
    Map a pyserial open failure.

    serialwin32 reports ``CreateFile`` failures as text holding the
    ``WinError`` repr, without an errno.
    """
    text = str(exc)
    if 'FileNotFoundError' in text:
        cls = DeviceNotFoundError
    elif 'PermissionError' in text:
        # COM ports are opened with share mode 0: "access denied" means
        # another handle holds the port.
        cls = PortBusyError
    else:
        cls = PortOpenError
    return cls(f"could not open port {port!r}: {exc}", exc.errno)


class WindowsBackend(SerialBackend):
    """kernel32 COMM API"""

    resolution_ms = WINDOWS_RESOLUTION_MS
    max_timeout_ms = WINDOWS_MAX_TIMEOUT_MS

    def device_name(self, port):
        return normalize_port_name(port)

    def open_error(self, port, exc):
        return open_error(port, exc)
