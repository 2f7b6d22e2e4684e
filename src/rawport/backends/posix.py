# -*- coding: utf-8 -*-

"""
POSIX variant: termios via pyserial's ``serialposix``.

pyserial opens the device non-blocking and waits in ``select()``; the
read timeout is still quantized to termios ``VTIME`` units so the wait
matches what the line discipline itself could express.
"""

import errno
import serial

from .base import SerialBackend
from ..exceptions import DeviceNotFoundError
from ..exceptions import PermissionDeniedError
from ..exceptions import PortBusyError
from ..exceptions import PortOpenError
from ..timeouts import POSIX_MAX_TIMEOUT_MS
from ..timeouts import POSIX_RESOLUTION_MS

_NOT_FOUND = (errno.ENOENT, errno.ENODEV, errno.ENXIO)
_DENIED = (errno.EACCES, errno.EPERM)
# EWOULDBLOCK: the exclusive flock is held by another handle
_BUSY = (errno.EBUSY, errno.EWOULDBLOCK, errno.EAGAIN)


def open_error(port: str, exc: serial.SerialException) -> PortOpenError:
    """Map the errno pyserial carries over from open()/flock()"""
    code = exc.errno
    if code in _NOT_FOUND:
        cls = DeviceNotFoundError
    elif code in _DENIED:
        cls = PermissionDeniedError
    elif code in _BUSY:
        cls = PortBusyError
    else:
        cls = PortOpenError
    return cls(f"could not open port {port!r}: {exc}", code)


class PosixBackend(SerialBackend):
    """Linux, macOS and the BSDs"""

    resolution_ms = POSIX_RESOLUTION_MS
    max_timeout_ms = POSIX_MAX_TIMEOUT_MS

    def open_error(self, port, exc):
        return open_error(port, exc)
