# -*- coding: utf-8 -*-

"""
rawport - Synchronous raw serial port access for POSIX and Windows

Features:
- One contract over termios and the Windows COMM API
- Millisecond read timeouts, rounded up to what the OS can express
- Bounded reads: never block longer than idle_retries x timeout slice
- Standard and custom baud rates, fixed 8-N-1 raw framing
"""

from .port import SerialPort
from .port import PortState
from .port import open_port
from .port import open_serial

from .config import PortConfig
from .config import ReadPolicy
from .config import STANDARD_BAUDRATES
from .config import DEFAULT_IDLE_RETRIES

from .discovery import list_ports
from .backends.windows import normalize_port_name

from .exceptions import RawPortError
from .exceptions import PortOpenError
from .exceptions import DeviceNotFoundError
from .exceptions import PermissionDeniedError
from .exceptions import PortBusyError
from .exceptions import ConfigurationRejectedError
from .exceptions import PortIOError
from .exceptions import PortClosedError
from .exceptions import PlatformNotSupportedError

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Handle
    'SerialPort',
    'PortState',
    'open_port',
    'open_serial',
    'list_ports',
    'normalize_port_name',

    # Settings
    'PortConfig',
    'ReadPolicy',
    'STANDARD_BAUDRATES',
    'DEFAULT_IDLE_RETRIES',

    # Exceptions
    'RawPortError',
    'PortOpenError',
    'DeviceNotFoundError',
    'PermissionDeniedError',
    'PortBusyError',
    'ConfigurationRejectedError',
    'PortIOError',
    'PortClosedError',
    'PlatformNotSupportedError',
]
