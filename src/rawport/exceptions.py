# -*- coding: utf-8 -*-

"""
rawport exceptions
"""

from typing import Optional


class RawPortError(Exception):
    """Base exception for all rawport errors"""

    def __init__(self, message: str = '', errno: Optional[int] = None):
        super().__init__(message)
        self.errno = errno


class PortOpenError(RawPortError):
    """Failed to open serial port"""
    pass

class DeviceNotFoundError(PortOpenError):
    """Serial device does not exist"""
    pass

class PermissionDeniedError(PortOpenError):
    """Not allowed to open serial device"""
    pass

class PortBusyError(PortOpenError):
    """Serial device is held by someone else"""
    pass

class ConfigurationRejectedError(RawPortError):
    """The OS refused the requested line settings or read timeout"""
    pass

class PortIOError(RawPortError):
    """OS-level failure while reading or writing"""
    pass

class PortClosedError(RawPortError):
    """Operation attempted on a port that is not open"""
    pass

class PlatformNotSupportedError(RawPortError):
    """No serial backend for this platform"""
    pass
