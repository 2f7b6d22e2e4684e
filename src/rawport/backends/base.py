# -*- coding: utf-8 -*-

"""
Backend shared by every platform: a pyserial ``Serial`` instance.

pyserial owns the OS work (device open and locking, raw 8-N-1 line
settings, symbolic and custom rates, VTIME/COMMTIMEOUTS). The platform
variants only differ in device naming, how open failures are reported,
and the timer resolution the read timeout is quantized to.
"""

import serial

from typing import Optional

from ..config import PortConfig
from ..exceptions import ConfigurationRejectedError
from ..exceptions import PortClosedError
from ..exceptions import PortIOError
from ..exceptions import PortOpenError
from ..timeouts import serial_timeouts_for

# What pyserial raises when it refuses line settings
_CONFIG_ERRORS = (ValueError, NotImplementedError, serial.SerialException)


class SerialBackend:
    """
    The six primitives a serial port needs from the OS.

    A backend owns at most one device. It does no retrying; lifecycle
    rules and the bounded read live in ``SerialPort``.
    """

    #: Granularity of the OS read timer, in milliseconds
    resolution_ms = 1
    #: Largest read timeout the OS timer can hold, in milliseconds
    max_timeout_ms = 0xFFFFFFFE

    def __init__(self):
        self._serial: Optional[serial.Serial] = None

    @property
    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def device_name(self, port: str) -> str:
        """Name handed to the OS for ``port``"""
        return port

    def open_error(self, port: str, exc: serial.SerialException) -> PortOpenError:
        """Translate a pyserial open failure"""
        return PortOpenError(f"Failed to open serial port: {exc}", exc.errno)

    def _require(self) -> serial.Serial:
        if self._serial is None:
            raise PortClosedError("port is not open")
        return self._serial

    def open(self, port: str, exclusive: bool = True) -> None:
        """
        Acquire the device.

        pyserial applies its default line settings (9600 8-N-1, no flow
        control) while opening; reads start out non-blocking and writes
        are handed to the OS once.

        Raises:
            DeviceNotFoundError, PermissionDeniedError, PortBusyError,
            PortOpenError
        """
        try:
            self._serial = serial.Serial(
                port=self.device_name(port),
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=0,
                write_timeout=0,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
                exclusive=exclusive
            )
        except serial.SerialException as e:
            raise self.open_error(port, e) from e

    def close(self) -> None:
        """Release the device. May raise; the caller swallows it."""
        ser, self._serial = self._serial, None
        if ser is not None:
            ser.close()

    def configure(self, config: PortConfig) -> None:
        """
        Apply rate and 8-N-1 raw framing.

        A refused rate puts the previous settings back before raising,
        so the line keeps running at what the handle last reported.

        Raises:
            ConfigurationRejectedError
        """
        ser = self._require()
        previous = ser.get_settings()
        try:
            ser.apply_settings({
                'baudrate': config.baudrate,
                'bytesize': serial.EIGHTBITS,
                'parity': serial.PARITY_NONE,
                'stopbits': serial.STOPBITS_ONE,
                'xonxoff': False,
                'rtscts': False,
                'dsrdtr': False,
            })
        except _CONFIG_ERRORS as e:
            self._restore(previous)
            raise ConfigurationRejectedError(
                f"baud rate {config.baudrate} rejected: {e}",
                getattr(e, 'errno', None)
            ) from e

    def _restore(self, settings: dict):
        try:
            self._require().apply_settings(settings)
        except _CONFIG_ERRORS as e:
            raise ConfigurationRejectedError(
                f"could not restore previous line settings: {e}",
                getattr(e, 'errno', None)
            ) from e

    def set_read_timeout(self, timeout_ms: int) -> None:
        """
        Apply the translated read timeout.

        Raises:
            ConfigurationRejectedError
        """
        values = serial_timeouts_for(
            timeout_ms, self.resolution_ms, self.max_timeout_ms
        )
        ser = self._require()
        previous = ser.get_settings()
        try:
            ser.timeout = values.timeout
            ser.inter_byte_timeout = values.inter_byte_timeout
        except _CONFIG_ERRORS as e:
            self._restore(previous)
            raise ConfigurationRejectedError(
                f"read timeout {timeout_ms} ms rejected: {e}",
                getattr(e, 'errno', None)
            ) from e

    def read(self, size: int) -> bytes:
        """
        One timed read of at most ``size`` bytes.

        Returns ``b''`` when the timeout slice passed without data.

        Raises:
            PortIOError
        """
        try:
            return self._require().read(size)
        except serial.SerialException as e:
            raise PortIOError(f"read failed: {e}", e.errno) from e

    def write(self, data: bytes) -> int:
        """
        One OS write; returns the count actually accepted.

        Raises:
            PortIOError
        """
        try:
            return self._require().write(data)
        except serial.SerialException as e:
            raise PortIOError(f"write failed: {e}", e.errno) from e
