# -*- coding: utf-8 -*-

"""
SerialPort: the handle callers hold, and the bounded-retry read.
"""

import enum
import logging

from dataclasses import replace
from typing import Optional

from .backends import SerialBackend
from .backends import create_backend
from .config import DEFAULT_IDLE_RETRIES
from .config import PortConfig
from .config import ReadPolicy
from .exceptions import ConfigurationRejectedError
from .exceptions import PortClosedError
from .exceptions import PortOpenError
from .exceptions import RawPortError

log = logging.getLogger('rawport.port')


class PortState(enum.Enum):
    UNOPENED = 'unopened'
    OPEN = 'open'
    CLOSED = 'closed'


class SerialPort:
    """
    Exclusive owner of one serial device.

    Lifecycle: ``UNOPENED -> OPEN -> CLOSED``. A closed port stays closed;
    open a new ``SerialPort`` to use the device again.

    Call ``configure()`` and ``set_read_timeout()`` before doing I/O.
    Instances are not thread-safe; serialize access from the caller.

    Example:
        >>> with open_port('/dev/ttyUSB0', 115200, timeout_ms=100) as port:
        ...     port.write(b'\\x5a\\xa6')
        ...     reply = port.read(2)
    """

    def __init__(
            self,
            port: Optional[str] = None,
            *,
            idle_retries: int = DEFAULT_IDLE_RETRIES,
            exclusive: bool = True,
            backend: Optional[SerialBackend] = None
        ):
        self._port = port
        self._exclusive = exclusive
        self._backend = backend if backend is not None else create_backend()
        self._state = PortState.UNOPENED
        self._config: Optional[PortConfig] = None
        self._policy = ReadPolicy(
            timeout_ms=0,
            idle_retries=idle_retries,
            resolution_ms=self._backend.resolution_ms
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(port={self._port!r}, "
            f"state={self._state.value}, baudrate={self.baudrate}, "
            f"timeout_ms={self.timeout_ms}, idle_retries={self.idle_retries})"
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def port(self) -> Optional[str]:
        return self._port

    @property
    def state(self) -> PortState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is PortState.OPEN

    @property
    def baudrate(self) -> Optional[int]:
        """Rate applied by the last successful configure(), if any"""
        return self._config.baudrate if self._config else None

    @property
    def timeout_ms(self) -> int:
        """Read timeout as requested by the caller"""
        return self._policy.timeout_ms

    @property
    def idle_retries(self) -> int:
        """Empty low-level reads one read() call tolerates"""
        return self._policy.idle_retries

    @idle_retries.setter
    def idle_retries(self, value: int):
        self._policy = replace(self._policy, idle_retries=value)

    @property
    def read_bound(self) -> float:
        """
        Worst-case seconds one read() waits for data that never comes.

        Equal to ``idle_retries`` times the quantized timeout slice.
        """
        return self._policy.max_idle_seconds

    def _ensure_open(self):
        if self._state is not PortState.OPEN:
            raise PortClosedError(
                f"port {self._port!r} is {self._state.value}"
            )

    def open(self, port: Optional[str] = None) -> None:
        """
        Open the device.

        Raises:
            DeviceNotFoundError: no such device
            PermissionDeniedError: access refused by the OS
            PortBusyError: device held by another handle or process
            PortOpenError: any other failure, or already open
            PortClosedError: this handle was closed before
        """
        if self._state is PortState.CLOSED:
            raise PortClosedError(f"port {self._port!r} was closed")
        if self._state is PortState.OPEN:
            raise PortOpenError(f"port {self._port!r} is already open")

        if port is not None:
            self._port = port
        if not self._port:
            raise PortOpenError("no port specified")

        try:
            self._backend.open(self._port, exclusive=self._exclusive)
        except PortOpenError as e:
            log.warning("Could not open serial port %s: %s", self._port, e)
            raise

        self._state = PortState.OPEN

    def close(self) -> None:
        """Release the device. Safe to call any number of times."""
        if self._state is PortState.OPEN:
            try:
                self._backend.close()
            except (OSError, RawPortError) as e:
                log.debug("Error closing serial port %s: %s", self._port, e)
        self._state = PortState.CLOSED

    def configure(self, baudrate: int) -> None:
        """
        Set the baud rate and 8-N-1 raw framing.

        Rates outside ``STANDARD_BAUDRATES`` go through the OS custom-rate
        call. A refused rate leaves the line at its previous settings.

        Raises:
            ConfigurationRejectedError: rate invalid or refused by the OS
            PortClosedError: port not open
        """
        self._ensure_open()
        if isinstance(baudrate, bool) or not isinstance(baudrate, int):
            raise ConfigurationRejectedError(
                f"baud rate must be an integer, got {baudrate!r}"
            )
        if baudrate <= 0:
            raise ConfigurationRejectedError(
                f"baud rate must be positive, got {baudrate}"
            )
        config = PortConfig(baudrate=baudrate)
        self._backend.configure(config)
        self._config = config

    def set_read_timeout(self, timeout_ms: int) -> None:
        """
        Set how long each low-level read waits for an idle line.

        ``0`` makes reads return immediately with whatever is buffered.
        Positive values are rounded up to the OS timer resolution.

        Raises:
            ValueError: negative timeout
            ConfigurationRejectedError: timeout refused by the OS
            PortClosedError: port not open
        """
        self._ensure_open()
        policy = replace(self._policy, timeout_ms=timeout_ms)
        self._backend.set_read_timeout(timeout_ms)
        self._policy = policy

    def write(self, data: bytes) -> int:
        """
        Hand ``data`` to the OS once.

        Returns the number of bytes accepted, which may be less than
        ``len(data)``. Resubmitting the remainder is up to the caller.
        """
        self._ensure_open()
        if not data:
            return 0
        return self._backend.write(data)

    def read(self, size: int) -> bytes:
        """
        Read up to ``size`` bytes.

        Keeps reading until ``size`` bytes arrived or ``idle_retries``
        low-level reads came back empty. A short result is not an error.

        Raises:
            PortIOError: the OS reported a read failure
            PortClosedError: port not open
        """
        self._ensure_open()
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")

        data = bytearray()
        idle = 0
        while len(data) < size:
            chunk = self._backend.read(size - len(data))
            if not chunk:
                idle += 1
                if idle >= self._policy.idle_retries:
                    break
                continue
            data += chunk
        return bytes(data)


def open_port(
    port: str,
    baudrate: Optional[int] = None,
    *,
    timeout_ms: Optional[int] = None,
    idle_retries: int = DEFAULT_IDLE_RETRIES,
    exclusive: bool = True,
    backend: Optional[SerialBackend] = None
) -> SerialPort:
    """
    Open a serial port and optionally configure it in one step.

    Args:
        port: Device name (e.g., '/dev/ttyUSB0' or 'COM3')
        baudrate: Rate to configure (default: leave line settings alone)
        timeout_ms: Read timeout to apply (default: leave unset)
        idle_retries: Empty reads tolerated per read() (default: 10)
        exclusive: Lock the device against other openers on POSIX
        backend: Backend instance (default: one for the running OS)

    Returns:
        An open SerialPort

    Raises:
        PortOpenError: If the port cannot be opened
        ConfigurationRejectedError: If rate or timeout is refused;
            the port is closed again before raising
    """
    serial_port = SerialPort(
        port,
        idle_retries=idle_retries,
        exclusive=exclusive,
        backend=backend
    )
    serial_port.open()
    try:
        if baudrate is not None:
            serial_port.configure(baudrate)
        if timeout_ms is not None:
            serial_port.set_read_timeout(timeout_ms)
    except (RawPortError, ValueError):
        serial_port.close()
        raise
    return serial_port


# Convenient alias
open_serial = open_port
