# -*- coding: utf-8 -*-

"""
Read timeout translation.

A caller asks for a read timeout in milliseconds. The two OS families
express it differently:

- POSIX termios: ``VMIN``/``VTIME`` in the line settings. With
  ``VMIN = 0`` a read returns as soon as any byte arrives, or with zero
  bytes once ``VTIME`` tenths of a second pass without input.
- Windows COMM API: a ``COMMTIMEOUTS`` structure with an inter-character
  interval and a total timeout made of a constant plus a per-byte
  multiplier.

Both are mapped onto the same observable behavior: a read waits for the
first idle gap of roughly ``timeout_ms`` or until the buffer fills,
whichever comes first. ``0`` means return at once with whatever is
already buffered, possibly nothing.

A positive timeout is always rounded up to the platform resolution so
it can never turn into a non-blocking read.
"""

from collections import namedtuple

from .exceptions import ConfigurationRejectedError

POSIX_RESOLUTION_MS = 100
POSIX_MAX_TIMEOUT_MS = 255 * POSIX_RESOLUTION_MS

WINDOWS_RESOLUTION_MS = 1
MAXDWORD = 0xFFFFFFFF
WINDOWS_MAX_TIMEOUT_MS = MAXDWORD - 1

SerialTimeouts = namedtuple('SerialTimeouts', ['timeout', 'inter_byte_timeout'])


def _check(timeout_ms: int):
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must be >= 0, got {timeout_ms}")


def quantize(timeout_ms: int, resolution_ms: int) -> int:
    """
    Round ``timeout_ms`` up to a multiple of ``resolution_ms``.

    Zero stays zero; any positive value becomes at least one unit.
    """
    _check(timeout_ms)
    if resolution_ms <= 0:
        raise ValueError(f"resolution_ms must be > 0, got {resolution_ms}")
    units = -(-timeout_ms // resolution_ms)
    return units * resolution_ms


def serial_timeouts_for(timeout_ms: int, resolution_ms: int,
                        max_ms: int) -> SerialTimeouts:
    """
    pyserial ``timeout``/``inter_byte_timeout`` pair (seconds) for a
    millisecond timeout.

    Zero gives ``timeout=0``: pyserial turns that into ``VTIME=0`` reads
    and the MAXDWORD-interval COMMTIMEOUTS. A positive value bounds both
    the wait for the first byte and the gap between bytes.

    Raises:
        ConfigurationRejectedError: timeout does not fit the OS timer
    """
    ms = quantize(timeout_ms, resolution_ms)
    if ms > max_ms:
        raise ConfigurationRejectedError(
            f"Read timeout {timeout_ms} ms exceeds the platform maximum of "
            f"{max_ms} ms"
        )
    if ms == 0:
        return SerialTimeouts(0, None)
    seconds = ms / 1000
    return SerialTimeouts(seconds, seconds)
