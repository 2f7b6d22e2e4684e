# -*- coding: utf-8 -*-

"""
Port settings and the read policy.
"""

from dataclasses import dataclass

from .timeouts import quantize

# Rates every supported OS exposes as a symbolic constant.
# Anything else goes through the custom-rate path.
STANDARD_BAUDRATES = (
    1200,
    2400,
    4800,
    9600,
    19200,
    38400,
    57600,
    115200,
    230400,
)

# Idle reads tolerated by one read() call before it returns short.
DEFAULT_IDLE_RETRIES = 10


@dataclass(frozen=True)
class PortConfig:
    """
    Line settings applied by ``configure()``.

    Only the rate varies; framing is always 8-N-1 on a raw channel
    with the receiver enabled and modem control lines ignored.
    """
    baudrate: int
    bytesize: int = 8
    parity: str = 'N'
    stopbits: int = 1

    @property
    def is_standard(self) -> bool:
        return self.baudrate in STANDARD_BAUDRATES


@dataclass(frozen=True)
class ReadPolicy:
    """
    How long one ``read()`` call may wait for missing bytes.

    Each low-level read waits at most one timeout slice; ``idle_retries``
    empty slices end the call. The product is the worst-case idle wait.
    """
    timeout_ms: int = 0
    idle_retries: int = DEFAULT_IDLE_RETRIES
    resolution_ms: int = 1

    def __post_init__(self):
        if self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {self.timeout_ms}")
        if self.idle_retries < 1:
            raise ValueError(
                f"idle_retries must be >= 1, got {self.idle_retries}"
            )

    @property
    def slice_ms(self) -> int:
        """Timeout actually applied to each low-level read"""
        return quantize(self.timeout_ms, self.resolution_ms)

    @property
    def max_idle_seconds(self) -> float:
        """Upper bound on time one read() spends waiting for silence"""
        return self.idle_retries * self.slice_ms / 1000.0
