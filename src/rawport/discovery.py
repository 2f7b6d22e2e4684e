# -*- coding: utf-8 -*-

"""
Serial port enumeration.
"""

from typing import List

from serial.tools import list_ports as _list_ports


def list_ports() -> List[str]:
    """
    Device names of the serial ports present on this host.

    Names are in the form ``open_port()`` accepts: ``/dev/ttyUSB0`` on
    POSIX, ``COM3`` on Windows.
    """
    return sorted(info.device for info in _list_ports.comports())
