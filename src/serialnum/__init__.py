from .exceptions import SerialNumberError, WidthError
from .number import (
    Serial8,
    Serial16,
    Serial32,
    Serial64,
    Serial128,
    SerialNumber,
)
from .serial import (
    serial_eq,
    serial_ge,
    serial_gt,
    serial_le,
    serial_lt,
    serial_wrap,
)
from .width import U8, U16, U32, U64, U128, Width

__all__ = (
    "SerialNumber",
    "Serial8",
    "Serial16",
    "Serial32",
    "Serial64",
    "Serial128",
    "Width",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "serial_eq",
    "serial_lt",
    "serial_gt",
    "serial_le",
    "serial_ge",
    "serial_wrap",
    "SerialNumberError",
    "WidthError",
)

__version__ = "1.1.0"
