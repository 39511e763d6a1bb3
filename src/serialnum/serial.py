"""
RFC 1982 serial number arithmetic on plain integers.

* https://tools.ietf.org/html/rfc1982

The ordering helpers expect both operands to be already reduced into
``[0, 2 ** bits)``; use :func:`serial_wrap` to bring arbitrary integers
into the domain first.

Pairs exactly ``2 ** (bits - 1)`` apart are left unordered by the RFC.
Here both :func:`serial_lt` and :func:`serial_gt` return False for them,
and so do :func:`serial_le` and :func:`serial_ge`.
"""


def serial_half(bits: int = 32) -> int:
    return 2 ** (bits - 1)


def serial_wrap(value: int, bits: int = 32) -> int:
    """
    Reduces an arbitrary integer into the ``bits``-wide unsigned domain,
    the same way a cast to a fixed-width unsigned type would.
    """
    return value % (2**bits)


def serial_distance(a: int, b: int) -> int:
    return abs(a - b)


def serial_eq(a: int, b: int, bits: int = 32) -> bool:
    return serial_wrap(a, bits) == serial_wrap(b, bits)


def serial_lt(a: int, b: int, bits: int = 32) -> bool:
    half = serial_half(bits)
    return (a < b and (b - a) < half) or (a > b and (a - b) > half)


def serial_gt(a: int, b: int, bits: int = 32) -> bool:
    half = serial_half(bits)
    return (a < b and (b - a) > half) or (a > b and (a - b) < half)


def serial_le(a: int, b: int, bits: int = 32) -> bool:
    return a == b or serial_lt(a, b, bits)


def serial_ge(a: int, b: int, bits: int = 32) -> bool:
    return a == b or serial_gt(a, b, bits)
