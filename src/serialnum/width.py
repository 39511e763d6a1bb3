"""
Bit-width marker types used to parametrize :class:`~serialnum.number.SerialNumber`.

A width is never instantiated; the class itself is the type argument, so
the bit-width becomes part of the static type of a serial number::

    class Seq(SerialNumber[U32]):
        pass

Additional widths are declared by subclassing :class:`Width`::

    class U24(Width):
        bits = 24
"""

from __future__ import annotations

from typing import ClassVar

from .exceptions import WidthError


class Width:
    bits: ClassVar[int]
    mask: ClassVar[int]
    half: ClassVar[int]

    __slots__ = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        bits = cls.__dict__.get("bits")
        if bits is None:
            raise WidthError(cls.__name__, "a width must declare its bits")
        if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
            raise WidthError(cls.__name__, f"bits must be a positive int, not {bits!r}")
        cls.mask = 2**bits - 1
        cls.half = 2 ** (bits - 1)

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a width marker and cannot be instantiated")


class U8(Width):
    bits = 8


class U16(Width):
    bits = 16


class U32(Width):
    bits = 32


class U64(Width):
    bits = 64


class U128(Width):
    bits = 128
