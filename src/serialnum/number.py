from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    Optional,
    Self,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

import attrs

from .exceptions import WidthError
from .serial import (
    serial_distance,
    serial_gt,
    serial_lt,
    serial_wrap,
)
from .width import U8, U16, U32, U64, U128, Width

log = logging.getLogger(__spec__.name)  # type: ignore[name-defined]

W = TypeVar("W", bound=Width)


@attrs.define(slots=True, eq=False, order=False, repr=False)
class SerialNumber(Generic[W]):
    """
    An unsigned counter living on a ring of ``2 ** W.bits`` values, ordered
    as described in RFC 1982.

    The width is a type parameter, so the type checker refuses comparisons
    between serial numbers of different widths.  Bind it by subclassing::

        class SOASerial(SerialNumber[U32]):
            pass

    Plain integers are accepted wherever a serial number of the same width
    is, but they are first wrapped into the width: ``Serial8(10) == 266``
    holds because ``266 % 256 == 10``.

    Two values exactly ``2 ** (W.bits - 1)`` apart are unordered: ``<``,
    ``>``, ``<=`` and ``>=`` are all False between them while ``!=`` is
    True.

    Only increments are supported.  To add ``k`` to a serial number, use
    ``s.assign(s.value() + k)``; keeping ``k`` below ``2 ** (W.bits - 1)``
    is up to the caller.
    """

    width: ClassVar[Type[Width]]

    _n: int = attrs.field(default=0, validator=attrs.validators.instance_of(int))

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, SerialNumber)):
                continue
            (arg,) = get_args(base)
            if isinstance(arg, TypeVar):
                # still generic, the width is bound further down
                continue
            if not (isinstance(arg, type) and issubclass(arg, Width)):
                raise WidthError(cls.__name__, f"{arg!r} is not a Width")
            cls.width = arg

    def __attrs_post_init__(self) -> None:
        width = getattr(type(self), "width", None)
        if width is None:
            raise WidthError(type(self).__name__)
        self._n = serial_wrap(self._n, width.bits)

    def value(self) -> int:
        return self._n

    def assign(self, value: Union[SerialNumber[W], int]) -> Self:
        n = self._coerce(value)
        if n is None:
            raise TypeError(f"cannot assign {value!r} to {type(self).__name__}")
        self._n = n
        return self

    def increment(self) -> Self:
        """
        Prefix increment (``++s``): advances the value by one in place,
        wrapping to zero after the largest value.
        """
        if self._n == self.width.mask:
            log.debug("%s wrapped around", type(self).__name__)
        self._n = serial_wrap(self._n + 1, self.width.bits)
        return self

    def post_increment(self) -> Self:
        """
        Postfix increment (``s++``): advances the value by one in place and
        returns a new instance holding the previous value.
        """
        prev = type(self)(self._n)
        self.increment()
        return prev

    def _coerce(self, other: object) -> Optional[int]:
        if isinstance(other, SerialNumber):
            if other.width is not self.width:
                return None
            return other._n
        if isinstance(other, int):
            return serial_wrap(other, self.width.bits)
        return None

    def _order(self, rhs: int, op: Callable[[int, int, int], bool]) -> bool:
        if serial_distance(self._n, rhs) == self.width.half:
            log.debug("unordered comparison: %r vs %d", self, rhs)
            return False
        return op(self._n, rhs, self.width.bits)

    def __eq__(self, other: Union[SerialNumber[W], int]) -> bool:  # type: ignore[override]
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n == rhs

    def __ne__(self, other: Union[SerialNumber[W], int]) -> bool:  # type: ignore[override]
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n != rhs

    def __lt__(self, other: Union[SerialNumber[W], int]) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs, serial_lt)

    def __gt__(self, other: Union[SerialNumber[W], int]) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs, serial_gt)

    def __le__(self, other: Union[SerialNumber[W], int]) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n == rhs or self._order(rhs, serial_lt)

    def __ge__(self, other: Union[SerialNumber[W], int]) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n == rhs or self._order(rhs, serial_gt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._n})"


class Serial8(SerialNumber[U8]):
    __slots__ = ()


class Serial16(SerialNumber[U16]):
    __slots__ = ()


class Serial32(SerialNumber[U32]):
    __slots__ = ()


class Serial64(SerialNumber[U64]):
    __slots__ = ()


class Serial128(SerialNumber[U128]):
    __slots__ = ()
