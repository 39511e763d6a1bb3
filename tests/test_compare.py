import logging

import pytest

from serialnum import Serial8, Serial16, Serial32, Serial64


def test_same_value():
    s1 = Serial8(50)
    s2 = Serial8(50)
    assert s1 == s2
    assert not s1 != s2
    assert not s1 < s2
    assert s1 <= s2
    assert not s1 > s2
    assert s1 >= s2
    assert s1 == s1
    assert not s1 < s1
    assert not s1 > s1


def test_non_surprising_order():
    s1 = Serial8(10)
    s2 = Serial8(30)
    assert not s1 == s2
    assert s1 != s2
    assert s1 < s2
    assert s1 <= s2
    assert not s1 > s2
    assert not s1 >= s2
    assert not s2 < s1
    assert not s2 <= s1
    assert s2 > s1
    assert s2 >= s1


def test_wraparound_order():
    s1 = Serial8(10)
    s2 = Serial8(250)
    assert not s1 == s2
    assert s1 != s2
    assert not s1 < s2
    assert not s1 <= s2
    assert s1 > s2
    assert s1 >= s2
    assert s2 < s1
    assert s2 <= s1
    assert not s2 > s1
    assert not s2 >= s1


def test_critical_distance():
    s1 = Serial8(10)
    s2 = Serial8(138)
    assert not s1 == s2
    assert s1 != s2
    assert not s1 < s2
    assert not s1 <= s2
    assert not s1 > s2
    assert not s1 >= s2
    assert not s2 < s1
    assert not s2 <= s1
    assert not s2 > s1
    assert not s2 >= s1


def test_critical_distance_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="serialnum.number"):
        assert not Serial16(0) < Serial16(2**15)
    assert "unordered comparison" in caplog.text


def test_ladder():
    n0, n1, n44, n100, n200, n255 = (Serial8(v) for v in (0, 1, 44, 100, 200, 255))
    for lower, upper in [
        (n0, n1),
        (n0, n44),
        (n0, n100),
        (n44, n100),
        (n100, n200),
        (n200, n255),
        (n255, n0),
        (n255, n100),
        (n200, n0),
        (n200, n44),
    ]:
        assert lower < upper
        assert upper > lower
        assert not upper < lower
        assert not lower > upper


def test_trichotomy():
    values = range(0, 256, 4)
    for a in values:
        for b in values:
            s1, s2 = Serial8(a), Serial8(b)
            assert (s1 < s2) == (s2 > s1)
            assert (s1 <= s2) == (s2 >= s1)
            outcomes = [s1 == s2, s1 < s2, s1 > s2]
            if abs(a - b) == 128:
                assert outcomes == [False, False, False]
                assert s1 != s2
            else:
                assert outcomes.count(True) == 1
            assert (s1 != s2) is not (s1 == s2)


@pytest.mark.parametrize("cls", [Serial16, Serial32, Serial64])
def test_wide_wraparound(cls):
    top = 2**cls.width.bits - 1
    half = cls.width.half
    assert cls(top) < cls(0)
    assert cls(0) > cls(top)
    assert cls(0) < cls(half - 1)
    assert not cls(0) < cls(half)
    assert not cls(0) > cls(half)
    assert cls(0) > cls(half + 1)


def test_plain_int_operands():
    s = Serial8(10)
    assert s == 10
    assert 10 == s
    assert s != 11
    assert 11 != s
    assert s < 30
    assert 30 > s
    assert s > 250
    assert 250 < s
    assert s <= 10
    assert 10 >= s
    assert not s < 138
    assert not 138 > s
    assert not s >= 138
    assert not 138 <= s


def test_plain_int_operands_are_wrapped():
    s = Serial8(10)
    assert s == 266
    assert 266 == s
    assert s == -246
    assert s < 266 + 20
    assert 266 + 20 > s
    assert Serial16(10) != 266


def test_other_widths_are_not_comparable():
    a = Serial8(1)
    b = Serial16(1)
    assert not a == b  # type: ignore[operator]
    assert a != b  # type: ignore[operator]
    with pytest.raises(TypeError):
        a < b  # type: ignore[operator]
    with pytest.raises(TypeError):
        a >= b  # type: ignore[operator]


def test_non_integers_are_not_comparable():
    s = Serial8(1)
    assert s != "1"  # type: ignore[operator]
    with pytest.raises(TypeError):
        s < 1.5  # type: ignore[operator]
