import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jvalue.value import (
    FALSE,
    INTEGER_MAX,
    INTEGER_MIN,
    NULL,
    TRUE,
    JsonConstant,
    JsonInteger,
    JsonReal,
    JsonString,
    JsonType,
    boolean,
    equal,
    number_value,
    sprintf,
    string_nocheck,
)


def test_string_length_counts_bytes():
    text = "h\u00e9llo"
    s = JsonString(text)
    assert len(s) == len(text.encode("utf-8"))
    assert s.text() == text
    assert s.type is JsonType.STRING


def test_string_keeps_embedded_nul():
    s = JsonString(b"a\x00b")
    assert len(s) == 3
    assert s.value == b"a\x00b"


def test_string_rejects_invalid_utf8():
    with pytest.raises(ValueError):
        JsonString(b"\xff")


def test_string_rejects_non_text():
    with pytest.raises(TypeError):
        JsonString(5)


def test_string_set_invalid_keeps_old_value():
    s = JsonString("abc")
    with pytest.raises(ValueError):
        s.set(b"\xc0\x80")
    assert s.value == b"abc"


def test_string_set_nocheck_accepts_invalid():
    s = JsonString("abc")
    s.set_nocheck(b"\xff")
    assert s.value == b"\xff"
    assert s.text().encode("utf-8", errors="surrogateescape") == b"\xff"


def test_string_nocheck_function():
    s = string_nocheck(b"\xc0\x80")
    assert s.value == b"\xc0\x80"
    assert len(s) == 2


def test_string_copy_is_independent():
    s = JsonString("abc")
    c = s.copy()
    assert c == s
    c.set("xyz")
    assert s.value == b"abc"
    assert c != s


def test_string_deep_copy_equal():
    s = JsonString("deep")
    assert s.deep_copy() == s


@given(st.text())
def test_string_text_round_trip(text):
    assert JsonString(text).text() == text


def test_integer_set_and_copy():
    i = JsonInteger(7)
    i.set(-3)
    assert i.value == -3
    assert i.copy() == i
    assert i.type is JsonType.INTEGER


def test_integer_limits():
    assert JsonInteger(INTEGER_MAX).value == INTEGER_MAX
    assert JsonInteger(INTEGER_MIN).value == INTEGER_MIN
    with pytest.raises(OverflowError):
        JsonInteger(INTEGER_MAX + 1)
    with pytest.raises(OverflowError):
        JsonInteger(INTEGER_MIN - 1)


def test_integer_rejects_float():
    with pytest.raises(TypeError):
        JsonInteger(1.5)


@given(st.integers(min_value=INTEGER_MIN, max_value=INTEGER_MAX))
def test_integer_round_trip(n):
    assert JsonInteger(n).value == n


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_real_rejects_non_finite(bad):
    with pytest.raises(ValueError):
        JsonReal(bad)


def test_real_set_non_finite_keeps_value():
    r = JsonReal(2.5)
    with pytest.raises(ValueError):
        r.set(math.nan)
    assert r.value == 2.5


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_real_round_trip(x):
    r = JsonReal(x)
    assert r.value == x
    assert r.copy() == r


def test_constants_are_singletons():
    assert JsonConstant(JsonType.TRUE) is TRUE
    assert boolean(1) is TRUE
    assert boolean(0) is FALSE
    assert NULL.copy() is NULL
    assert TRUE.deep_copy() is TRUE


def test_constant_rejects_other_types():
    with pytest.raises(ValueError):
        JsonConstant(JsonType.STRING)


def test_equal_requires_same_type():
    assert not equal(JsonInteger(1), JsonReal(1.0))
    assert not equal(TRUE, FALSE)
    assert equal(JsonString("x"), JsonString("x"))
    assert equal(NULL, NULL)


def test_equal_with_missing_value():
    assert not equal(None, NULL)
    assert not equal(JsonInteger(1), None)


def test_number_value():
    assert number_value(JsonInteger(4)) == 4.0
    assert number_value(JsonReal(1.25)) == 1.25
    assert number_value(JsonString("4")) == 0.0
    assert number_value(None) == 0.0


def test_sprintf_formats():
    assert sprintf("%d-%s", 5, "x").text() == "5-x"
    assert len(sprintf("")) == 0
    assert sprintf("%%").text() == "%"