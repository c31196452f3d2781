from hypothesis import given, strategies as st
import pytest

from jvalue.strbuffer import StrBuffer


@given(st.lists(st.binary(max_size=50), max_size=20))
def test_append_concatenates(chunks):
    buf = StrBuffer()
    for chunk in chunks:
        buf.append_bytes(chunk)
    joined = b"".join(chunks)
    assert buf.value() == joined
    assert len(buf) == len(joined)


def test_append_byte_and_pop():
    buf = StrBuffer()
    buf.append_bytes(b"ab")
    buf.append_byte(ord("c"))
    assert buf.value() == b"abc"
    assert buf.pop() == b"c"
    assert buf.value() == b"ab"
    assert len(buf) == 2


def test_pop_empty_returns_empty():
    buf = StrBuffer()
    assert buf.pop() == b""
    assert len(buf) == 0


def test_append_byte_out_of_range():
    buf = StrBuffer()
    with pytest.raises(ValueError):
        buf.append_byte(256)


def test_clear():
    buf = StrBuffer()
    buf.append_bytes(b"hello")
    buf.clear()
    assert buf.value() == b""
    assert len(buf) == 0


def test_steal_value_empties_buffer():
    buf = StrBuffer()
    buf.append_bytes(b"data")
    assert buf.steal_value() == b"data"
    assert len(buf) == 0


@given(st.binary(max_size=100))
def test_steal_value_with_eol(data):
    buf = StrBuffer()
    buf.append_bytes(data)
    stolen = buf.steal_value(eol=True)
    assert stolen == data + b"\n"
    assert buf.value() == b""