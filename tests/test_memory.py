import pytest

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_truncates_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, "x", 0)
    assert buf == b"abc"


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_worked_example():
    buf = bytearray(b"coucou")
    bzero(buf, 3)
    assert buf == b"\0\0\0cou"


def test_memcpy_worked_example():
    dest = bytearray(b"bonjour")
    result = memcpy(dest, b"coucou", 3)
    assert result is dest
    assert dest == b"coujour"


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_non_overlapping():
    dest = bytearray(b"bonjour toi")
    memmove(dest, b"coucou", 6)
    assert dest[:6] == b"coucou"
    assert dest[6:] == b"r toi"


def test_memmove_overlap_forward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 5)
    assert result is dest
    assert bytes(result[:5]) == original[:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_overlap_backward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[3:], 5)
    assert result is view
    assert bytes(result[:5]) == original[3:]
    assert buf[5:] == original[5:]


def test_memchr_finds_first():
    data = b"Hello World!"
    index = memchr(data, "W", len(data))
    assert data[index] == ord("W")
    assert b"W" not in data[:index]


def test_memchr_respects_count():
    data = b"Hello World!"
    assert memchr(data, "W", 3) is None
    assert memchr(data, "o", len(data)) == data.index(b"o")


def test_memchr_missing():
    assert memchr(b"abc", "z", 3) is None


def test_memcmp_sign_and_antisymmetry():
    a, b = b"Hello World!", b"Hallo World!"
    forward = memcmp(a, b, 5)
    assert forward > 0
    assert memcmp(b, a, 5) == -forward


def test_memcmp_equal_prefix():
    assert memcmp(b"Hello World!", b"Hallo World!", 1) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x00", 1) > 0


def test_calloc_is_zeroed():
    buf = calloc(5, 4)
    assert len(buf) == 20
    assert not any(buf)
    buf[0] = 1
    assert buf[0] == 1


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)