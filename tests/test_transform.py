import pytest

from libft.transform import itoa, split, strjoin, strmapi, striteri, strtrim, substr


def _alternate_case(i, c):
    return c.upper() if i % 2 == 0 else c.lower()


def test_substr_start_beyond_end_is_empty():
    assert substr("hola", 4294967295, 0) == ""


@pytest.mark.parametrize("s", ["hello world", "", "abc"])
@pytest.mark.parametrize("start", [0, 1, 3, 20])
@pytest.mark.parametrize("length", [0, 2, 100])
def test_substr_is_within_source(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    if result:
        assert s.find(result, start) == start


def test_substr_clamps_to_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_none_and_negative():
    assert substr(None, 0, 3) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_substr_bytes_stays_bytes():
    assert substr(b"abcdef", 0, 3) == b"abc"


def test_strjoin_source_example():
    assert strjoin("coucou je ", "m'appel Nathan") == "coucou je m'appel Nathan"


def test_strjoin_length_and_mismatch():
    joined = strjoin(b"ab", b"cde")
    assert joined == b"abcde"
    assert len(joined) == 5
    with pytest.raises(TypeError):
        strjoin("ab", b"cd")


def test_strtrim_source_example_untouched():
    s = "lorem \n ipsum \t dolor \n sit \t amet"
    assert strtrim(s, " ") == s


def test_strtrim_both_ends():
    assert strtrim("  xhix  ", " x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"


def test_split_source_example():
    assert split("Hello World! I am a student", " ") == [
        "Hello", "World!", "I", "am", "a", "student",
    ]


@pytest.mark.parametrize("s", [",,a,,b,", "", ",,,", "one", "x,y,z"])
def test_split_words_invariants(s):
    words = split(s, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == s.replace(",", "")


def test_split_nul_separator_and_none():
    assert split("abc", "\0") == ["abc"]
    assert split("", 0) == []
    assert split(None, " ") is None


def test_split_bytes():
    assert split(b"a b", " ") == [b"a", b"b"]


@pytest.mark.parametrize("n", [0, 7, -1, 25466, -214748368, 2147483647, -2147483648])
def test_itoa_round_trips(n):
    assert int(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_strmapi_source_example():
    assert strmapi("coucou je suis nathan", _alternate_case) == "CoUcOu jE SuIs nAtHaN"


def test_strmapi_passes_indices_and_handles_none():
    assert strmapi("abc", lambda i, c: str(i)) == "012"
    assert strmapi(None, _alternate_case) is None
    assert strmapi("abc", None) is None


def test_strmapi_bytes():
    assert strmapi(b"abc", lambda i, b: b - 32) == b"ABC"


def test_striteri_modifies_in_place():
    buf = bytearray(b"coucou C'est moi Nathan")

    def transform(i, cell):
        ch = chr(cell[0])
        cell[0] = ord(ch.upper() if i % 2 == 0 else ch.lower())

    striteri(buf, transform)
    assert buf == bytearray(strmapi("coucou C'est moi Nathan", _alternate_case).encode())


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    seen = []
    striteri(buf, lambda i, cell: seen.append(i))
    assert seen == [0, 1]


def test_striteri_none_leaves_buffer():
    buf = bytearray(b"abc")
    striteri(buf, None)
    assert buf == bytearray(b"abc")
    with pytest.raises(TypeError):
        striteri("abc", lambda i, cell: None)