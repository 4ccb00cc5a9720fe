import pytest

from fillit.util.build import (
    strcat,
    strcpy,
    strdup,
    strjoin,
    strjoinfree,
    strlcat,
    strncat,
    strncpy,
    strnew,
    strsub,
    strsubfree,
)


@pytest.mark.parametrize("s1,s2", [("hello", "world"), ("", "abc"), ("abc", ""), ("", "")])
def test_strcat_concatenates(s1, s2):
    result = strcat(s1, s2)
    assert result == s1 + s2
    assert len(result) == len(s1) + len(s2)


def test_strcat_stops_at_nul():
    assert strcat("ab\0zz", "cd\0yy") == "abcd"


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_strncat_limits_appended_part(n):
    result = strncat("abc", "defgh", n)
    assert result.startswith("abc")
    assert len(result) == 3 + min(n, 5)
    assert "defgh".startswith(result[3:])


def test_strncat_negative_raises():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


def test_strlcat_pinned_example():
    assert strlcat("abc", "defgh", 6) == ("abcde", 8)


@pytest.mark.parametrize("size", [4, 5, 7, 9, 20])
def test_strlcat_fits_buffer(size):
    dst, src = "abc", "defgh"
    result, total = strlcat(dst, src, size)
    assert total == len(dst) + len(src)
    assert result.startswith(dst)
    assert len(result) <= size - 1
    assert src.startswith(result[len(dst):])
    if size > len(dst) + len(src):
        assert result == dst + src


@pytest.mark.parametrize("size", [0, 1, 3])
def test_strlcat_when_dst_fills_buffer(size):
    result, total = strlcat("abc", "defgh", size)
    assert result == "abc"
    assert total == len("defgh") + size


def test_strcpy_and_strdup_copy():
    assert strcpy("fillit") == "fillit"
    assert strdup("tetri") == "tetri"
    assert strdup("ab\0cd") == "ab"


@pytest.mark.parametrize("length", [0, 2, 5, 8])
def test_strncpy_exact_length(length):
    result = strncpy("hello", length)
    assert len(result) == length
    assert result.rstrip("\0") == "hello"[:length]


def test_strncpy_pads_with_nul():
    assert strncpy("ab", 4) == "ab\0\0"


@pytest.mark.parametrize("size", [0, 1, 16])
def test_strnew_is_cleared(size):
    buffer = strnew(size)
    assert len(buffer) == size
    assert set(buffer) <= {"\0"}


def test_strnew_negative_raises():
    with pytest.raises(ValueError):
        strnew(-1)


def test_strjoin_and_none():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None
    assert strjoinfree("foo", "bar") == strjoin("foo", "bar")
    assert strjoinfree(None, "x") is None


@pytest.mark.parametrize("start,length", [(0, 0), (0, 5), (1, 3), (4, 1), (5, 0)])
def test_strsub_slices(start, length):
    text = "abcde"
    result = strsub(text, start, length)
    assert result == text[start:start + length]
    assert strsubfree(text, start, length) == result


def test_strsub_stops_at_end():
    assert strsub("abc", 1, 10) == "bc"


def test_strsub_none():
    assert strsub(None, 0, 1) is None
    assert strsubfree(None, 0, 1) is None


@pytest.mark.parametrize("start,length", [(4, 0), (-1, 1), (0, -1)])
def test_strsub_bad_range_raises(start, length):
    with pytest.raises(ValueError):
        strsub("abc", start, length)