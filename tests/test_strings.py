import pytest

from cubmap.chars import to_upper
from cubmap.strings import (
    memchr,
    memcmp,
    split,
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_pieces_never_contain_separator():
    text = ",a,,bb,,,ccc,"
    pieces = split(text, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(",", "")


def test_split_of_only_separators_is_empty():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_finds_first_occurrence():
    text = "map.cub.cub"
    idx = strchr(text, ".")
    assert text[idx] == "."
    assert "." not in text[:idx]


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last_occurrence():
    text = "map.cub.cub"
    idx = strrchr(text, ".")
    assert text[idx] == "."
    assert "." not in text[idx + 1:]
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strcmp_ordering():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_is_antisymmetric():
    pairs = [("a", "b"), ("hello", "help"), ("", "x"), ("zz", "z")]
    for x, y in pairs:
        assert strcmp(x, y) == -strcmp(y, x)


def test_strcmp_prefix_compares_against_terminator():
    assert strcmp("ab", "abc") == -ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) < 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_extension_check():
    name = "level.cub"
    assert strncmp(name[-4:], ".cub", 5) == 0
    assert strncmp("level.cu", ".cub", 5) != 0 and strncmp("level.cu", ".cub", 5) > 0


def test_strnstr_respects_length():
    haystack = "lorem ipsum dolor"
    idx = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[idx:idx + len("ipsum")] == "ipsum"
    assert strnstr(haystack, "ipsum", idx + len("ipsum")) == idx
    assert strnstr(haystack, "ipsum", idx + len("ipsum") - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim(" keep ", "") == " keep "


def test_substr_basic_and_clamped():
    text = "hello"
    assert substr(text, 1, 3) == text[1:4]
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, 5, 1) == ""
    assert substr(text, 99, 1) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))
    assert strlcpy(src, 0) == ("", len(src))
    assert strlcpy(src, 100) == (src, len(src))


def test_strlcat_appends_within_size():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 5)
    assert result == dst + src[:2]
    assert len(result) == 5 - 1
    assert total == len(dst) + len(src)


def test_strlcat_size_not_larger_than_dst():
    dst, src = "abc", "de"
    assert strlcat(dst, src, 2) == (dst, len(src) + 2)


def test_strmapi_passes_index_and_char():
    seen = []

    def record(i, c):
        seen.append((i, c))
        return to_upper(c)

    assert strmapi("abc", record) == "ABC"
    assert seen == list(enumerate("abc"))


def test_memchr_within_limit():
    data = b"hello"
    idx = memchr(data, ord("l"), len(data))
    assert data[idx] == ord("l")
    assert ord("l") not in data[:idx]
    assert memchr(data, ord("l"), idx) is None


def test_memchr_masks_to_byte_and_accepts_bytes():
    data = b"hello"
    assert memchr(data, ord("e") + 0x100, 5) == memchr(data, b"e", 5)
    with pytest.raises(ValueError):
        memchr(data, b"e", 6)


def test_memcmp_ordering():
    assert memcmp(b"abcx", b"abcy", 3) == 0
    assert memcmp(b"\x00\xff", b"\x00\x01", 2) > 0
    assert memcmp(b"\x00\x01", b"\x00\xff", 2) < 0


def test_memcmp_rejects_overlong_n():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)