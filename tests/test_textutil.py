import pytest

from sigtalk.textutil import (
    split,
    strchr,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_without_separator_keeps_whole():
    assert split("abc", " ") == ["abc"]


def test_split_accepts_code():
    assert split("a,b", ord(",")) == ["a", "b"]


@pytest.mark.parametrize("text", ["a b c", "  x  ", "one", "a  b   c  d"])
def test_split_invariants(text):
    words = split(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("xyxyx", "xy") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_keeps_inner():
    assert strtrim("--a-b--", "-") == "a-b"


def test_substr_middle():
    text = "hello"
    assert substr(text, 1, 3) == text[1:4]


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found():
    assert strnstr("foo bar baz", "bar", 11) == "bar baz"


def test_strnstr_needle_beyond_length():
    assert strnstr("foo bar baz", "bar", 6) is None


def test_strnstr_exact_fit():
    assert strnstr("foo bar baz", "bar", 7) == "bar baz"


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == "abc"


def test_strnstr_both_empty():
    assert strnstr("", "", 5) == ""


def test_strnstr_empty_haystack():
    assert strnstr("", "a", 5) is None


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limited():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_unsigned_bytes():
    assert strncmp(b"\xff", b"\x01", 1) > 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_zero_n():
    assert strncmp("a", "b", 0) == 0


def test_strchr_found():
    assert strchr("hello", "l") == "llo"


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_terminator():
    assert strchr("hello", "\0") == ""
    assert strchr("hello", 0) == ""


def test_strchr_code():
    assert strchr("hello", ord("e")) == "ello"


def test_strrchr_found():
    assert strrchr("hello", "l") == "lo"


def test_strrchr_missing():
    assert strrchr("hello", "q") is None


def test_strrchr_terminator():
    assert strrchr("hello", 0) == ""


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("", "") == ""


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_identity():
    text = "some text"
    assert strmapi(text, lambda i, ch: ch) == text