import pytest

from sketchpad.strutil import str_to_int, str_to_word_array, strcmp, strncpy


@pytest.mark.parametrize(
    "s1, s2",
    [("abc", "abc"), (".png", ".png"), ("", "anything"), ("abc", "abcdef")],
)
def test_strcmp_equal_over_common_length(s1, s2):
    assert strcmp(s1, s2) == 0
    assert strcmp(s2, s1) == 0


@pytest.mark.parametrize("s1, s2", [("abc", "abd"), (".jpg", ".png"), ("x", "y")])
def test_strcmp_mismatch(s1, s2):
    assert strcmp(s1, s2) == -1


def test_strcmp_stops_at_nul():
    assert strcmp("ab\0x", "ab\0y") == 0


def test_str_to_int_plain_digits():
    assert str_to_int("123") == 123


def test_str_to_int_sign_is_skipped_not_applied():
    assert str_to_int("-42") == 42
    assert str_to_int("+7") == 7


def test_str_to_int_stops_at_first_non_digit():
    assert str_to_int("12abc") == 12
    assert str_to_int("abc") == 0
    assert str_to_int("") == 0


def test_str_to_int_wraps_to_32_bits():
    assert str_to_int(str(2**32 + 5)) == str_to_int("5")


def test_str_to_word_array_splits_on_spaces():
    assert str_to_word_array("hello world  foo") == ["hello", "world", "foo"]


def test_str_to_word_array_separators():
    assert str_to_word_array("a!b\tc\nd") == ["a", "b", "c", "d"]
    assert str_to_word_array("caf\u00e9 bar") == ["caf", "bar"]


def test_str_to_word_array_empty():
    assert str_to_word_array("") == []
    assert str_to_word_array("   ") == []


def test_str_to_word_array_words_are_substrings():
    text = "ls -la  /tmp  ; echo"
    words = str_to_word_array(text)
    assert all(word in text for word in words)
    assert "".join(words) == text.replace(" ", "")


def test_strncpy_pads_with_nul():
    assert strncpy("abc", 5) == "abc" + "\0" * 2


def test_strncpy_truncates():
    assert strncpy("abcdef", 3) == "abc"


@pytest.mark.parametrize("n", [0, 1, 4, 10])
def test_strncpy_length_invariant(n):
    assert len(strncpy("word", n)) == n


def test_strncpy_negative_length():
    with pytest.raises(ValueError):
        strncpy("abc", -1)