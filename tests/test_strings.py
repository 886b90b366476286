import pytest

from zoolworld.strings import (
    compare,
    compare_n,
    find_char,
    find_within,
    map_indexed,
    rfind_char,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b", ["a", "b"]),
        ("a,,b", ["a", "b"]),
        (",,a,b,,", ["a", "b"]),
        ("a", ["a"]),
        (",,,", []),
        ("", []),
    ],
)
def test_split(text, expected):
    assert split(text, ",") == expected


def test_split_pieces_never_contain_separator():
    words = split("  lorem ipsum   dolor sit  ", " ")
    assert words == ["lorem", "ipsum", "dolor", "sit"]
    assert all(" " not in w and w for w in words)


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_find_char():
    assert find_char("hello", "l") == 2
    assert find_char("hello", "z") is None


def test_find_char_terminator_is_end():
    assert find_char("hello", "\0") == len("hello")


def test_rfind_char():
    assert rfind_char("hello", "l") == 3
    assert rfind_char("abca", "b") == 1
    assert rfind_char("hello", "z") is None
    assert rfind_char("", "\0") == 0


def test_find_char_rejects_bad_char():
    with pytest.raises(ValueError):
        find_char("abc", "")


def test_compare_equal_is_zero():
    assert compare("map.ber", "map.ber") == 0
    assert compare("", "") == 0


def test_compare_is_antisymmetric():
    for a, b in [("abc", "abd"), ("ab", "abc"), (".ber", ".txt"), ("z", "a")]:
        assert compare(a, b) == -compare(b, a)
        assert compare(a, b) != 0


def test_compare_ordering():
    assert compare("abc", "abd") < 0
    assert compare("b", "a") > 0
    assert compare("ab", "abc") == -ord("c")
    assert compare("abc", "ab") == ord("c")


def test_compare_n_limits():
    assert compare_n("abc", "abd", 2) == 0
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abc", "xyz", 0) == 0
    assert compare_n("ab", "abc", 2) == 0
    assert compare_n("ab", "abc", 10) == compare("ab", "abc")


def test_compare_n_rejects_negative():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


def test_find_within():
    assert find_within("lorem ipsum dolor", "ipsum", 17) == 6
    assert find_within("lorem ipsum dolor", "ipsum", 11) == 6
    assert find_within("lorem ipsum dolor", "ipsum", 10) is None
    assert find_within("lorem", "", 0) == 0
    assert find_within("lorem", "xyz", 5) is None


def test_find_within_length_past_end():
    assert find_within("abc", "c", 100) == 2


def test_find_within_rejects_negative():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


def test_trim():
    assert trim("  ab  ", " ") == "ab"
    assert trim("xxhelloxy", "xy") == "hello"
    assert trim("abc", "") == "abc"
    assert trim("aaaa", "a") == ""
    assert trim("", " ") == ""


def test_trim_keeps_inner_characters():
    assert trim("--a-b--", "-") == "a-b"


def test_substring():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 2, 100) == "llo"
    assert substring("hello", 5, 3) == ""
    assert substring("hello", 42, 3) == ""
    assert substring("hello", 0, 0) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)
    with pytest.raises(ValueError):
        substring("hello", 0, -2)


def test_map_indexed():
    assert map_indexed("abc", lambda i, ch: ch.upper()) == "ABC"
    assert map_indexed("abcd", lambda i, ch: ch if i % 2 else "_") == "_b_d"
    assert map_indexed("", lambda i, ch: "x") == ""


def test_map_indexed_preserves_length():
    text = "zool world"
    assert len(map_indexed(text, lambda i, ch: "*")) == len(text)