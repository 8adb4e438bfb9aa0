import pytest

from dsakit.strings import add_binary, is_valid_parentheses


def test_add_binary_example():
    assert add_binary("11", "1") == "100"


@pytest.mark.parametrize(
    "a,b",
    [("0", "0"), ("1", "1"), ("1010", "1011"), ("111111", "1"), ("1", "100000")],
)
def test_add_binary_matches_integer_sum(a, b):
    assert int(add_binary(a, b), 2) == int(a, 2) + int(b, 2)


def test_add_binary_is_symmetric():
    assert add_binary("1101", "111") == add_binary("111", "1101")


def test_add_binary_keeps_leading_zeros():
    assert add_binary("0011", "1") == "0100"


def test_add_binary_empty():
    assert add_binary("", "") == ""


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


@pytest.mark.parametrize("s", ["()[]{}", "", "{[()]}", "(())"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "{{}"])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


def test_other_characters_close_a_bracket():
    assert is_valid_parentheses("(a")
    assert not is_valid_parentheses("a")