import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import (
    compare,
    count_letters_and_words,
    has_duplicate,
    is_alphabetic,
    is_anagram,
    is_palindrome,
    letter_counts,
    permutations,
    remove_spaces,
    repeated_letters,
    reverse,
    sort_longest_first,
    subsets,
    to_lower,
    to_upper,
    tokenize,
    username,
)

lowercase = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=20)


def test_is_anagram():
    assert is_anagram("listen", "silent") is True
    assert is_anagram("abc", "abd") is False
    assert is_anagram("abc", "ab") is False


@given(lowercase)
def test_reverse_is_anagram(text):
    assert is_anagram(text, reverse(text))


def test_palindrome():
    assert is_palindrome("madam") is True
    assert is_palindrome("hello") is False


@given(st.text(max_size=20))
def test_text_plus_reverse_is_palindrome(text):
    assert is_palindrome(text + reverse(text))
    assert reverse(reverse(text)) == text


@given(st.text(alphabet="abcXYZ e", max_size=30))
def test_counts_cover_text(text):
    counts = count_letters_and_words(text)
    assert counts.vowels + counts.consonants + (counts.words - 1) == len(text)
    assert counts.words == text.count(" ") + 1


def test_compare_prefix_and_equal():
    assert compare("hello", "helloo") < 0
    assert compare("hello", "hello") == 0


@given(st.text(max_size=10), st.text(max_size=10))
def test_compare_antisymmetric_and_ordered(first, second):
    assert compare(first, second) == -compare(second, first)
    assert (compare(first, second) < 0) == (first < second)


def test_username():
    assert username("someone@example.com") == "someone"
    assert username("nobody") == "nobody"


def test_has_duplicate():
    assert has_duplicate("hello") is True
    assert has_duplicate("a b c") is False


def test_repeated_letters():
    assert repeated_letters("hello") == ["l"]
    assert repeated_letters("abc") == []


def test_repeated_letters_rejects_other_characters():
    with pytest.raises(ValueError):
        repeated_letters("Hi there")


def test_letter_counts():
    assert letter_counts("hello") == [("l", 2)]
    with pytest.raises(ValueError):
        letter_counts("ABC")


@given(lowercase)
def test_letter_counts_match_repeats(text):
    total_repeats = sum(count - 1 for _, count in letter_counts(text))
    assert total_repeats == len(repeated_letters(text))


def test_case_conversion():
    assert to_upper("hello") == "HELLO"
    assert to_lower("HELLO") == "hello"
    assert to_upper("é1") == "é1"


@given(lowercase)
def test_case_round_trip(text):
    assert to_lower(to_upper(text)) == text


def test_permutations_order_and_count():
    result = permutations("abc")
    assert result[0] == "abc"
    assert len(result) == 6
    assert sorted(result) == sorted("".join(p) for p in itertools.permutations("abc"))


def test_remove_spaces():
    assert remove_spaces("a b  c ") == "abc"


@given(st.text(max_size=20))
def test_remove_spaces_has_no_space(text):
    stripped = remove_spaces(text)
    assert " " not in stripped
    assert len(stripped) == len(text) - text.count(" ")


def test_is_alphabetic():
    assert is_alphabetic("HelloWorld") is True
    assert is_alphabetic("ab1") is False
    assert is_alphabetic("") is False


@given(st.lists(st.text(alphabet="abc", max_size=5), max_size=10))
def test_sort_longest_first(words):
    result = sort_longest_first(words)
    assert sorted(result) == sorted(words)
    for current, following in zip(result, result[1:]):
        assert len(current) > len(following) or (
            len(current) == len(following) and current <= following
        )


def test_tokenize_source_sentence():
    assert tokenize("Today is a rainy day", " ") == ["Today", "is", "a", "rainy", "day"]


@given(st.text(alphabet="ab ", max_size=20))
def test_tokenize_round_trip(text):
    assert " ".join(tokenize(text, " ")) == text


def test_tokenize_empty_delimiter():
    with pytest.raises(ValueError):
        tokenize("abc", "")


def test_subsets_order():
    assert subsets("abc") == ["abc", "ab", "ac", "a", "bc", "b", "c"]


@given(st.text(alphabet="abcdef", max_size=6))
def test_subsets_count(text):
    result = subsets(text)
    assert len(result) == 2 ** len(text) - 1
    assert "" not in result