"""String utilities: palindromes, anagrams, duplicates, case, permutations, tokens."""

from __future__ import annotations

from collections import Counter
from itertools import permutations as _orderings
from typing import Iterable, List, NamedTuple, Tuple

_VOWELS = frozenset("aeiouAEIOU")
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()
_TO_UPPER = str.maketrans(_LOWER, _UPPER)
_TO_LOWER = str.maketrans(_UPPER, _LOWER)


class TextCounts(NamedTuple):
    """Vowel, consonant and word counts of a line of text."""

    vowels: int
    consonants: int
    words: int


def _check_lowercase(text: str) -> None:
    for char in text:
        if char not in _LOWER:
            raise ValueError(f"expected lowercase ASCII letters only, got {char!r}")


def is_anagram(first: str, second: str) -> bool:
    """Whether the two strings use exactly the same characters, counted."""
    return Counter(first) == Counter(second)


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards."""
    return text == text[::-1]


def count_letters_and_words(text: str) -> TextCounts:
    """Count vowels, other non-space characters, and words.

    Every character that is neither a vowel nor a space counts as a
    consonant; the word count is the number of spaces plus one.
    """
    vowels = consonants = spaces = 0
    for char in text:
        if char in _VOWELS:
            vowels += 1
        elif char == " ":
            spaces += 1
        else:
            consonants += 1
    return TextCounts(vowels, consonants, spaces + 1)


def compare(first: str, second: str) -> int:
    """-1, 0 or 1 as ``first`` sorts before, equal to, or after ``second``.

    Characters are compared by code point; a string that is a prefix of the
    other sorts first.
    """
    for left, right in zip(first, second):
        if left != right:
            return -1 if left < right else 1
    if len(first) == len(second):
        return 0
    return -1 if len(first) < len(second) else 1


def username(email: str) -> str:
    """The part of an address before the first '@' (the whole text if there is none)."""
    return email.partition("@")[0]


def has_duplicate(text: str) -> bool:
    """Whether any character other than a space occurs more than once."""
    counts = Counter(text)
    counts.pop(" ", None)
    return any(count > 1 for count in counts.values())


def repeated_letters(text: str) -> List[str]:
    """Each lowercase letter every time it is met again after its first occurrence."""
    _check_lowercase(text)
    seen = 0
    repeats: List[str] = []
    for char in text:
        bit = 1 << (ord(char) - ord("a"))
        if seen & bit:
            repeats.append(char)
        else:
            seen |= bit
    return repeats


def letter_counts(text: str) -> List[Tuple[str, int]]:
    """``(letter, count)`` for lowercase letters occurring more than once, alphabetically."""
    _check_lowercase(text)
    counts = Counter(text)
    return [(letter, counts[letter]) for letter in _LOWER if counts[letter] > 1]


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters a-z; everything else is left alone."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters A-Z; everything else is left alone."""
    return text.translate(_TO_LOWER)


def permutations(text: str) -> List[str]:
    """Every ordering of the characters by position, in generation order."""
    return ["".join(order) for order in _orderings(text)]


def remove_spaces(text: str) -> str:
    """``text`` without its space characters."""
    return text.replace(" ", "")


def reverse(text: str) -> str:
    """``text`` backwards."""
    return text[::-1]


def is_alphabetic(text: str) -> bool:
    """Whether ``text`` is non-empty and made only of ASCII letters."""
    return bool(text) and all(char in _LOWER or char in _UPPER for char in text)


def sort_longest_first(words: Iterable[str]) -> List[str]:
    """Longer words first; words of equal length in lexicographic order."""
    return sorted(words, key=lambda word: (-len(word), word))


def tokenize(text: str, delimiter: str = " ") -> List[str]:
    """Split ``text`` at every ``delimiter``, keeping empty pieces."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def subsets(text: str) -> List[str]:
    """Every non-empty subsequence, choosing to keep each character before dropping it."""
    if not text:
        return []
    head, rest = text[0], subsets(text[1:])
    return [head + tail for tail in rest] + [head] + rest