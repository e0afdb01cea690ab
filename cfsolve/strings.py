"""Solutions to string-processing problems."""

from __future__ import annotations

from collections.abc import Iterable
from string import ascii_lowercase

_TARGET = "codeforces"
_INCREMENTS = frozenset({"X++", "++X"})


def count_codeforces_mismatches(word: str) -> int:
    """Count positions where ``word`` differs from ``"codeforces"``."""
    if len(word) > len(_TARGET):
        raise ValueError(f"word longer than {len(_TARGET)} characters: {word!r}")
    return sum(a != b for a, b in zip(word, _TARGET))


def stones_to_remove(colors: str) -> int:
    """Stones to take away so that no two neighbouring stones share a colour."""
    return sum(a == b for a, b in zip(colors, colors[1:]))


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of ``word``, leaving the rest untouched."""
    if word and ord(word[0]) >= ord("a"):
        return chr(ord(word[0]) - 32) + word[1:]
    return word


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements on a variable that starts at zero."""
    return sum(1 if s in _INCREMENTS else -1 for s in statements)


def rearrange_sum(expr: str) -> str:
    """Rewrite a sum of digits so the summands are in non-decreasing order."""
    return "+".join(sorted(c for c in expr if c.isdigit()))


def is_pangram(word: str) -> bool:
    """Tell whether ``word`` holds every Latin letter, ignoring case."""
    if len(word) < len(ascii_lowercase):
        return False
    return set(ascii_lowercase) <= set(word.lower())


def fix_word_case(word: str) -> str:
    """Turn ``word`` wholly upper case if most letters are upper, else lower."""
    lower = sum(ord(c) >= ord("a") for c in word)
    upper = len(word) - lower
    return word.upper() if upper > lower else word.lower()


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters as first, count, last."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word