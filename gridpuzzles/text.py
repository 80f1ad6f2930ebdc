"""String puzzles: ciphers, palindromes, name lookups and word checks."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterable, Sequence

NO_TEAM = "PREDAJA"
NO_PALINDROME = "I'm Sorry Hansoo"

_ROT13 = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[13:]
    + string.ascii_uppercase[:13]
    + string.ascii_lowercase[13:]
    + string.ascii_lowercase[:13],
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def rot13(text: str) -> str:
    """Rotate every ASCII letter by 13 places, leaving other characters alone."""
    return text.translate(_ROT13)


def players_by_initial(names: Iterable[str]) -> str:
    """Return, in order, every initial shared by at least five names.

    When no initial qualifies the result is ``"PREDAJA"``.
    """
    counts = Counter(name[0] for name in names)
    initials = "".join(sorted(letter for letter, count in counts.items() if count >= 5))
    return initials or NO_TEAM


def is_palindrome(word: str) -> bool:
    """Tell whether ``word`` reads the same backwards."""
    return word == word[::-1]


def make_palindrome(word: str) -> str:
    """Rearrange all letters of ``word`` into the alphabetically first palindrome.

    Raises ValueError when no palindrome can be built from the letters.
    """
    counts = Counter(word)
    letters = sorted(counts)
    odd = [letter for letter in letters if counts[letter] % 2]
    if len(odd) > 1:
        raise ValueError(NO_PALINDROME)
    half = "".join(letter * (counts[letter] // 2) for letter in letters)
    middle = odd[-1] if odd else ""
    return half + middle + half[::-1]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class PokemonIndex:
    """Two-way lookup between names and their 1-based positions."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names: list[str] = list(names)
        self._numbers: dict[str, int] = {
            name: number for number, name in enumerate(self._names, 1)
        }

    def lookup(self, query: str | int) -> str | int:
        """Return the name for a number, or the number for a name.

        A query that starts with a non-zero integer is taken as a number.
        Raises KeyError for an unknown name or a number out of range.
        """
        number = query if isinstance(query, int) else _leading_int(query)
        if number:
            if not 1 <= number <= len(self._names):
                raise KeyError(query)
            return self._names[number - 1]
        try:
            return self._numbers[query]
        except KeyError:
            raise KeyError(query) from None


def match_pattern(pattern: str, filename: str) -> bool:
    """Match ``filename`` against a pattern holding exactly one ``*`` wildcard."""
    prefix, star, suffix = pattern.partition("*")
    if not star:
        raise ValueError(f"pattern {pattern!r} has no '*'")
    return (
        len(filename) >= len(prefix) + len(suffix)
        and filename.startswith(prefix)
        and filename.endswith(suffix)
    )


def _is_good(word: str) -> bool:
    stack: list[str] = []
    for letter in word:
        if stack and stack[-1] == letter:
            stack.pop()
        else:
            stack.append(letter)
    return not stack


def count_good_words(words: Sequence[str] | Iterable[str]) -> int:
    """Count words whose equal letters pair up without crossing arcs."""
    return sum(1 for word in words if _is_good(word))