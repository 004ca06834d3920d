"""String enumeration problems: parentheses, phone letters, partitions, word breaks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import lru_cache

__all__ = [
    "Trie",
    "generate_parentheses",
    "letter_combinations",
    "palindrome_partitions",
    "word_break",
    "word_break_sentences",
]

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A prefix tree of dictionary words, used to split text into words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.terminal = True

    def _word_ends(self, text: str, start: int) -> Iterator[int]:
        """Yield each end index such that text[start:end] is a non-empty word."""
        node = self._root
        for end in range(start, len(text)):
            node = node.children.get(text[end])
            if node is None:
                return
            if node.terminal:
                yield end + 1

    def can_segment(self, text: str) -> bool:
        """Tell whether text splits wholly into words of the trie."""

        @lru_cache(maxsize=None)
        def from_position(start: int) -> bool:
            if start >= len(text):
                return True
            return any(from_position(end) for end in self._word_ends(text, start))

        return from_position(0)

    def segmentations(self, text: str) -> list[str]:
        """Return every way to split text into words, as space-separated sentences."""

        def search(start: int, words: list[str]) -> Iterator[str]:
            if start >= len(text):
                yield " ".join(words)
                return
            for end in self._word_ends(text, start):
                words.append(text[start:end])
                yield from search(end, words)
                words.pop()

        return list(search(0, []))


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of n pairs of parentheses."""

    def search(opens: int, closes: int, prefix: str) -> Iterator[str]:
        if opens == 0 and closes == 0:
            yield prefix
            return
        if opens > 0:
            yield from search(opens - 1, closes, prefix + "(")
        if closes > opens:
            yield from search(opens, closes - 1, prefix + ")")

    return list(search(n, n, ""))


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the digits can spell on a phone keypad."""
    if not digits:
        return []
    if not all(char in "0123456789" for char in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    groups = [_KEYPAD[int(char)] for char in digits]

    def search(position: int, prefix: str) -> Iterator[str]:
        if position >= len(groups):
            yield prefix
            return
        for letter in groups[position]:
            yield from search(position + 1, prefix + letter)

    return list(search(0, ""))


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to cut text into palindromic pieces."""

    def search(start: int, pieces: list[str]) -> Iterator[list[str]]:
        if start >= len(text):
            yield list(pieces)
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if _is_palindrome(piece):
                pieces.append(piece)
                yield from search(end, pieces)
                pieces.pop()

    return list(search(0, []))


def word_break(text: str, words: Iterable[str]) -> bool:
    """Tell whether text splits wholly into the given words."""
    return Trie(words).can_segment(text)


def word_break_sentences(text: str, words: Iterable[str]) -> list[str]:
    """Return every sentence made by splitting text into the given words."""
    return Trie(words).segmentations(text)