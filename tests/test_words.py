import itertools

import pytest

from backtrack_kit.words import (
    Trie,
    generate_parentheses,
    letter_combinations,
    palindrome_partitions,
    word_break,
    word_break_sentences,
)


def _balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_generate_parentheses_two_pairs():
    assert generate_parentheses(2) == ["(())", "()()"]


@pytest.mark.parametrize("n", [1, 3, 4, 5])
def test_generate_parentheses_invariants(n):
    result = generate_parentheses(n)
    assert result
    assert all(len(s) == 2 * n and _balanced(s) for s in result)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert result[0] == "(" * n + ")" * n
    assert result[-1] == "()" * n


def test_generate_parentheses_zero_and_negative():
    assert generate_parentheses(0) == [""]
    assert generate_parentheses(-2) == []


def test_letter_combinations_example():
    assert letter_combinations("23") == [
        "ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf",
    ]


@pytest.mark.parametrize("digits", ["7", "79", "234"])
def test_letter_combinations_cover_product(digits):
    keypad = {"2": "abc", "3": "def", "4": "ghi", "7": "pqrs", "9": "wxyz"}
    expected = ["".join(p) for p in itertools.product(*(keypad[d] for d in digits))]
    assert letter_combinations(digits) == expected


def test_letter_combinations_empty_and_letterless():
    assert letter_combinations("") == []
    assert letter_combinations("21") == []


def test_letter_combinations_rejects_non_digits():
    with pytest.raises(ValueError):
        letter_combinations("2a")


def test_palindrome_partitions_example():
    assert palindrome_partitions("aab") == [["a", "a", "b"], ["aa", "b"]]


@pytest.mark.parametrize("text", ["racecar", "abba", "abc", "a"])
def test_palindrome_partitions_invariants(text):
    result = palindrome_partitions(text)
    assert list(text) in result
    for pieces in result:
        assert "".join(pieces) == text
        assert all(piece == piece[::-1] for piece in pieces)
    assert len({tuple(p) for p in result}) == len(result)


def test_palindrome_partitions_of_empty_string():
    assert palindrome_partitions("") == [[]]


def test_word_break_accepts_concatenation_of_words():
    words = ["apple", "pen", "applepen", "pine"]
    assert word_break("".join(["apple", "pen", "apple"]), words) is True
    assert word_break("".join(["pine", "applepen"]), words) is True


def test_word_break_rejects_unknown_letters():
    words = ["cats", "dog", "sand", "and", "cat"]
    assert word_break("catsandog", words) is False
    assert word_break("catx", words) is False


def test_word_break_empty_text():
    assert word_break("", ["a"]) is True


def test_word_break_sentences_ordering():
    words = ["cat", "cats", "and", "sand", "dog"]
    assert word_break_sentences("catsanddog", words) == [
        " ".join(["cat", "sand", "dog"]),
        " ".join(["cats", "and", "dog"]),
    ]


@pytest.mark.parametrize(
    "text, words",
    [
        ("pineapplepenapple", ["apple", "pen", "applepen", "pine", "pineapple"]),
        ("aaaa", ["a", "aa", "aaa"]),
        ("catsandog", ["cats", "dog", "sand", "and", "cat"]),
    ],
)
def test_word_break_sentences_invariants(text, words):
    sentences = word_break_sentences(text, words)
    assert bool(sentences) == word_break(text, words)
    for sentence in sentences:
        parts = sentence.split(" ")
        assert "".join(parts) == text
        assert all(part in words for part in parts)
    assert len(set(sentences)) == len(sentences)


def test_trie_incremental_inserts():
    trie = Trie()
    assert trie.can_segment("ab") is False
    trie.insert("a")
    assert trie.can_segment("ab") is False
    trie.insert("b")
    assert trie.can_segment("ab") is True
    assert trie.segmentations("ab") == ["a b"]


def test_trie_ignores_empty_word():
    trie = Trie([""])
    assert trie.can_segment("x") is False
    assert trie.segmentations("x") == []


def test_trie_segmentations_agree_with_can_segment():
    trie = Trie(["ab", "abc", "cd", "d"])
    for text in ["abcd", "abcdd", "abd", "cdab", "abce"]:
        assert bool(trie.segmentations(text)) == trie.can_segment(text)