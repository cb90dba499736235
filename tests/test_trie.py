from scrabbler.constants import ALPHABET
from scrabbler.trie import Trie


def _nodes(node):
    yield node
    for child in node.children:
        yield from _nodes(child)


def test_insert_and_lookup():
    trie = Trie()
    for word in ("CAT", "CATS", "CAR"):
        trie.insert(word)
    assert trie.is_word("CAT")
    assert trie.is_word("CATS")
    assert not trie.is_word("CA")
    assert trie.is_prefix("CA")
    assert not trie.is_prefix("DOG")
    assert len(trie) == 3


def test_child_lookup_matches_children_list():
    trie = Trie.from_words({"CAB", "CAT", "CAR", "DOG", "DOT", "ZOO"})
    for node in _nodes(trie.root):
        for i, letter in enumerate(ALPHABET):
            index = node.letter_indexes[i]
            if index == -1:
                assert node.child(letter) is None
            else:
                assert node.children[index].letter == letter
                assert node.child(letter) is node.children[index]
        assert sum(1 for i in node.letter_indexes if i != -1) == len(node.children)


def test_from_words_keeps_long_uppercase_words_only():
    trie = Trie.from_words(["CAT", "AT", "dog", "DO9", "ZEBRA"])
    assert trie.is_word("CAT")
    assert trie.is_word("ZEBRA")
    assert not trie.is_word("AT")
    assert not trie.is_prefix("D")
    assert len(trie) == 2


def test_children_are_in_alphabetical_order():
    trie = Trie.from_words({"CAT", "CAB", "CAR"})
    node = trie.root.child("C").child("A")
    assert [c.letter for c in node.children] == ["B", "R", "T"]


def test_empty_trie():
    trie = Trie.from_words([])
    assert trie.root.children == []
    assert not trie.root.is_terminal
    assert not trie.is_word("CAT")
