import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.tries import Trie, WordTrie, XorTrie

words = st.lists(st.text(alphabet="abc", min_size=1, max_size=6), max_size=15)


def test_trie_search_and_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True
    assert trie.starts_with("b") is False


def test_trie_empty_word():
    trie = Trie()
    trie.insert("")
    assert trie.search("") is False
    assert trie.starts_with("") is True


def test_word_trie_nodes_carry_prefix():
    trie = WordTrie()
    trie.insert("cat")
    trie.insert("car")
    node = trie.node("ca")
    assert node.word == "ca"
    assert node.ends is False
    assert sorted(node.children) == ["r", "t"]
    assert trie.node("cat").ends is True
    assert trie.node("dog") is None
    assert trie.node("") is trie.root


def test_word_trie_rejects_empty_word():
    with pytest.raises(ValueError):
        WordTrie().insert("")


@given(words)
def test_word_trie_every_word_is_reachable(inserted):
    trie = WordTrie()
    for word in inserted:
        trie.insert(word)
    for word in inserted:
        node = trie.node(word)
        assert node.word == word
        assert node.ends is True


def test_xor_trie_empty_returns_minus_one():
    assert XorTrie().find_max(5) == -1


def test_xor_trie_negative_wraps_to_signed():
    trie = XorTrie()
    trie.insert(-1)
    assert trie.find_max(0) == -1


@given(st.lists(st.integers(0, 2**31 - 1), min_size=1, max_size=20), st.integers(0, 2**31 - 1))
def test_xor_trie_finds_maximum(values, probe):
    trie = XorTrie()
    for value in values:
        trie.insert(value)
    assert trie.find_max(probe) == max(probe ^ v for v in values)