import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.trie import Trie

words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=8)


def test_source_example():
    trie = Trie()
    trie.insert("abcd")
    trie.insert("spd")
    trie.insert("spdking")
    assert trie.search("abcdk") is False
    assert trie.search("spd") is True
    assert trie.search("spdking") is True


def test_prefix_is_not_a_word():
    trie = Trie(["spdking"])
    assert trie.search("spd") is False
    assert "spdk" not in trie


def test_empty_word():
    trie = Trie()
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True


def test_invalid_characters():
    trie = Trie(["abc"])
    with pytest.raises(ValueError):
        trie.insert("Abc")
    with pytest.raises(ValueError):
        trie.search("ab1")
    assert "ABC" not in trie
    assert 3 not in trie


@given(inserted=st.lists(words, max_size=20), probe=words)
def test_membership_matches_set(inserted, probe):
    trie = Trie(inserted)
    assert all(word in trie for word in inserted)
    assert (probe in trie) == (probe in set(inserted))