"""Phrase trie: shared prefixes, extension of existing paths, prefix matching and pruning."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queryscorer.levenshtein import levenshtein
from queryscorer.trie import PhraseTrie


def _walk(node):
    yield node
    for child in node.children.values():
        yield from _walk(child)


def test_shared_prefix_reuses_nodes():
    trie = PhraseTrie()
    trie.insert(["firefox", "update"], 0)
    trie.insert(["firefox", "download"], 1)
    assert list(trie.root.children) == ["firefox"]
    assert trie.find(["firefox"]).documents == {0, 1}
    assert trie.find(["firefox", "update"]).documents == {0}
    assert trie.node_count == 4
    assert len(trie) == 2


def test_empty_phrase_is_ignored():
    trie = PhraseTrie()
    trie.insert([], 0)
    assert len(trie) == 0
    assert trie.root.is_leaf()
    assert not trie.root.terminal


def test_leaves_terminate_their_documents():
    trie = PhraseTrie()
    trie.insert(["clear", "cache"], 0)
    trie.insert(["clear", "history"], 0)
    trie.insert(["clear", "cache"], 1)
    trie.insert(["reset", "firefox"], 2)
    for node in _walk(trie.root):
        if node is not trie.root and node.is_leaf():
            assert node.terminal
            assert node.terminal == node.documents
    assert trie.find(["clear", "cache"]).terminal == {0, 1}


def test_existing_phrase_can_be_extended():
    trie = PhraseTrie()
    trie.insert(["firefox"], 0)
    trie.insert(["firefox", "update"], 1)
    node = trie.find(["firefox"])
    assert node.terminal == {0}
    assert "update" in node.children
    assert trie.find(["missing"]) is None


def test_match_sums_word_distances():
    trie = PhraseTrie()
    trie.insert(["update", "firefox"], 0)
    assert trie.match(["updat", "firfox"], 1, levenshtein) == {0: 2}
    assert trie.match(["update", "firefox"], 1, levenshtein) == {0: 0}


def test_match_ignores_trailing_query_words():
    trie = PhraseTrie()
    trie.insert(["firefox", "update"], 0)
    assert trie.match(["firefox", "update", "foo", "bar"], 1, levenshtein) == {0: 0}


def test_query_shorter_than_phrase_does_not_match():
    trie = PhraseTrie()
    trie.insert(["firefox", "update"], 0)
    assert trie.match(["firefox"], 1, levenshtein) == {}
    assert trie.match([], 1, levenshtein) == {}


def test_phrase_ending_inside_longer_phrase_matches():
    trie = PhraseTrie()
    trie.insert(["firefox"], 0)
    trie.insert(["firefox", "update"], 1)
    assert trie.match(["firefox"], 1, levenshtein) == {0: 0}
    assert trie.match(["firefox", "update"], 1, levenshtein) == {0: 0, 1: 0}


def test_match_keeps_minimum_over_phrases():
    trie = PhraseTrie()
    trie.insert(["firefox", "update"], 0)
    trie.insert(["firefox", "updates"], 0)
    assert trie.match(["firefox", "updates"], 1, levenshtein) == {0: 0}


def test_word_over_threshold_prunes_subtree():
    trie = PhraseTrie()
    trie.insert(["apple", "pie"], 0)
    trie.insert(["zebra", "crossing"], 1)
    calls = []

    def distance(a, b):
        calls.append((a, b))
        return levenshtein(a, b)

    assert trie.match(["apple", "pie"], 1, distance) == {0: 0}
    assert sorted(calls) == [("apple", "apple"), ("apple", "zebra"), ("pie", "pie")]
