"""
Word-level prefix tree over document phrases.

Each node is one word position shared by every phrase with the same
prefix, so a query word is compared against a shared prefix once rather
than once per phrase. Documents are referenced by registration index.
"""

from typing import Callable, Dict, Optional, Sequence, Set

DistanceFn = Callable[[str, str], float]


class PhraseNode:
    """One word position; root has word None."""

    __slots__ = ("word", "children", "documents", "terminal")

    def __init__(self, word: Optional[str] = None):
        self.word = word
        self.children: Dict[str, "PhraseNode"] = {}
        # Documents with some phrase passing through this node
        self.documents: Set[int] = set()
        # Documents with a phrase ending exactly here
        self.terminal: Set[int] = set()

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"PhraseNode({self.word!r}, children={len(self.children)}, terminal={sorted(self.terminal)})"


class PhraseTrie:
    """Phrase index: insert word sequences, then match queries with bounded edit distance."""

    def __init__(self) -> None:
        self.root = PhraseNode()
        self._phrase_count = 0
        self._node_count = 1

    def __len__(self) -> int:
        return self._phrase_count

    @property
    def node_count(self) -> int:
        return self._node_count

    def insert(self, words: Sequence[str], doc_index: int) -> PhraseNode:
        """
        Add a phrase for doc_index. Existing nodes are reused; every node on the
        path records the document. Returns the phrase's last node.
        """
        node = self.root
        if not words:
            return node
        node.documents.add(doc_index)
        for word in words:
            child = node.children.get(word)
            if child is None:
                child = PhraseNode(word)
                node.children[word] = child
                self._node_count += 1
            child.documents.add(doc_index)
            node = child
        node.terminal.add(doc_index)
        self._phrase_count += 1
        return node

    def find(self, words: Sequence[str]) -> Optional[PhraseNode]:
        """Exact lookup of the node for a word sequence, or None."""
        node = self.root
        for word in words:
            node = node.children.get(word)
            if node is None:
                return None
        return node

    def match(
        self,
        query_words: Sequence[str],
        threshold: float,
        distance: DistanceFn,
    ) -> Dict[int, float]:
        """
        Return {doc_index: minimum phrase distance} for every document with a
        phrase matched by a prefix of query_words. Each phrase word must be
        within threshold of the query word at the same position; the phrase
        distance is the sum of those word distances.
        """
        best: Dict[int, float] = {}
        self._walk(self.root, query_words, 0, 0, threshold, distance, best)
        return best

    def _walk(
        self,
        node: PhraseNode,
        query_words: Sequence[str],
        query_index: int,
        phrase_distance: float,
        threshold: float,
        distance: DistanceFn,
        best: Dict[int, float],
    ) -> None:
        # Prefix match: any remaining query words are ignored
        for doc_index in node.terminal:
            previous = best.get(doc_index)
            if previous is None or phrase_distance < previous:
                best[doc_index] = phrase_distance
        if not node.children:
            return
        # Query too short for any longer phrase below this node
        if query_index == len(query_words):
            return
        query_word = query_words[query_index]
        for word, child in node.children.items():
            d = distance(query_word, word)
            if d <= threshold:
                self._walk(
                    child,
                    query_words,
                    query_index + 1,
                    phrase_distance + d,
                    threshold,
                    distance,
                    best,
                )
