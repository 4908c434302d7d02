"""
Query scorers: rank documents by how well a typed query matches their phrases.

Add documents with add_document, then call score with a query string. score
returns every document with its score, lowest (best) first. Scores are edit
distances, so 0 is an exact match and math.inf means no match.

- QueryScorer: phrase trie with prefix matching. A document matches when the
  query's leading words walk a whole phrase, each word within
  distance_threshold of the phrase word. The score is the smallest summed
  word distance over the document's phrases.
- FlatQueryScorer: legacy bag-of-words mode. The score is the mean, over
  query words, of each word's smallest distance to any word in the document.
"""

import logging
import math
import threading
from functools import partial
from typing import Dict, Iterable, List, Mapping, Optional, Set

from pydantic import ValidationError

from . import config
from .errors import InvalidConfiguration, InvalidDocument
from .levenshtein import levenshtein
from .models import Document, ScoreResult
from .trie import PhraseTrie
from .variations import Variations, expand_phrase, normalize_variations, tokenize

logger = logging.getLogger(__name__)


class _Scorer:
    """Document store, settings and locking shared by both scoring modes."""

    mode = ""

    def __init__(
        self,
        variations: Optional[Variations] = None,
        distance_threshold: Optional[float] = None,
        cost_ins: Optional[float] = None,
        cost_rep: Optional[float] = None,
        cost_del: Optional[float] = None,
    ):
        self.distance_threshold = _setting(
            "distance_threshold", distance_threshold, config.DISTANCE_THRESHOLD
        )
        self.cost_ins = _setting("cost_ins", cost_ins, config.COST_INSERT)
        self.cost_rep = _setting("cost_rep", cost_rep, config.COST_REPLACE)
        self.cost_del = _setting("cost_del", cost_del, config.COST_DELETE)
        self._variations = normalize_variations(variations)
        self._documents: List[Document] = []
        self._lock = threading.RLock()

    @property
    def documents(self) -> List[Document]:
        """Registered documents in registration order."""
        return list(self._documents)

    def add_document(self, doc_id: str, phrases: Iterable[str] = ()) -> Document:
        """
        Register a document and index its phrases (plus their variations).
        Raises InvalidDocument if doc_id is missing or blank. A document with no
        phrases is kept but never matches.
        """
        if isinstance(phrases, str):
            phrases = [phrases]
        try:
            doc = Document(id=doc_id, phrases=list(phrases or ()))
        except ValidationError as e:
            raise InvalidDocument(f"invalid document {doc_id!r}: {e}") from e
        with self._lock:
            doc_index = len(self._documents)
            self._documents.append(doc)
            count = 0
            for phrase in doc.phrases:
                words = tokenize(phrase)
                if not words:
                    continue
                for variant in expand_phrase(words, self._variations):
                    self._index(doc_index, variant)
                    count += 1
        logger.debug(
            "Added document %r: %d phrase(s), %d indexed with variations",
            doc.id, len(doc.phrases), count,
        )
        return doc

    def add_documents(self, documents: Mapping[str, Iterable[str]]) -> List[Document]:
        """Register {doc_id: phrases} in mapping order."""
        return [self.add_document(doc_id, phrases) for doc_id, phrases in documents.items()]

    def score(self, query: str) -> List[ScoreResult]:
        """
        Score query against every document. Returns ScoreResults sorted by score,
        low to high; documents that do not match get math.inf. An empty or
        blank query matches nothing.
        """
        query_words = tokenize(query or "")
        with self._lock:
            scores = self._match(query_words) if query_words else {}
            results = [
                ScoreResult(doc, scores.get(i, math.inf))
                for i, doc in enumerate(self._documents)
            ]
        results.sort(key=lambda r: r.score)
        logger.debug(
            "Scored %d query word(s) in %s mode: %d of %d document(s) matched",
            len(query_words), self.mode, len(scores), len(results),
        )
        return results

    def _distance(self, word1: str, word2: str, max_distance: Optional[float] = None) -> float:
        return levenshtein(
            word1, word2, self.cost_ins, self.cost_rep, self.cost_del, max_distance
        )

    def _index(self, doc_index: int, words: List[str]) -> None:
        raise NotImplementedError

    def _match(self, query_words: List[str]) -> Dict[int, float]:
        """Return {doc_index: finite score} for matched documents."""
        raise NotImplementedError


class QueryScorer(_Scorer):
    """Phrase trie scorer with prefix matching and per-word typo tolerance."""

    mode = "phrase"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._trie = PhraseTrie()

    @property
    def trie(self) -> PhraseTrie:
        return self._trie

    def _index(self, doc_index: int, words: List[str]) -> None:
        self._trie.insert(words, doc_index)

    def _match(self, query_words: List[str]) -> Dict[int, float]:
        distance = partial(self._distance, max_distance=self.distance_threshold)
        return self._trie.match(query_words, self.distance_threshold, distance)


class FlatQueryScorer(_Scorer):
    """
    Legacy mode: each document is a flat set of words, and its score is the
    mean over query words of the best word distance. No threshold pruning.
    """

    mode = "flat"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._documents_by_word: Dict[str, Set[int]] = {}

    def _index(self, doc_index: int, words: List[str]) -> None:
        for word in words:
            self._documents_by_word.setdefault(word, set()).add(doc_index)

    def _match(self, query_words: List[str]) -> Dict[int, float]:
        sum_by_doc: Dict[int, float] = {}
        for query_word in query_words:
            min_by_doc: Dict[int, float] = {}
            for word, doc_indexes in self._documents_by_word.items():
                d = self._distance(query_word, word)
                for doc_index in doc_indexes:
                    if d < min_by_doc.get(doc_index, math.inf):
                        min_by_doc[doc_index] = d
            for doc_index, d in min_by_doc.items():
                sum_by_doc[doc_index] = sum_by_doc.get(doc_index, 0) + d
        return {i: total / len(query_words) for i, total in sum_by_doc.items()}


SCORERS = {
    QueryScorer.mode: QueryScorer,
    FlatQueryScorer.mode: FlatQueryScorer,
}


def create_scorer(mode: str = "phrase", **kwargs) -> _Scorer:
    """Build a scorer by mode name ("phrase" or "flat")."""
    cls = SCORERS.get(mode)
    if cls is None:
        raise InvalidConfiguration(
            f"unknown scoring mode {mode!r}; expected one of {sorted(SCORERS)}"
        )
    return cls(**kwargs)


def top_matches(results: List[ScoreResult]) -> List[Document]:
    """
    Documents tied for the best score in sorted results. Empty when nothing
    matched (best score is math.inf).
    """
    if not results or results[0].score == math.inf:
        return []
    best = results[0].score
    top = []
    for result in results:
        if result.score != best:
            break
        top.append(result.document)
    return top


def _setting(name: str, value: Optional[float], default: float) -> float:
    if value is None:
        value = default
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if value < 0:
        raise InvalidConfiguration(f"{name} must not be negative, got {value!r}")
    return value
