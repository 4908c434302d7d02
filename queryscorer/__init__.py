"""Typo-tolerant phrase matching for ranking keyword documents against typed queries."""

from .errors import QueryScorerError, InvalidConfiguration, InvalidDocument
from .levenshtein import levenshtein
from .models import Document, ScoreResult
from .scorer import (
    QueryScorer,
    FlatQueryScorer,
    create_scorer,
    top_matches,
)
from .trie import PhraseNode, PhraseTrie
from .variations import tokenize, expand_phrase
from .documents import DOCUMENTS, VARIATIONS, build_default_scorer

__all__ = [
    "QueryScorerError",
    "InvalidConfiguration",
    "InvalidDocument",
    "levenshtein",
    "Document",
    "ScoreResult",
    "QueryScorer",
    "FlatQueryScorer",
    "create_scorer",
    "top_matches",
    "PhraseNode",
    "PhraseTrie",
    "tokenize",
    "expand_phrase",
    "DOCUMENTS",
    "VARIATIONS",
    "build_default_scorer",
]
