"""
Query and phrase tokenization, plus variation expansion.

A variation table maps a trigger word to alternate spellings or word
splits, e.g. "firefox" -> ["fire fox", "fox fire", "foxfire"]. Phrases are
expanded before they go into the trie, so the alternates are matched by
edit distance like any other stored phrase.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

Variations = Mapping[str, Sequence[str]]


def tokenize(text: str) -> List[str]:
    """Trim, split on whitespace and lowercase."""
    return [word.lower() for word in text.split()]


def normalize_variations(variations: Optional[Variations]) -> Dict[str, Tuple[Tuple[str, ...], ...]]:
    """
    Lowercase and pre-split a variation table.
    Returns {trigger: ((word, ...), ...)}. Triggers that are not a single word
    and empty replacements are dropped.
    """
    table: Dict[str, Tuple[Tuple[str, ...], ...]] = {}
    for trigger, replacements in (variations or {}).items():
        trigger_words = tokenize(trigger)
        if len(trigger_words) != 1:
            continue
        if isinstance(replacements, str):
            replacements = [replacements]
        split = tuple(tuple(tokenize(r)) for r in replacements)
        split = tuple(r for r in split if r)
        if split:
            table[trigger_words[0]] = table.get(trigger_words[0], ()) + split
    return table


def expand_phrase(
    words: Sequence[str],
    variations: Mapping[str, Sequence[Sequence[str]]],
) -> List[List[str]]:
    """
    Return the phrase followed by one variant per replacement of each trigger
    it contains. The first occurrence of the trigger is spliced out for the
    replacement's words; triggers are applied one at a time, never combined.
    """
    phrase = list(words)
    phrases = [phrase]
    for trigger, replacements in variations.items():
        try:
            index = phrase.index(trigger)
        except ValueError:
            continue
        for replacement in replacements:
            phrases.append(phrase[:index] + list(replacement) + phrase[index + 1:])
    return phrases
