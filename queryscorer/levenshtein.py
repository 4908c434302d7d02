"""
Levenshtein edit distance between two words.

- Configurable insertion, substitution and deletion costs (default 1 each).
- Two rolling rows sized by the shorter word; no full matrix.
- Optional max_distance bound so callers that prune (the phrase trie) can
  stop as soon as the bound is exceeded.
"""

from typing import Optional


def levenshtein(
    word1: str = "",
    word2: str = "",
    cost_ins: float = 1,
    cost_rep: float = 1,
    cost_del: float = 1,
    max_distance: Optional[float] = None,
) -> float:
    """
    Cost of transforming word1 into word2.
    If max_distance is given and the distance is certain to exceed it, a value
    greater than max_distance is returned early instead of the exact distance.
    """
    if word1 == word2:
        return 0
    l1 = len(word1)
    l2 = len(word2)
    if not l1:
        return l2 * cost_ins
    if not l2:
        return l1 * cost_del

    # Keep word2 the shorter one. Reading the edits backwards turns
    # insertions into deletions, so their costs trade places.
    if l2 > l1:
        word1, word2 = word2, word1
        l1, l2 = l2, l1
        cost_ins, cost_del = cost_del, cost_ins

    if max_distance is not None:
        floor = (l1 - l2) * cost_del
        if floor > max_distance:
            return floor

    prev = [i2 * cost_ins for i2 in range(l2 + 1)]
    curr = [0] * (l2 + 1)
    for i1 in range(l1):
        curr[0] = prev[0] + cost_del
        ch = word1[i1]
        for i2 in range(l2):
            c0 = prev[i2] + (0 if ch == word2[i2] else cost_rep)
            c1 = prev[i2 + 1] + cost_del
            if c1 < c0:
                c0 = c1
            c2 = curr[i2] + cost_ins
            if c2 < c0:
                c0 = c2
            curr[i2 + 1] = c0
        if max_distance is not None:
            row_min = min(curr)
            if row_min > max_distance:
                return row_min
        prev, curr = curr, prev
    return prev[l2]
