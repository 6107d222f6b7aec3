from __future__ import annotations

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.9
CONTAINS_SCORE = 0.8
FUZZY_CUTOFF = 0.6
FUZZY_SCALE = 0.7


def levenshtein(source: str, target: str) -> int:
    """Edit distance with unit cost for insertion, deletion and substitution."""
    rows = len(source) + 1
    cols = len(target) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

    return matrix[rows - 1][cols - 1]


def _normalize(text: str) -> str:
    return (text or "").lower().strip()


def similarity(query: str, target: str) -> float:
    """
    Score how well `target` matches `query`, in [0, 1].

    Exact match scores 1.0, a prefix match 0.9 and a substring match 0.8.
    Anything else falls back to edit distance: the raw similarity
    1 - distance / longest length is scaled by 0.7 when it clears 0.6,
    and scores 0 otherwise.
    """
    q = _normalize(query)
    t = _normalize(target)

    if q == t:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE
    if q in t:
        return CONTAINS_SCORE

    distance = levenshtein(q, t)
    longest = max(len(q), len(t))
    raw = 1 - distance / longest
    return raw * FUZZY_SCALE if raw > FUZZY_CUTOFF else 0.0
