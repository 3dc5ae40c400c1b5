"""
Statistical helpers for describing how evenly something is spread, such as
the share of damage among the players of an encounter.
"""

import math
from typing import List, Sequence


def probabilities(occurrences: Sequence[int]) -> List[float]:
    """Turn occurrence counts into relative frequencies."""
    total = sum(occurrences)
    if total == 0:
        return [0.0 for _ in occurrences]
    return [occ / total for occ in occurrences]


def simpsons_d(probs: Sequence[float]) -> float:
    """Simpson's diversity index, 1 - sum(p^2)."""
    return 1.0 - sum(p * p for p in probs)


def simpsons_d_of_one(probs: Sequence[float]) -> float:
    """Simpson's D normalised to the range [0, 1]."""
    if len(probs) < 2:
        raise ValueError("Normalised Simpson's D needs at least two classes")
    factor = len(probs) / (len(probs) - 1)
    return factor * simpsons_d(probs)


def letis_d(ranked_probs: Sequence[float]) -> float:
    """
    Leti's D for ordinal data.

    The probabilities must be given in ranked (ascending category) order, as
    the index works on the cumulative distribution.
    """
    total = 0.0
    result = 0.0
    for p in ranked_probs:
        total += p
        result += total * (1.0 - total)
    return result


def letis_d_of_one(ranked_probs: Sequence[float]) -> float:
    """Leti's D normalised to the range [0, 1]."""
    if len(ranked_probs) < 2:
        raise ValueError("Normalised Leti's D needs at least two classes")
    factor = 4.0 / (len(ranked_probs) - 1)
    return factor * letis_d(ranked_probs)


def entropy(probs: Sequence[float]) -> float:
    """Shannon entropy in bits. Classes with zero probability contribute nothing."""
    return -sum(p * math.log2(p) for p in probs if p > 0)
