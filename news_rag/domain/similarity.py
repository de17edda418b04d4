"""Pure vector functions used by retrieval scoring.

Why: Similarity and averaging are pure functions, so they live in the domain.
"""

from collections.abc import Sequence
from math import sqrt

EPSILON = 1e-8


def cosine_similarity(u: Sequence[float], v: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    The denominator carries a small epsilon, so zero vectors score 0.0
    instead of raising.

    Args:
        u: First vector
        v: Second vector

    Returns:
        Cosine similarity, bounded by [-1, 1]
    """
    dot = sum(a * b for a, b in zip(u, v, strict=False))
    nu = sqrt(sum(a * a for a in u))
    nv = sqrt(sum(b * b for b in v))
    return dot / (nu * nv + EPSILON)


def mean_vector(vectors: Sequence[Sequence[float]]) -> tuple[float, ...]:
    """Per-dimension arithmetic mean of equally sized vectors.

    Args:
        vectors: Non-empty list of vectors; the first one fixes the dimension

    Returns:
        Averaged vector

    Raises:
        ValueError: If no vectors are given or their dimensions differ
    """
    if not vectors:
        raise ValueError("mean_vector() needs at least one vector")
    dim = len(vectors[0])
    if any(len(vec) != dim for vec in vectors):
        raise ValueError("mean_vector() needs vectors of equal dimension")
    sums = [0.0] * dim
    for vec in vectors:
        for i in range(dim):
            sums[i] += vec[i]
    n = len(vectors)
    return tuple(s / n for s in sums)
