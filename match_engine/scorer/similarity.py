#!/usr/bin/env python3
"""
Similarity Calculations - Cosine similarity between binary feature vectors.

For 0/1 vectors this is |shared| / sqrt(|a| * |b|), already within [0, 1].
"""

import logging
import numpy as np

from match_engine.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)


def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """
    Calculate cosine similarity between two feature vectors.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Cosine similarity (0.0 to 1.0), or 0.0 if either vector is zero

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    a = np.asarray(vec1, dtype=np.float64)
    b = np.asarray(vec2, dtype=np.float64)

    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Cannot compare vectors of length {a.size} and {b.size}"
        )

    norm1 = float(np.linalg.norm(a))
    norm2 = float(np.linalg.norm(b))

    # Zero magnitude means no selections; defined as no similarity
    if norm1 == 0.0 or norm2 == 0.0:
        return 0.0

    similarity = float(np.dot(a, b)) / (norm1 * norm2)
    return max(0.0, min(1.0, similarity))
