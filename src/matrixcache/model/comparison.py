"""
Replacement Decision
====================
Decides whether a newly supplied matrix should replace the cached one.

A cached matrix is replaced when the candidate differs from it, or when the
cached matrix itself is invalid (contains missing values), since an invalid
matrix can never serve an inverse lookup.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np

from matrixcache.utils import as_matrix, has_missing_values

logger = logging.getLogger(__name__)


def should_replace(cached: Any, candidate: Any) -> bool:
    """
    Compare the cached matrix with a candidate in search of a reason to replace it.

    The rules are evaluated in order and the first one that holds wins:

    1. The shapes differ.
    2. The cached matrix contains missing (NaN) values.
    3. At least one element differs. A NaN in the candidate never compares
       equal, so it always counts as a difference.

    Neither input is modified.

    Args:
        cached: The currently cached matrix.
        candidate: The proposed new matrix.

    Returns:
        True if the cached matrix should be replaced by the candidate,
        False if both are identical in shape and value.
    """
    cached = as_matrix(cached)
    candidate = as_matrix(candidate)

    if cached.shape != candidate.shape:
        logger.debug(f"Replacing cached matrix: shape {cached.shape} -> {candidate.shape}.")
        return True

    if has_missing_values(cached):
        logger.debug("Replacing cached matrix: it contains missing values.")
        return True

    if not np.array_equal(cached, candidate):
        logger.debug("Replacing cached matrix: element values differ.")
        return True

    return False
