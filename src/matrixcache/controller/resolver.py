from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from matrixcache.solvers.inversion import invert
from matrixcache.utils import has_missing_values

if TYPE_CHECKING:
    import numpy.typing as npt

    from matrixcache.model.cache_cell import CacheCell
    from matrixcache.solvers.inversion import Inverter

logger = logging.getLogger(__name__)


def resolve_inverse(cell: CacheCell, inverter: Optional[Inverter] = None) -> Optional[npt.NDArray[np.float64]]:
    """
    Return the inverse of the matrix held by `cell`, computing it only when needed.

    If the cell already holds an inverse it is returned unchanged. Otherwise
    the inverse is computed, stored in the cell and returned. A matrix with
    missing values is not inverted: a warning is logged and None is returned.

    Args:
        cell: The cache cell to resolve.
        inverter: Function used to invert the matrix. Defaults to the
            configured backend (see `matrixcache.config`).

    Raises:
        NonInvertibleMatrixError: If the default backend finds the matrix
            singular or not square. Custom inverters propagate their own errors.

    Returns:
        The inverse matrix, or None if the matrix contains missing values.
    """
    inverse = cell.get_inverse()
    matrix = cell.get_matrix()

    if has_missing_values(matrix):
        logger.warning("Cannot invert a matrix containing missing values.")
        return None

    if inverse is None:
        logger.debug(f"Cache miss, computing inverse of matrix with shape {matrix.shape}.")
        computed = invert(matrix) if inverter is None else inverter(matrix)
        cell.set_inverse(computed)
        inverse = cell.get_inverse()
    else:
        logger.debug("Cache hit, returning cached inverse.")

    return inverse
