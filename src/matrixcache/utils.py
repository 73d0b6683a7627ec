from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from matrixcache.config import DEFAULT_DTYPE, EMPTY_SHAPE

if TYPE_CHECKING:
    import numpy.typing as npt


def empty_matrix() -> npt.NDArray[np.float64]:
    """Return a new empty 0x0 matrix."""
    return np.empty(EMPTY_SHAPE, dtype=DEFAULT_DTYPE)


# Integer, unsigned, float and complex arrays are kept as they are
NUMERIC_KINDS = "iufc"


def as_matrix(values: Any) -> npt.NDArray[Any]:
    """
    Coerce array-like input into a two-dimensional numeric matrix.

    Integer, float and complex input keeps its dtype, so comparisons stay
    exact. Everything else (object arrays, booleans, numeric strings) is
    converted to ``DEFAULT_DTYPE``, which turns missing entries given as
    ``None`` into ``NaN``. Arrays that are already numeric are returned
    without copying.

    Args:
        values: Array-like input (ndarray, nested lists, ...).

    Raises:
        ValueError: If the values cannot be converted to numbers or the result
            is not two-dimensional.

    Returns:
        The matrix as a numeric ndarray.
    """
    try:
        matrix = np.asarray(values)
        if matrix.dtype.kind not in NUMERIC_KINDS:
            matrix = np.asarray(values, dtype=DEFAULT_DTYPE)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot convert input to a numeric matrix: {e}") from e

    if matrix.ndim != 2:
        raise ValueError(f"Expected a two-dimensional matrix, got an array with ndim={matrix.ndim}.")
    return matrix


def frozen_copy(values: Any) -> npt.NDArray[Any]:
    """
    Return a read-only copy of `values` as a matrix.

    The copy decouples the cached value from the caller's array, so later
    in-place edits on either side cannot leak into the other.
    """
    matrix = np.array(as_matrix(values), copy=True)
    matrix.flags.writeable = False
    return matrix


def has_missing_values(matrix: npt.NDArray[Any]) -> bool:
    """True if any entry of the matrix is NaN. Integer matrices never are."""
    if matrix.dtype.kind not in "fc":
        return False
    return bool(np.isnan(matrix).any())
