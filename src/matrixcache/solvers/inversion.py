from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np
import scipy as sp
import scipy.linalg

from matrixcache.config import DEFAULT_INVERSION_BACKEND

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Inverter = Callable[["npt.NDArray[np.float64]"], "npt.NDArray[np.float64]"]


class NonInvertibleMatrixError(ValueError):
    """
    Raised when a matrix has no inverse (singular or not square).
    """

    def __init__(self, shape: tuple[int, ...], reason: str) -> None:
        """
        Args:
            shape: Shape of the matrix that failed to invert.
            reason: Message of the underlying linear algebra error.
        """
        super().__init__(f"Cannot invert matrix of shape {shape}: {reason}")
        self.shape = shape
        self.reason = reason


def _check_square_and_finite(matrix: npt.NDArray[np.float64]) -> None:
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise NonInvertibleMatrixError(matrix.shape, "matrix is not square")
    if not np.isfinite(matrix).all():
        raise NonInvertibleMatrixError(matrix.shape, "matrix contains infinite or NaN values")


def numpy_inverse(matrix: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Invert a dense square matrix with `numpy.linalg.inv`.

    Args:
        matrix: Square matrix to invert.

    Raises:
        NonInvertibleMatrixError: If the matrix is singular, not square or
            not finite.

    Returns:
        The inverse matrix.
    """
    _check_square_and_finite(matrix)
    if matrix.size == 0:
        return np.empty_like(matrix)
    try:
        return np.linalg.inv(matrix)
    except np.linalg.LinAlgError as e:
        raise NonInvertibleMatrixError(matrix.shape, str(e)) from e


def scipy_inverse(matrix: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Invert a dense square matrix with `scipy.linalg.inv`.

    Args:
        matrix: Square matrix to invert.

    Raises:
        NonInvertibleMatrixError: If the matrix is singular, not square or
            not finite.

    Returns:
        The inverse matrix.
    """
    _check_square_and_finite(matrix)
    if matrix.size == 0:
        return np.empty_like(matrix)
    try:
        return sp.linalg.inv(matrix)
    except (np.linalg.LinAlgError, ValueError) as e:
        raise NonInvertibleMatrixError(matrix.shape, str(e)) from e


_BACKENDS: dict[str, Inverter] = {
    "numpy": numpy_inverse,
    "scipy": scipy_inverse,
}


def get_inverter(name: str = DEFAULT_INVERSION_BACKEND) -> Inverter:
    """
    Look up an inversion backend by name.

    Args:
        name: A registered backend name ("numpy" or "scipy").

    Raises:
        ValueError: If `name` is not a known backend.

    Returns:
        The inversion function.
    """
    if name not in _BACKENDS:
        raise ValueError(f"Unknown inversion backend: '{name}'. "
                         f"Supported backends are: {', '.join(sorted(_BACKENDS))}.")
    return _BACKENDS[name]


def invert(matrix: npt.NDArray[np.float64], backend: str = DEFAULT_INVERSION_BACKEND) -> npt.NDArray[np.float64]:
    """Invert `matrix` with the named backend."""
    logger.debug(f"Inverting matrix of shape {matrix.shape} with '{backend}' backend.")
    return get_inverter(backend)(matrix)
