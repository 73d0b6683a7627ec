"""
Cache Cell (Data Model)
=======================
This module defines the single-slot holder for a matrix and its inverse.

Why is this file needed?
------------------------
1. State Management: It keeps the matrix and its cached inverse together in
   one place, so the inverse can never go out of sync with the matrix.
2. Memoization: Re-setting an unchanged matrix keeps the cached inverse, so
   repeated lookups after a no-op update stay free.

Classes:
    CacheState: The two states a cell can be in.
    CacheCell: The main container class.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from matrixcache.model.comparison import should_replace
from matrixcache.utils import empty_matrix, frozen_copy

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class CacheState(Enum):
    NO_INVERSE_CACHED = "no_inverse_cached"
    INVERSE_CACHED = "inverse_cached"


class CacheCell:
    """
    Holds one matrix and, once computed, its inverse.

    Both values are stored as read-only copies. Replacing the matrix with a
    different one clears the inverse in the same call. Each instance owns its
    own storage; cells built from the same input never share state.
    """

    def __init__(self, matrix: Optional[Any] = None) -> None:
        """
        Initialize the cell with a matrix.

        Args:
            matrix: Initial matrix. Defaults to an empty 0x0 matrix.
        """
        self._matrix: npt.NDArray[np.float64] = frozen_copy(
            empty_matrix() if matrix is None else matrix
        )
        self._inverse: Optional[npt.NDArray[np.float64]] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self.shape}, state={self.state.name})"

    @property
    def shape(self) -> tuple[int, ...]:
        """Shape of the cached matrix."""
        return self._matrix.shape

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def state(self) -> CacheState:
        if self.has_inverse:
            return CacheState.INVERSE_CACHED
        return CacheState.NO_INVERSE_CACHED

    def set_matrix(self, new_matrix: Any) -> bool:
        """
        Replace the cached matrix, but only if there is a reason to do so.

        If `should_replace` finds the new matrix different from the cached one
        (or the cached one invalid), the matrix is replaced and the inverse is
        cleared. Otherwise nothing changes.

        Args:
            new_matrix: The proposed new matrix.

        Returns:
            True if the matrix was replaced and the inverse invalidated.
        """
        if not should_replace(self._matrix, new_matrix):
            logger.debug("Matrix unchanged, keeping cached inverse.")
            return False

        self._matrix = frozen_copy(new_matrix)
        self._inverse = None
        logger.debug(f"Cached matrix replaced (shape {self._matrix.shape}), inverse cleared.")
        return True

    def get_matrix(self) -> npt.NDArray[np.float64]:
        return self._matrix

    def set_inverse(self, new_inverse: Optional[Any]) -> None:
        """Store `new_inverse` unconditionally. Passing None clears it."""
        self._inverse = None if new_inverse is None else frozen_copy(new_inverse)

    def get_inverse(self) -> Optional[npt.NDArray[np.float64]]:
        """Return the cached inverse, or None if it was never computed or was cleared."""
        return self._inverse
