"""
Configuration & Global Constants
================================
This module serves as the central registry for the package-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic values (dtypes, backend names, default
   shapes) from being scattered throughout the code.
2. Consistency: The cache cell, the comparison routine and the inversion
   backends all agree on the same numeric representation.

Exports:
    DEFAULT_DTYPE: Dtype of empty matrices and of input that has no numeric
        dtype of its own (object, bool, strings).
    EMPTY_SHAPE (tuple): Shape of the matrix a cell starts with by default.
    DEFAULT_INVERSION_BACKEND (str): Name of the backend used by the controller,
        one of the names registered in `matrixcache.solvers.inversion`.
"""
import numpy as np


# Global Constants
DEFAULT_DTYPE = np.float64
EMPTY_SHAPE: tuple[int, int] = (0, 0)

DEFAULT_INVERSION_BACKEND: str = "numpy"
