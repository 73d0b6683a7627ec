"""
matrixcache
===========
Memoized matrix inversion: a single-slot cache holding a matrix and its
inverse, recomputing the inverse only when the matrix actually changes.

Typical use::

    from matrixcache import CacheCell, resolve_inverse

    cell = CacheCell([[2.0, 0.0], [0.0, 2.0]])
    inverse = resolve_inverse(cell)   # computed
    inverse = resolve_inverse(cell)   # served from the cache
"""
from importlib.metadata import version, PackageNotFoundError

from matrixcache.controller.resolver import resolve_inverse
from matrixcache.model.cache_cell import CacheCell, CacheState
from matrixcache.model.comparison import should_replace
from matrixcache.solvers.inversion import NonInvertibleMatrixError, get_inverter

try:
    __version__ = version("matrixcache")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "CacheCell",
    "CacheState",
    "NonInvertibleMatrixError",
    "get_inverter",
    "resolve_inverse",
    "should_replace",
]
