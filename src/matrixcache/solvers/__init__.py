"""
Dense matrix inversion backends.

Note: This package should be pure NumPy/SciPy and should NOT know about cache cells.
"""
