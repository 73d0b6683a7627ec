"""
The CONTROLLER layer reads a cache cell, decides whether the cached inverse can
be served, and writes a freshly computed inverse back into the cell.
"""
