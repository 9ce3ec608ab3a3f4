"""Test fixtures and utilities for gd3dmath testing.

- assertions: Custom assertion functions (assert_matrix_close, assert_vector_close)
"""

from .assertions import assert_matrix_close, assert_vector_close, random_matrix

__all__ = [
    'assert_matrix_close',
    'assert_vector_close',
    'random_matrix',
]
