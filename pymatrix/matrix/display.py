"""
Plain-text rendering of matrices for debugging.

Read-only consumers of a finished Matrix; nothing here validates or
raises beyond what reading the matrix itself does.
"""

from __future__ import annotations

import sys
from typing import TextIO

from pymatrix.matrix.design import Matrix

FIELD_FORMAT = '%3.0f'


def format_matrix(matrix: Matrix) -> str:
    """
    Render one line per row, fields formatted with ``'%3.0f'`` and
    separated by a single space.

    >>> format_matrix(Matrix.from_array([[1, 2], [3, 4]]))
    '  1   2\\n  3   4\\n'
    """
    return ''.join(
        ' '.join(FIELD_FORMAT % value for value in row) + '\n'
        for row in matrix.data.tolist()
    )


def print_matrix(matrix: Matrix, file: TextIO | None = None) -> None:
    """Write format_matrix(matrix) to file (stdout by default)."""
    (file or sys.stdout).write(format_matrix(matrix))
