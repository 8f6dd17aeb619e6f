"""
Demonstration driver: ``python -m pymatrix [--backend cpu|gpu|auto]``.

Builds two 2x2 matrices and prints the result of every binary operation
plus a transpose.
"""

import argparse
import sys

from pymatrix.matrix import (
    Matrix,
    add,
    hadamard,
    horicat,
    kronecker,
    mul,
    print_matrix,
    sub,
    transpose,
)


def build_operands() -> tuple[Matrix, Matrix]:
    """l[i][j] = i + 1 and r[i][j] = j + 5."""
    left = Matrix(2, 2)
    right = Matrix(2, 2)
    for i in range(left.rows):
        for j in range(right.columns):
            left[i, j] = i + 1
            right[i, j] = j + 5
    return left, right


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m pymatrix',
        description='Print the result of each matrix operation on two 2x2 matrices.',
    )
    parser.add_argument(
        '--backend', choices=['cpu', 'gpu', 'auto'], default='cpu',
        help='compute backend (default: cpu)',
    )
    args = parser.parse_args(argv)

    left, right = build_operands()
    out = sys.stdout

    out.write("Matrix l:\n")
    print_matrix(left, out)
    out.write("Matrix r:\n")
    print_matrix(right, out)

    steps = [
        ("KroneckerProduct:", kronecker),
        ("HadamardMultiplication:", hadamard),
        ("HorizontalConcatenation:", horicat),
        ("Basic matrix multiplication:", mul),
        ("Basic matrix addition:", add),
        ("Basic matrix subtraction:", sub),
    ]
    for heading, operation in steps:
        out.write(heading + "\n")
        print_matrix(operation(left, right, backend=args.backend), out)

    out.write("Transposition:\n")
    print_matrix(transpose(left, backend=args.backend), out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
