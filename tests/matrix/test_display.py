"""
Tests for text rendering and the demonstration driver.
"""

import io

from pymatrix import Matrix, format_matrix, print_matrix
from pymatrix.__main__ import build_operands, main


class TestFormat:

    def test_scenario_matrix(self, a):
        assert format_matrix(a) == "  1   2\n  3   4\n"

    def test_no_trailing_space(self):
        text = format_matrix(Matrix.from_array([[1, 2, 3], [4, 5, 6]]))
        for line in text.splitlines():
            assert not line.endswith(" ")

    def test_minimum_field_width(self):
        assert format_matrix(Matrix.from_array([[-4, 1234]])) == " -4 1234\n"

    def test_rounds_to_integer(self):
        assert format_matrix(Matrix.from_array([[0.25, 2.75]])) == "  0   3\n"

    def test_print_to_file(self, b):
        buf = io.StringIO()
        print_matrix(b, buf)
        assert buf.getvalue() == "  5   6\n  7   8\n"


class TestDemo:

    def test_operands(self):
        left, right = build_operands()
        assert left.to_list() == [[1, 1], [2, 2]]
        assert right.to_list() == [[5, 6], [5, 6]]

    def test_main_output(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Matrix l:\n  1   1\n  2   2\nMatrix r:\n")
        assert "HadamardMultiplication:\n  5   6\n 10  12\n" in out
        assert "HorizontalConcatenation:\n  1   1   5   6\n  2   2   5   6\n" in out
        assert out.endswith("Transposition:\n  1   2\n  1   2\n")
