import io
import json

import pytest

from matrix_expert.tools import matrix_add, matrix_determinant, matrix_identity, matrix_multiply, matrix_transpose
from matrix_expert.tools.matrix_add import add_matrices
from matrix_expert.tools.matrix_determinant import compute_determinant
from matrix_expert.tools.matrix_identity import identity_matrix
from matrix_expert.tools.matrix_multiply import multiply_matrices
from matrix_expert.tools.matrix_transpose import transpose_matrix


def run_main(module, monkeypatch, capsys, payload):
    """Feed payload to a tool's main() and return (exit_code, result, stderr)."""
    raw = payload if isinstance(payload, str) else json.dumps(payload)
    monkeypatch.setattr("sys.stdin", io.StringIO(raw))
    exit_code = 0
    try:
        module.main()
    except SystemExit as e:
        exit_code = e.code
    captured = capsys.readouterr()
    return exit_code, json.loads(captured.out), captured.err


class TestDeterminant:
    def test_integer_matrix(self):
        result = compute_determinant([[1, 2], [3, 4]])
        assert result == {
            "success": True,
            "determinant": "-2",
            "matrix_size": "2×2",
            "is_singular": False,
            "permutations": 2
        }

    def test_singular_matrix(self):
        result = compute_determinant([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert result["success"]
        assert result["determinant"] == "0"
        assert result["is_singular"]
        assert result["permutations"] == 6

    def test_rational_entries(self):
        result = compute_determinant([["1/2", "1/3"], ["1/4", "1/5"]])
        assert result["determinant"] == "1/60"

    def test_symbolic_entries(self):
        result = compute_determinant([["x", 1], [1, "x"]])
        assert result["success"]
        assert result["determinant"] == "x**2 - 1"

    def test_non_square(self):
        result = compute_determinant([[1, 2, 3], [4, 5, 6]])
        assert not result["success"]
        assert result["error_type"] == "NotImplemented"

    def test_ragged(self):
        result = compute_determinant([[1, 2], [3]])
        assert result["error_type"] == "NonUniform"

    def test_empty(self):
        assert compute_determinant([])["error_type"] == "EmptyVector"
        assert compute_determinant([[]])["error_type"] == "EmptyVector"

    def test_not_a_list(self):
        result = compute_determinant("[[1]]")
        assert result["error_type"] == "validation_error"
        assert "2D array" in result["error"]

    def test_unparsable_entry(self):
        result = compute_determinant([[1, "2 +"], [3, 4]])
        assert result["error_type"] == "validation_error"

    def test_size_limit(self):
        identity = [[1 if i == j else 0 for j in range(9)] for i in range(9)]
        result = compute_determinant(identity)
        assert result["error_type"] == "validation_error"
        assert "limited" in result["error"]

    def test_main_success(self, monkeypatch, capsys):
        code, result, err = run_main(matrix_determinant, monkeypatch, capsys, {"matrix": [[2, 0], [0, 3]]})
        assert code == 0
        assert result["determinant"] == "6"
        assert "[MatrixExpert]" in err

    def test_main_missing_parameter(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_determinant, monkeypatch, capsys, {})
        assert code == 1
        assert result["error"] == "Missing required parameter 'matrix'"
        assert result["error_type"] == "input_error"

    def test_main_invalid_json(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_determinant, monkeypatch, capsys, "{not json")
        assert code == 1
        assert result["error"].startswith("Invalid JSON input")

    def test_main_failure_exit_code(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_determinant, monkeypatch, capsys, {"matrix": [[1, 2]]})
        assert code == 1
        assert result["error_type"] == "NotImplemented"


class TestMultiply:
    def test_product(self):
        result = multiply_matrices([[1, 2, 3], [4, 5, 6]], [[7, 8], [9, 10], [11, 12]])
        assert result == {
            "success": True,
            "product": [["58", "64"], ["139", "154"]],
            "matrix_a_size": "2×3",
            "matrix_b_size": "3×2",
            "result_size": "2×2"
        }

    def test_mismatch(self):
        result = multiply_matrices([[1, 2, 3], [4, 5, 6]], [[1, 2], [3, 4], [5, 6], [7, 8]])
        assert not result["success"]
        assert result["error_type"] == "Mismatch"
        assert "(3)" in result["error"] and "(4)" in result["error"]

    def test_bad_second_matrix(self):
        result = multiply_matrices([[1]], [1, 2])
        assert result["error"] == "matrix_b must be a 2D array (each row must be a list)"

    def test_main(self, monkeypatch, capsys):
        payload = {"matrix_a": [["1/2"]], "matrix_b": [[4]]}
        code, result, _ = run_main(matrix_multiply, monkeypatch, capsys, payload)
        assert code == 0
        assert result["product"] == [["2"]]


class TestAdd:
    def test_sum(self):
        result = add_matrices([[1, 2, 3], [4, 5, 6]], [[1, 1, 1], [1, 1, 1]])
        assert result["success"]
        assert result["sum"] == [["2", "3", "4"], ["5", "6", "7"]]
        assert result["result_size"] == "2×3"

    def test_mismatch(self):
        result = add_matrices([[1, 0, 0], [0, 1, 0], [0, 0, 1]], [[1, 2, 3], [4, 5, 6]])
        assert result["error_type"] == "Mismatch"

    def test_main_missing_second(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_add, monkeypatch, capsys, {"matrix_a": [[1]]})
        assert code == 1
        assert result["error"] == "Missing required parameter 'matrix_b'"


class TestTranspose:
    def test_transpose(self):
        result = transpose_matrix([[1, 2, 3], [4, 5, 6]])
        assert result == {
            "success": True,
            "transpose": [["1", "4"], ["2", "5"], ["3", "6"]],
            "matrix_size": "2×3",
            "result_size": "3×2"
        }

    def test_main(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_transpose, monkeypatch, capsys, {"matrix": [["a", "b"]]})
        assert code == 0
        assert result["transpose"] == [["a"], ["b"]]


class TestIdentity:
    def test_identity(self):
        result = identity_matrix(2)
        assert result == {
            "success": True,
            "identity": [["1", "0"], ["0", "1"]],
            "matrix_size": "2×2"
        }

    @pytest.mark.parametrize("size, error_type", [
        (0, "EmptyVector"),
        (-1, "validation_error"),
        (11, "validation_error"),
        ("3", "validation_error"),
        (True, "validation_error"),
    ])
    def test_invalid_size(self, size, error_type):
        result = identity_matrix(size)
        assert not result["success"]
        assert result["error_type"] == error_type

    def test_main(self, monkeypatch, capsys):
        code, result, _ = run_main(matrix_identity, monkeypatch, capsys, {"size": 3})
        assert code == 0
        assert result["matrix_size"] == "3×3"
