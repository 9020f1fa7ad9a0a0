"""
Shared plumbing for the matrix plugin tools.

Every tool reads one JSON object from stdin, writes one JSON object to stdout
and exits with status 1 when the result is not successful. Diagnostics go to
stderr so stdout only ever carries the result.
"""
import json
import sys
from typing import Any, Callable, Dict, List, Sequence

try:
    import sympy
except ImportError:
    print(json.dumps({
        "success": False,
        "error": "SymPy is not installed. Please install it using: pip install sympy"
    }))
    sys.exit(1)

from ..errors import MatrixError
from ..matrix import Matrix

# Size limits for performance
MAX_DIMENSION = 10
MAX_DETERMINANT_DIMENSION = 8

LOG_PREFIX = "[MatrixExpert]"

# Conversion used for the 0, 1 and -1 constants inside the core operations
ELEMENT_TYPE = sympy.Integer


def log(message: str) -> None:
    print(f"{LOG_PREFIX} {message}", file=sys.stderr)


def size_label(matrix: Matrix) -> str:
    return f"{matrix.m}×{matrix.n}"


def parse_matrix(matrix_data: Any, name: str = "Matrix") -> Matrix:
    """
    Validate a 2D list and build a Matrix of SymPy values from it.

    Entries may be numbers or strings SymPy can parse, such as "1/3" or "x".
    """
    if not isinstance(matrix_data, list):
        raise ValueError(f"{name} must be a 2D array (list of lists)")

    if not all(isinstance(row, list) for row in matrix_data):
        raise ValueError(f"{name} must be a 2D array (each row must be a list)")

    rows = []
    for i, row in enumerate(matrix_data):
        parsed_row = []
        for j, entry in enumerate(row):
            if isinstance(entry, bool) or not isinstance(entry, (int, float, str)):
                raise ValueError(f"{name} entry [{i}][{j}] must be a number or expression")
            try:
                parsed_row.append(sympy.sympify(entry))
            except (sympy.SympifyError, TypeError, SyntaxError) as e:
                raise ValueError(f"{name} entry [{i}][{j}] could not be parsed: {entry!r} ({e})")
        rows.append(parsed_row)

    matrix = Matrix(rows)

    if matrix.m > MAX_DIMENSION or matrix.n > MAX_DIMENSION:
        raise ValueError(
            f"Matrix dimensions limited to {MAX_DIMENSION}×{MAX_DIMENSION} for performance reasons"
        )

    return matrix


def format_value(value: Any) -> str:
    return str(sympy.simplify(value))


def format_matrix(matrix: Matrix) -> List[List[str]]:
    return [[format_value(entry) for entry in row] for row in matrix]


def failure(error: BaseException, action: str) -> Dict[str, Any]:
    """Turn an exception raised while running a tool into a result dict."""
    if isinstance(error, MatrixError):
        return {
            "success": False,
            "error": str(error),
            "error_type": error.kind
        }
    if isinstance(error, ValueError):
        return {
            "success": False,
            "error": str(error),
            "error_type": "validation_error"
        }
    log(f"Unexpected error {action}: {error!r}")
    return {
        "success": False,
        "error": f"Error {action}: {str(error)}",
        "error_type": "system_error"
    }


def run_tool(handler: Callable[..., Dict[str, Any]], params: Sequence[str]) -> None:
    """
    Read the tool arguments from stdin, call handler and print its result.

    Args:
        handler: Function taking the named parameters and returning a result dict
        params: Names of the required parameters, in handler argument order
    """
    try:
        # Read input from stdin
        input_data = json.load(sys.stdin)

        if not isinstance(input_data, dict):
            print(json.dumps({
                "success": False,
                "error": "Input must be a JSON object",
                "error_type": "input_error"
            }))
            sys.exit(1)

        # Validate inputs
        for param in params:
            if input_data.get(param) is None:
                print(json.dumps({
                    "success": False,
                    "error": f"Missing required parameter '{param}'",
                    "error_type": "input_error"
                }))
                sys.exit(1)

        result = handler(*(input_data[param] for param in params))

        # Return result
        print(json.dumps(result))

        # Exit with error code if computation failed
        if not result.get("success", False):
            sys.exit(1)

    except json.JSONDecodeError as e:
        print(json.dumps({
            "success": False,
            "error": f"Invalid JSON input: {str(e)}",
            "error_type": "input_error"
        }))
        sys.exit(1)

    except Exception as e:
        log(f"Fatal error: {e!r}")
        print(json.dumps({
            "success": False,
            "error": f"Unexpected error: {str(e)}",
            "error_type": "system_error"
        }))
        sys.exit(1)
