"""
Rectangular matrices over an arbitrary numeric element type.

Matrices are validated once on construction and never change afterwards;
every operation here returns a fresh Matrix (or a scalar, for the
determinant) and raises a MatrixError subclass on a shape problem.
"""
from typing import Generic, Iterable, Iterator, List, Optional, Tuple

from .errors import EmptyVectorError, MismatchError, NonUniformError, NotImplementedShapeError
from .numeric import ElementType, T, cast
from .permutations import signed_permutations
from .vector import add_vectors


class Matrix(Generic[T]):
    """
    An m×n grid of elements stored as a tuple of row tuples.

    Args:
        rows: Iterable of rows, each an iterable of elements

    Raises:
        EmptyVectorError: if there are no rows or the first row is empty
        NonUniformError: if any row's length differs from the first row's
    """

    __slots__ = ("rows", "m", "n")

    def __init__(self, rows: Iterable[Iterable[T]]):
        rows = tuple(tuple(row) for row in rows)

        m = len(rows)
        if m == 0:
            raise EmptyVectorError("Matrix must have at least one row")

        n = len(rows[0])
        if n == 0:
            raise EmptyVectorError("Matrix rows must have at least one column")

        for i in range(1, m):
            if len(rows[i]) != n:
                raise NonUniformError(
                    f"All rows must have the same length (row 0 has {n}, row {i} has {len(rows[i])})"
                )

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "m", m)
        object.__setattr__(self, "n", n)

    @classmethod
    def _from_trusted(cls, rows: Tuple[Tuple[T, ...], ...], m: int, n: int) -> "Matrix[T]":
        # Rows built by an operation are rectangular already
        matrix = cls.__new__(cls)
        object.__setattr__(matrix, "rows", rows)
        object.__setattr__(matrix, "m", m)
        object.__setattr__(matrix, "n", n)
        return matrix

    def __setattr__(self, name, value):
        raise AttributeError(f"Matrix is immutable (cannot set '{name}')")

    def __delattr__(self, name):
        raise AttributeError(f"Matrix is immutable (cannot delete '{name}')")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.m, self.n

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self.rows[i][j]
        return self.rows[index]

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return self.m

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.rows == other.rows

    def __hash__(self):
        return hash(self.rows)

    def __repr__(self):
        return f"Matrix({self.to_list()!r})"

    def to_list(self) -> List[List[T]]:
        return [list(row) for row in self.rows]

    def transpose(self) -> "Matrix[T]":
        """Return the n×m matrix with rows and columns swapped."""
        rows = tuple(
            tuple(self.rows[i][j] for i in range(self.m))
            for j in range(self.n)
        )
        return Matrix._from_trusted(rows, self.n, self.m)


def create_identity_matrix(dim: int, element_type: Optional[ElementType] = None) -> Matrix:
    """
    Build a dim×dim identity matrix.

    Args:
        dim: Number of rows and columns
        element_type: Conversion from int used for the 0 and 1 entries

    Raises:
        EmptyVectorError: if dim is 0
    """
    if dim < 0:
        raise ValueError(f"Identity size must be non-negative (got {dim})")
    if dim == 0:
        raise EmptyVectorError("Identity matrix size must be at least 1")

    zero = cast(0, element_type)
    one = cast(1, element_type)

    rows = tuple(
        tuple(one if j == i else zero for j in range(dim))
        for i in range(dim)
    )
    return Matrix._from_trusted(rows, dim, dim)


def is_square(matrix: Matrix) -> bool:
    return matrix.m == matrix.n


def can_add(matrix_1: Matrix, matrix_2: Matrix) -> bool:
    """True when both matrices have the same shape."""
    return matrix_1.m == matrix_2.m and matrix_1.n == matrix_2.n


def can_multiply(matrix_1: Matrix, matrix_2: Matrix) -> bool:
    """True when the inner dimensions agree."""
    return matrix_1.n == matrix_2.m


def add_matrices(matrix_1: Matrix[T], matrix_2: Matrix[T]) -> Matrix[T]:
    """
    Element-wise sum of two matrices of the same shape.

    Raises:
        MismatchError: if the shapes differ
    """
    if not can_add(matrix_1, matrix_2):
        raise MismatchError(
            f"Cannot add matrices of shape {matrix_1.m}×{matrix_1.n} and {matrix_2.m}×{matrix_2.n}"
        )

    rows = tuple(
        tuple(add_vectors(matrix_1.rows[i], matrix_2.rows[i]))
        for i in range(matrix_1.m)
    )
    return Matrix._from_trusted(rows, matrix_1.m, matrix_1.n)


def multiply_matrices(
    matrix_1: Matrix[T],
    matrix_2: Matrix[T],
    element_type: Optional[ElementType] = None,
) -> Matrix[T]:
    """
    Matrix product ``matrix_1 · matrix_2``.

    Each entry is accumulated with ``+=`` starting from the element type's zero.

    Raises:
        EmptyVectorError: if either matrix has a zero dimension
        MismatchError: if matrix_1's columns differ from matrix_2's rows
    """
    if matrix_1.m == 0 or matrix_1.n == 0 or matrix_2.m == 0 or matrix_2.n == 0:
        raise EmptyVectorError("Cannot multiply a matrix with a zero dimension")

    if not can_multiply(matrix_1, matrix_2):
        raise MismatchError(
            f"Cannot multiply matrices: matrix_a columns ({matrix_1.n}) "
            f"must equal matrix_b rows ({matrix_2.m})"
        )

    rows = []
    for i in range(matrix_1.m):
        new_row = []
        for j in range(matrix_2.n):
            element_sum = cast(0, element_type)
            for k in range(matrix_1.n):
                element_sum += matrix_1.rows[i][k] * matrix_2.rows[k][j]
            new_row.append(element_sum)
        rows.append(tuple(new_row))

    return Matrix._from_trusted(tuple(rows), matrix_1.m, matrix_2.n)


def get_determinant(matrix: Matrix[T], element_type: Optional[ElementType] = None) -> T:
    """
    Determinant by the Leibniz formula.

    Sums ``sign(σ) · Π matrix[i][σ(i)]`` over all n! permutations σ, so it is
    only practical for small matrices. No pivoting is done: the result is
    exact for exact element types and carries ordinary rounding for floats.

    Raises:
        NotImplementedShapeError: if the matrix is not square
    """
    if not is_square(matrix):
        raise NotImplementedShapeError(
            f"Determinant is only defined for square matrices (got {matrix.m}×{matrix.n})"
        )

    size = matrix.m
    rows = matrix.rows
    determinant = cast(0, element_type)

    for perm, sign in signed_permutations(size):
        term = cast(1, element_type)
        for i in range(size):
            term *= rows[i][perm[i]]
        determinant += cast(sign, element_type) * term

    return determinant
