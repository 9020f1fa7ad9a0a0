"""Exceptions raised by matrix construction and arithmetic."""


class MatrixError(Exception):
    """Base class for every matrix failure."""

    kind = "MatrixError"
    default_message = "Matrix operation failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class EmptyVectorError(MatrixError, ValueError):
    kind = "EmptyVector"
    default_message = "Vector must contain at least one element"


class NonUniformError(MatrixError, ValueError):
    kind = "NonUniform"
    default_message = "All rows must have the same length"


class MismatchError(MatrixError, ValueError):
    kind = "Mismatch"
    default_message = "Dimensions do not match"


class NotImplementedShapeError(MatrixError, NotImplementedError):
    kind = "NotImplemented"
    default_message = "Operation is not implemented for this matrix shape"
