from typing import List, Sequence

from .errors import EmptyVectorError, MismatchError
from .numeric import T


def add_vectors(vector_1: Sequence[T], vector_2: Sequence[T]) -> List[T]:
    """Element-wise sum of two vectors of equal length."""
    if len(vector_1) != len(vector_2):
        raise MismatchError(
            f"Cannot add vectors of length {len(vector_1)} and {len(vector_2)}"
        )
    if not vector_1:
        raise EmptyVectorError()
    return [a + b for a, b in zip(vector_1, vector_2)]
