"""
Numeric capability interface for matrix elements.

An element type only has to support the operators a given operation uses,
plus a conversion from the small integers 0, 1 and -1. That conversion is
passed around as ``element_type`` (``int``, ``Fraction``, ``sympy.Integer``,
or any callable taking an int). When it is omitted, plain ints are used and
Python's numeric promotion takes care of mixing them with the elements.
"""
from typing import Any, Callable, Optional, Protocol, TypeVar


class Numeric(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=Numeric)

ElementType = Callable[[int], Any]


def cast(value: int, element_type: Optional[ElementType] = None) -> Any:
    """Convert a small integer into the element type."""
    if element_type is None:
        return value
    return element_type(value)
