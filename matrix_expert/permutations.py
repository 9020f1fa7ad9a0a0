"""Lazy permutation generation with parity."""
from typing import Iterator, Sequence, Tuple


def permutations(n: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield every permutation of ``0..n-1`` exactly once.

    Recursive backtracking over a shared buffer, so only one permutation is
    held at a time. Calling again restarts the sequence.
    """
    if n < 0:
        raise ValueError(f"Permutation size must be non-negative (got {n})")

    current = []
    used = [False] * n

    def extend():
        if len(current) == n:
            yield tuple(current)
            return
        for index in range(n):
            if used[index]:
                continue
            used[index] = True
            current.append(index)
            yield from extend()
            current.pop()
            used[index] = False

    yield from extend()


def permutation_sign(perm: Sequence[int]) -> int:
    """Return +1 for an even permutation, -1 for an odd one."""
    inversions = 0
    for i in range(len(perm)):
        for j in range(i + 1, len(perm)):
            if perm[i] > perm[j]:
                inversions += 1
    return -1 if inversions % 2 else 1


def signed_permutations(n: int) -> Iterator[Tuple[Tuple[int, ...], int]]:
    for perm in permutations(n):
        yield perm, permutation_sign(perm)
