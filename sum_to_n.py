"""
Three ways to compute 1 + 2 + ... + n.

Every variant returns 0 for n <= 0.
"""

import sys


def sum_to_n_a(n: int) -> int:
    """Closed form (Gauss).

    Time: O(1)
    Space: O(1)
    """
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def sum_to_n_b(n: int) -> int:
    """Running total.

    Time: O(n)
    Space: O(1), a single accumulator holds the state.
    """
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def _sum_recursive(n: int) -> int:
    if n <= 0:
        return 0
    if n == 1:
        return 1
    return n + _sum_recursive(n - 1)


def sum_to_n_c(n: int) -> int:
    """Recursion.

    Time: O(n)
    Space: O(n), one stack frame per term.
    """
    needed = n + 100
    limit = sys.getrecursionlimit()
    if needed <= limit:
        return _sum_recursive(n)

    sys.setrecursionlimit(needed + limit)
    try:
        return _sum_recursive(n)
    finally:
        sys.setrecursionlimit(limit)
