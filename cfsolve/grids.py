"""Solutions to problems on grids and matrices."""

from __future__ import annotations

from collections.abc import Sequence

_SIZE = 5
_CENTER = 2


def _ceil_div(value: int, step: int) -> int:
    return max(0, -(-value // step))


def flagstones(n: int, m: int, a: int) -> int:
    """Number of a×a flagstones needed to pave an n×m square."""
    if a < 1:
        raise ValueError(f"flagstone side must be positive, got {a}")
    if a == 1:
        return n * m
    return _ceil_div(n, a) * _ceil_div(m, a)


def recover_permutation(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Recover the permutation p of 1..2n from G[i][j] = p[i + j]."""
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    known = [row[0] for row in matrix] + list(matrix[-1][1:])
    total = 2 * n * (2 * n + 1) // 2
    return [total - sum(known), *known]


def beautiful_matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single one in a 5×5 matrix to its centre."""
    if len(matrix) != _SIZE or any(len(row) != _SIZE for row in matrix):
        raise ValueError("matrix must be 5x5")
    positions = [(i, j) for i, row in enumerate(matrix) for j, v in enumerate(row) if v == 1]
    if not positions:
        raise ValueError("matrix holds no one")
    i, j = positions[-1]
    return abs(i - _CENTER) + abs(j - _CENTER)


def max_dominoes(m: int, n: int) -> int:
    """Most 2×1 dominoes that fit on an m×n board without overlap."""
    if m < 0 or n < 0:
        raise ValueError("board dimensions must be non-negative")
    short, long = min(m, n), max(m, n)
    paired = short - short % 2
    extra = long // 2 if short % 2 else 0
    return long * paired // 2 + extra


def snake_pattern(n: int, m: int) -> list[str]:
    """Draw an n×m snake of '#' on '.' as a list of rows."""
    rows = []
    turns = 0
    for i in range(n):
        if i % 2 == 0:
            rows.append("#" * m)
            continue
        if turns % 2:
            rows.append("#" + "." * (m - 1))
        else:
            rows.append("." * (m - 1) + "#")
        turns += 1
    return rows