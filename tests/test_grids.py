import pytest

from cfsolve.grids import (
    beautiful_matrix_moves,
    flagstones,
    max_dominoes,
    recover_permutation,
    snake_pattern,
)


def test_flagstones_sample():
    assert flagstones(6, 6, 4) == 4


@pytest.mark.parametrize("n,m", [(3, 7), (1, 1), (10, 2)])
def test_flagstones_unit(n, m):
    assert flagstones(n, m, 1) == n * m


@pytest.mark.parametrize("x,y,a", [(2, 3, 5), (1, 1, 1000000000), (4, 4, 2)])
def test_flagstones_exact_multiple(x, y, a):
    assert flagstones(a * x, a * y, a) == x * y


def test_flagstones_overhang_adds_row():
    assert flagstones(9, 8, 4) == flagstones(12, 8, 4)


def test_flagstones_bad_side():
    with pytest.raises(ValueError):
        flagstones(3, 3, 0)


def _matrix_from(perm):
    n = len(perm) // 2
    return [[perm[i + j + 1] for j in range(n)] for i in range(n)]


@pytest.mark.parametrize(
    "perm",
    [[3, 1, 4, 6, 2, 5], [2, 1], [8, 1, 2, 3, 4, 5, 6, 7], [1, 2, 3, 4]],
)
def test_recover_permutation_roundtrip(perm):
    assert recover_permutation(_matrix_from(perm)) == perm


@pytest.mark.parametrize("matrix", [[], [[1, 2], [3]], [[1, 2]]])
def test_recover_permutation_bad_shape(matrix):
    with pytest.raises(ValueError):
        recover_permutation(matrix)


def _grid_with_one(i, j):
    grid = [[0] * 5 for _ in range(5)]
    grid[i][j] = 1
    return grid


def test_moves_center():
    assert beautiful_matrix_moves(_grid_with_one(2, 2)) == 0


def test_moves_corner():
    assert beautiful_matrix_moves(_grid_with_one(0, 4)) == 4


@pytest.mark.parametrize("i,j", [(0, 1), (1, 3), (4, 2), (3, 0)])
def test_moves_symmetry(i, j):
    moves = beautiful_matrix_moves(_grid_with_one(i, j))
    assert beautiful_matrix_moves(_grid_with_one(4 - i, 4 - j)) == moves
    assert beautiful_matrix_moves(_grid_with_one(j, i)) == moves


def test_moves_no_one():
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 5 for _ in range(5)])


def test_moves_wrong_size():
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[1]])


@pytest.mark.parametrize("m,n", [(2, 4), (3, 3), (1, 1), (1, 16), (15, 16), (7, 9)])
def test_dominoes_cover_board(m, n):
    count = max_dominoes(m, n)
    assert max_dominoes(n, m) == count
    assert m * n - 2 * count in (0, 1)


def test_dominoes_negative():
    with pytest.raises(ValueError):
        max_dominoes(-1, 3)


def test_snake_small():
    assert snake_pattern(3, 3) == ["###", "..#", "###"]


@pytest.mark.parametrize("n,m", [(3, 4), (5, 3), (9, 9), (1, 7)])
def test_snake_shape(n, m):
    rows = snake_pattern(n, m)
    assert len(rows) == n
    assert all(len(row) == m for row in rows)
    assert all(set(row) == {"#"} for row in rows[::2])
    odd_rows = rows[1::2]
    assert all(row.count("#") == 1 for row in odd_rows)
    for first, second in zip(odd_rows, odd_rows[1:]):
        assert first == second[::-1]
        assert first != second