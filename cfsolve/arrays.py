"""Solutions to problems over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_SKILLS = (1, 2, 3)


def min_parity_swaps(values: Sequence[int]) -> int:
    """Swaps needed so each index has the parity of its value, or -1."""
    misplaced_odd = sum(1 for i, v in enumerate(values) if i % 2 == 0 and v % 2 != 0)
    misplaced_even = sum(1 for i, v in enumerate(values) if i % 2 != 0 and v % 2 == 0)
    return misplaced_odd if misplaced_odd == misplaced_even else -1


def inverse_permutation(perm: Sequence[int]) -> list[int]:
    """Return, for each value 1..n, the 1-based position where it first occurs."""
    positions: dict[int, int] = {}
    for index, value in enumerate(perm):
        positions.setdefault(value, index)
    try:
        return [positions[value] + 1 for value in range(1, len(perm) + 1)]
    except KeyError as exc:
        raise ValueError(f"value {exc.args[0]} missing from permutation") from None


def count_advancers(scores: Sequence[int], k: int) -> int:
    """Count positive scores at least as high as the k-th place score."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must be between 1 and {len(scores)}, got {k}")
    threshold = scores[k - 1]
    return sum(1 for s in scores if s >= threshold and s > 0)


def can_split_parity_sums(values: Iterable[int]) -> bool:
    """Tell whether the sums of odd and of even values share parity."""
    odd_sum = even_sum = 0
    for v in values:
        if v & 1:
            odd_sum += v
        else:
            even_sum += v
    return (odd_sum & 1) == (even_sum & 1)


def missing_team_score(scores: Iterable[int]) -> int:
    """Score of the absent player, given that all scores sum to zero."""
    return -sum(scores)


def count_solved(problems: Iterable[Sequence[int]]) -> int:
    """Count problems that at least two of the three friends are sure of."""
    return sum(1 for triple in problems if sum(x == 1 for x in triple) >= 2)


def count_magnet_groups(magnets: Sequence[object]) -> int:
    """Count groups formed by a row of magnets."""
    return 1 + sum(a != b for a, b in zip(magnets, magnets[1:]))


def form_teams(skills: Sequence[int]) -> list[tuple[int, int, int]]:
    """Form as many teams as possible, each with one child of every skill.

    Children are given by 1-based index.
    """
    groups: dict[int, list[int]] = {s: [] for s in _SKILLS}
    for index, skill in enumerate(skills, start=1):
        if skill not in groups:
            raise ValueError(f"skill must be 1, 2 or 3, got {skill}")
        groups[skill].append(index)
    size = min(len(g) for g in groups.values())
    if size == 0:
        return []
    return list(zip(*(groups[s][-size:] for s in _SKILLS)))


def road_width(heights: Iterable[int], fence_height: int) -> int:
    """Width of road needed: tall people bend over and take double width."""
    return sum(1 if h <= fence_height else 2 for h in heights)