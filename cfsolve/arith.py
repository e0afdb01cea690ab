"""Solutions to small arithmetic problems."""

from __future__ import annotations

_CONTEST_MINUTES = 239
_MINUTES_PER_STEP = 5
_BILLS = (100, 20, 10, 5, 1)


def can_split_watermelon(weight: int) -> bool:
    """Tell whether ``weight`` splits into two positive even parts."""
    return weight > 3 and weight % 2 == 0


def borrow_amount(cost: int, money: int, count: int) -> int:
    """Dollars to borrow to buy ``count`` bananas, the i-th costing i*cost."""
    total = sum(cost * i for i in range(1, count + 1))
    return max(0, total - money)


def problems_before_party(n: int, k: int) -> int:
    """Problems solvable before leaving for a party ``k`` minutes away.

    The i-th problem takes 5*i minutes; there are at most ``n`` problems.
    """
    remaining = _CONTEST_MINUTES - k
    spent = solved = 0
    for i in range(1, n + 1):
        if spent >= remaining:
            break
        spent += _MINUTES_PER_STEP * i
        solved = i
    return solved


def min_bills(amount: int) -> int:
    """Fewest bills of 1, 5, 10, 20 and 100 that make up ``amount``."""
    if amount <= 0:
        return 0
    bills = 0
    for bill in _BILLS:
        count, amount = divmod(amount, bill)
        bills += count
    return bills