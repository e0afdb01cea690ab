"""Command-line runner for the multi-test-case problems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from cfsolve.arrays import can_split_parity_sums, min_parity_swaps, missing_team_score
from cfsolve.grids import recover_permutation
from cfsolve.strings import count_codeforces_mismatches


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.integer() for _ in range(count)]


def _cases(tokens: _Tokens) -> range:
    count = tokens.integer()
    if count < 0:
        raise ValueError(f"number of test cases must be non-negative, got {count}")
    return range(count)


def _parity_swaps(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield str(min_parity_swaps(tokens.integers(tokens.integer())))


def _codeforces(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        yield str(count_codeforces_mismatches(tokens.word()))


def _parity_sums(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        values = tokens.integers(tokens.integer())
        yield "YES" if can_split_parity_sums(values) else "NO"


def _team_score(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        players = tokens.integer()
        if players < 1:
            raise ValueError(f"number of players must be positive, got {players}")
        yield str(missing_team_score(tokens.integers(players - 1)))


def _permutation(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n = tokens.integer()
        matrix = [tokens.integers(n) for _ in range(n)]
        yield " ".join(map(str, recover_permutation(matrix)))


_SOLVERS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "1367B": _parity_swaps,
    "1829A": _codeforces,
    "1857A": _parity_sums,
    "1877A": _team_score,
    "2094A": _permutation,
}


def solve(problem: str, text: str) -> str:
    """Solve every test case of ``problem`` given as ``text``; return the output."""
    try:
        solver = _SOLVERS[problem.upper()]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return "".join(f"{line}\n" for line in solver(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="cfsolve", description="Solve a multi-test-case problem."
    )
    parser.add_argument(
        "problem",
        type=str.upper,
        choices=sorted(_SOLVERS),
        help="problem identifier",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=None,
        help="input file (standard input if omitted)",
    )
    args = parser.parse_args(argv)

    source = args.input if args.input is not None else sys.stdin
    try:
        text = source.read()
    finally:
        if args.input is not None:
            args.input.close()

    try:
        output = solve(args.problem, text)
    except ValueError as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())