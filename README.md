# cfsolve

Solutions to a collection of short competitive-programming problems, written as
plain Python functions. Each function takes the problem's input as ordinary
Python values and returns the answer. You can reuse, combine and test the
solutions without going through standard input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

The functions are grouped by the kind of data they work on.

- `cfsolve.strings` covers word and string problems: `count_codeforces_mismatches`,
  `stones_to_remove`, `capitalize_word`, `bit_plus_plus`, `rearrange_sum`,
  `is_pangram`, `fix_word_case` and `abbreviate`.
- `cfsolve.arrays` covers problems over sequences of numbers: `min_parity_swaps`,
  `inverse_permutation`, `count_advancers`, `can_split_parity_sums`,
  `missing_team_score`, `count_solved`, `count_magnet_groups`, `form_teams`
  and `road_width`.
- `cfsolve.grids` covers board and matrix problems: `flagstones`,
  `recover_permutation`, `beautiful_matrix_moves`, `max_dominoes` and
  `snake_pattern`.
- `cfsolve.arith` covers small arithmetic problems: `can_split_watermelon`,
  `borrow_amount`, `problems_before_party` and `min_bills`.

For example:

```python
from cfsolve.strings import abbreviate, is_pangram
from cfsolve.arith import can_split_watermelon, min_bills
from cfsolve.grids import snake_pattern

abbreviate("localization")                          # "l10n"
is_pangram("TheQuickBrownFoxJumpsOverTheLazyDog")   # True
can_split_watermelon(8)                             # True
min_bills(125)                                      # 3
snake_pattern(3, 3)                                 # ["###", "..#", "###"]
```

Some functions check their input and raise `ValueError` when it does not fit the
problem. For example:

- `count_codeforces_mismatches` rejects a word longer than ten characters.
- `count_advancers` rejects a `k` outside the list.
- `form_teams` rejects a skill other than 1, 2 or 3.
- `flagstones` rejects a non-positive side.
- `recover_permutation` and `beautiful_matrix_moves` reject matrices of the wrong
  shape.

## Command line

Five problems read several test cases from one input. These are also available
as a command, which reads the judge-style input text and prints one answer line
per test case:

```
cfsolve PROBLEM [INPUT]
```

`PROBLEM` is one of `1367B`, `1829A`, `1857A`, `1877A` or `2094A`, in any letter
case. `INPUT` is a file to read. If you leave it out, the command reads standard
input:

```
cfsolve 1829A < input.txt
```

The input may be malformed, for example cut short or holding a non-integer where
an integer is expected. In that case the command prints an error message to
standard error and exits with status 1.

You can do the same work from Python with `cfsolve.cli.solve(problem, text)`.
It takes the problem identifier and the whole input text and returns the output
text. It raises `ValueError` for an unknown problem or malformed input.

## Limitations

The command only covers the five multi-test-case problems listed above. The other
problems are available only as library functions and have no input parser.