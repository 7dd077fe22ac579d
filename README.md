# dailysolve

Short exercise solutions, each written as a plain Python function, with a
command that reads a problem's input in the usual contest format and prints
the answers.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

Each function takes the values of one test case and returns the answer.

### `dailysolve.numbers`

Arithmetic problems:

```python
from dailysolve.numbers import count_tuesdays, is_prime, sale_total

count_tuesdays(9)       # 2: Tuesdays in 9 days starting on a Monday
is_prime(7)             # True
sale_total(10, 20, 30)  # 50: the cheapest item is free
```

The module also has `max_tastiness`, `min_steps`, `server`, `score_possible`,
`choices`, `is_good_nibble`, `blackjack_card`, `qualifies`,
`binary_battle_time`, `movie_time`, `bath_capacity`, `passes`,
`cheferen_duration`, `present_coins`, `mozzarella_plates`, `jenga_possible`,
`apps_to_delete`, `divisor_balance`, `dec_inc` and `is_cyclic`.

Where a case has no answer, the function returns `None` (`blackjack_card`).
`min_steps` raises `ZeroDivisionError` for a step size of zero, and
`binary_battle_time` raises `ValueError` for fewer than one player.

### `dailysolve.sequences`

Problems over a list or a string:

```python
from dailysolve.sequences import encode_dna, leader_stats, polynomial_degree

encode_dna("0011")                     # "AG"
polynomial_degree([1, 0, 3, 0])        # 2
leader_stats([(10, 3), (0, 9)])        # Lead(winner=1, margin=7)
```

The module also has `count_boosted_multiples`, `min_flips` (returns `None`
when the values cannot be balanced) and `smallest_failed` (returns `None`
when no verdict is `'0'`). `encode_dna` raises `ValueError` for an odd-length
string or a character other than `0` and `1`.

### `dailysolve.cli.solve`

`solve(problem, text)` takes a problem code and the full input text of that
problem, and returns the text the command would print. An unknown code or
malformed input raises `ValueError`.

## Using the command

```
dailysolve PROBLEM [INPUT]
```

The input is read from the file `INPUT`, or from standard input when it is
left out, and one answer per case is written to standard output. On bad input
a message goes to standard error and the exit status is 1.

Problem codes (case does not matter): `BATH`, `BIN_BAT`, `BLACKJACK`, `CHEAT`,
`CHEFAPPS`, `CHEFEREN`, `CHN15A`, `CYCLICQD`, `DECINC`, `DNASTORAGE`,
`DPOLY`, `EVENODDDIV`, `FIZZBUZZ2303`, `JENGA`, `MAXTASTE`, `MINFLIPS`,
`MOVIE2X`, `MOZZ`, `MYSERVE`, `NIBBLE`, `PASSORFAIL`, `PRB01`, `PRESENTS`,
`QUALIFY`, `REACHFAST`, `SALE`, `TLG`, `TRUESCORE`, `WATESTCASES`.

Most problems start with a count of test cases followed by the cases;
`DECINC`, `MOVIE2X` and `TLG` read a single case. For `BLACKJACK` and
`MINFLIPS` a case with no answer prints `-1`; for `WATESTCASES` a case with
no failed test prints `2147483647`.

Example:

```
$ printf '2\n7\n8\n' | dailysolve PRB01
yes
no
```