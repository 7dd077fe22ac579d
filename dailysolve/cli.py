"""Command-line front end: read a puzzle's input text and print its answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from dailysolve import numbers, sequences

__all__ = ["solve", "main"]

# Printed when no test failed; the largest value a 32-bit signed int can hold.
_NO_FAILURE = 2**31 - 1


class _Tokens:
    """Whitespace-separated tokens of an input text, consumed in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.int() for _ in range(count)]


def _choose(flag: bool, yes: str, no: str) -> str:
    return yes if flag else no


def _or_minus_one(value: int | None) -> str:
    return str(-1 if value is None else value)


def _polynomial(tokens: _Tokens) -> str:
    return str(sequences.polynomial_degree(tokens.ints(tokens.int())))


def _boosted(tokens: _Tokens) -> str:
    n, k = tokens.ints(2)
    return str(sequences.count_boosted_multiples(tokens.ints(n), k))


def _min_flips(tokens: _Tokens) -> str:
    return _or_minus_one(sequences.min_flips(tokens.ints(tokens.int())))


def _dna(tokens: _Tokens) -> str:
    n = tokens.int()
    bits = tokens.word()
    if len(bits) < n:
        raise ValueError(f"binary string shorter than its stated length {n}")
    return sequences.encode_dna(bits[:n])


def _failed_tests(tokens: _Tokens) -> str:
    n = tokens.int()
    sizes = tokens.ints(n)
    verdicts = tokens.word()
    smallest = sequences.smallest_failed(sizes, verdicts[:n])
    return str(_NO_FAILURE if smallest is None else smallest)


def _lead(tokens: _Tokens) -> str:
    n = tokens.int()
    rounds = [tuple(tokens.ints(2)) for _ in range(n)]
    lead = sequences.leader_stats(rounds)
    return f"{lead.winner} {lead.margin}"


@dataclass(frozen=True)
class _Problem:
    answer: Callable[[_Tokens], str]
    multiple_cases: bool = True


_PROBLEMS: dict[str, _Problem] = {
    "DPOLY": _Problem(_polynomial),
    "CHEAT": _Problem(lambda t: str(numbers.count_tuesdays(t.int()))),
    "MAXTASTE": _Problem(lambda t: str(numbers.max_tastiness(*t.ints(4)))),
    "CHN15A": _Problem(_boosted),
    "PRB01": _Problem(lambda t: _choose(numbers.is_prime(t.int()), "yes", "no")),
    "REACHFAST": _Problem(lambda t: str(numbers.min_steps(*t.ints(3)))),
    "MYSERVE": _Problem(lambda t: numbers.server(*t.ints(2))),
    "TRUESCORE": _Problem(
        lambda t: _choose(numbers.score_possible(*t.ints(4)), "POSSIBLE", "IMPOSSIBLE")
    ),
    "FIZZBUZZ2303": _Problem(lambda t: str(numbers.choices(t.int()))),
    "NIBBLE": _Problem(lambda t: _choose(numbers.is_good_nibble(t.int()), "Good", "Not Good")),
    "BLACKJACK": _Problem(lambda t: _or_minus_one(numbers.blackjack_card(*t.ints(2)))),
    "QUALIFY": _Problem(
        lambda t: _choose(numbers.qualifies(*t.ints(3)), "Qualify", "NotQualify")
    ),
    "MINFLIPS": _Problem(_min_flips),
    "BIN_BAT": _Problem(lambda t: str(numbers.binary_battle_time(*t.ints(3)))),
    "MOVIE2X": _Problem(lambda t: str(numbers.movie_time(*t.ints(2))), multiple_cases=False),
    "BATH": _Problem(lambda t: str(numbers.bath_capacity(*t.ints(2)))),
    "SALE": _Problem(lambda t: str(numbers.sale_total(*t.ints(3)))),
    "PASSORFAIL": _Problem(lambda t: _choose(numbers.passes(*t.ints(3)), "PASS", "FAIL")),
    "CHEFEREN": _Problem(lambda t: str(numbers.cheferen_duration(*t.ints(3)))),
    "PRESENTS": _Problem(lambda t: str(numbers.present_coins(t.int()))),
    "MOZZ": _Problem(lambda t: str(numbers.mozzarella_plates(*t.ints(3)))),
    "JENGA": _Problem(lambda t: _choose(numbers.jenga_possible(*t.ints(2)), "YES", "NO")),
    "CHEFAPPS": _Problem(lambda t: str(numbers.apps_to_delete(*t.ints(4)))),
    "DNASTORAGE": _Problem(_dna),
    "EVENODDDIV": _Problem(lambda t: str(numbers.divisor_balance(t.int()))),
    "WATESTCASES": _Problem(_failed_tests),
    "DECINC": _Problem(lambda t: str(numbers.dec_inc(t.int())), multiple_cases=False),
    "TLG": _Problem(_lead, multiple_cases=False),
    "CYCLICQD": _Problem(lambda t: _choose(numbers.is_cyclic(*t.ints(4)), "YES", "NO")),
}


def solve(problem: str, text: str) -> str:
    """Answer the named puzzle for the given input text, one line per case."""
    try:
        spec = _PROBLEMS[problem.upper()]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    tokens = _Tokens(text)
    if spec.multiple_cases:
        lines = [spec.answer(tokens) for _ in range(tokens.int())]
    else:
        lines = [spec.answer(tokens)]
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a puzzle's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="dailysolve", description="Solve one of the daily puzzles."
    )
    parser.add_argument(
        "problem",
        type=str.upper,
        choices=sorted(_PROBLEMS),
        help="puzzle code, e.g. PRB01",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=None,
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    source = args.input if args.input is not None else sys.stdin
    try:
        with source if args.input is not None else _nullcontext(source) as stream:
            text = stream.read()
        output = solve(args.problem, text)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"dailysolve: error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


class _nullcontext:
    def __init__(self, value):
        self._value = value

    def __enter__(self):
        return self._value

    def __exit__(self, *exc_info):
        return False