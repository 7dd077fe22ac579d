"""Answers to puzzles whose input is a sequence of values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

__all__ = [
    "Lead",
    "polynomial_degree",
    "count_boosted_multiples",
    "min_flips",
    "encode_dna",
    "smallest_failed",
    "leader_stats",
]

_DNA = {"00": "A", "01": "T", "10": "C", "11": "G"}


class Lead(NamedTuple):
    """The player holding the largest lead, and that lead."""

    winner: int
    margin: int


def polynomial_degree(coefficients: Iterable[int]) -> int:
    """Index of the last non-zero coefficient, or -1 for the zero polynomial."""
    degree = -1
    for power, coefficient in enumerate(coefficients):
        if coefficient != 0:
            degree = power
    return degree


def count_boosted_multiples(characteristics: Iterable[int], k: int) -> int:
    """How many values become a multiple of seven once ``k`` is added."""
    return sum(1 for value in characteristics if (value + k) % 7 == 0)


def min_flips(values: Iterable[int]) -> int | None:
    """Fewest sign flips that make a list of 1 and -1 sum to zero, or None."""
    total = sum(1 if value == 1 else -1 for value in values)
    if total % 2:
        return None
    return abs(total) // 2


def encode_dna(bits: str) -> str:
    """Encode a binary string two bits at a time as A, T, C and G."""
    if len(bits) % 2:
        raise ValueError("binary string must have an even length")
    pairs = (bits[i : i + 2] for i in range(0, len(bits), 2))
    try:
        return "".join(_DNA[pair] for pair in pairs)
    except KeyError as exc:
        raise ValueError(f"not a binary pair: {exc.args[0]!r}") from None


def smallest_failed(sizes: Iterable[int], verdicts: str) -> int | None:
    """Smallest size among tests whose verdict is '0', or None if none failed."""
    try:
        failed = [size for size, verdict in zip(sizes, verdicts, strict=True) if verdict == "0"]
    except ValueError:
        raise ValueError("sizes and verdicts differ in length") from None
    return min(failed, default=None)


def leader_stats(rounds: Iterable[tuple[int, int]]) -> Lead:
    """Largest cumulative lead over all rounds and which player held it."""
    first = second = 0
    best = Lead(0, 0)
    for s, t in rounds:
        first += s
        second += t
        current = Lead(1, first - second) if first > second else Lead(2, second - first)
        if current.margin > best.margin:
            best = current
    return best