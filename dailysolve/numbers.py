"""Closed-form answers to small arithmetic puzzles, one function per puzzle."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "count_tuesdays",
    "max_tastiness",
    "is_prime",
    "min_steps",
    "server",
    "score_possible",
    "choices",
    "is_good_nibble",
    "blackjack_card",
    "qualifies",
    "binary_battle_time",
    "movie_time",
    "bath_capacity",
    "sale_total",
    "passes",
    "cheferen_duration",
    "present_coins",
    "mozzarella_plates",
    "jenga_possible",
    "apps_to_delete",
    "divisor_balance",
    "dec_inc",
    "is_cyclic",
]

_SERVERS = ("Alice", "Alice", "Bob", "Bob")


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def count_tuesdays(days: int) -> int:
    """Number of Tuesdays in a span of ``days`` days that starts on a Monday."""
    full_weeks, remaining = divmod(days, 7)
    return full_weeks + (1 if remaining >= 2 else 0)


def max_tastiness(a: int, b: int, c: int, d: int) -> int:
    """Best sum picking one of ``a``/``b`` and one of ``c``/``d``."""
    return max(a, b) + max(c, d)


def is_prime(n: int) -> bool:
    """Primality by trial division over candidates of the form 6k +/- 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    return all(n % i and n % (i + 2) for i in range(5, isqrt(n) + 1, 6))


def min_steps(a: int, b: int, k: int) -> int:
    """Fewest moves of at most ``k`` units needed to get from ``a`` to ``b``."""
    if k == 0:
        raise ZeroDivisionError("step size must not be zero")
    return _ceil_div(abs(a - b), k)


def server(p: int, q: int) -> str:
    """Who serves next after ``p`` and ``q`` points have been scored.

    Serve changes every two points, Alice serving first.
    """
    points_played = p + q
    return _SERVERS[points_played % 4]


def score_possible(a: int, b: int, c: int, d: int) -> bool:
    """Whether a score of ``a``-``b`` can later become ``c``-``d``."""
    return c >= a and d >= b


def choices(n: int) -> int:
    """Ordered pairs of distinct items out of ``n``."""
    return n * (n - 1)


def is_good_nibble(n: int) -> bool:
    """Whether ``n`` is a multiple of four."""
    return n % 4 == 0


def blackjack_card(a: int, b: int) -> int | None:
    """The card (1..10) that makes ``a + b`` up to 21, or None if there is none."""
    required = 21 - (a + b)
    return required if 1 <= required <= 10 else None


def qualifies(x: int, a: int, b: int) -> bool:
    """Whether ``a`` one-point and ``b`` two-point solves reach ``x`` points."""
    return a + 2 * b >= x


def binary_battle_time(n: int, a: int, b: int) -> int:
    """Time for a knockout of ``n`` players: ``a`` per round, ``b`` per break."""
    if n < 1:
        raise ValueError("the number of players must be positive")
    rounds = n.bit_length() - 1
    return rounds * a + max(rounds - 1, 0) * b


def movie_time(x: int, y: int) -> int:
    """Minutes to watch an ``x``-minute film with the first ``y`` at double speed."""
    return y // 2 + (x - y)


def bath_capacity(x: int, y: int) -> int:
    """People who can bathe with ``x`` litres when each needs ``y`` hot and ``y`` cold."""
    return x // (2 * y)


def sale_total(a: int, b: int, c: int) -> int:
    """Price of three items when the cheapest is free."""
    return a + b + c - min(a, b, c)


def passes(n: int, x: int, p: int) -> bool:
    """Whether ``x`` right answers of ``n`` (+3 right, -1 wrong) reach ``p``."""
    return 3 * x - (n - x) >= p


def cheferen_duration(n: int, a: int, b: int) -> int:
    """Total length of ``n`` talks alternating odd (``b``) and even (``a``) slots."""
    return (n // 2) * a + ((n + 1) // 2) * b


def present_coins(n: int) -> int:
    """Coins spent on ``n`` presents when every fifth one is free."""
    return n - n // 5


def mozzarella_plates(x: int, y: int, r: int) -> int:
    """Plates needed for ``x`` sticks plus one per 30 rupees of ``r``, ``y`` per plate."""
    sticks = x + r // 30
    return _ceil_div(sticks, y)


def jenga_possible(n: int, x: int) -> bool:
    """Whether ``x`` blocks can be shared equally among ``n`` players."""
    return x % n == 0


def apps_to_delete(s: int, x: int, y: int, z: int) -> int:
    """Fewest of two installed apps (sizes ``x``, ``y``) to remove to fit ``z``."""
    if s - (x + y) >= z:
        return 0
    if s - x >= z or s - y >= z:
        return 1
    return 2


def divisor_balance(n: int) -> int:
    """1, 0 or -1 as ``n`` has more, as many or fewer even than odd divisors."""
    even = odd = 0
    for i in range(1, isqrt(n) + 1 if n > 0 else 1):
        if n % i:
            continue
        for divisor in {i, n // i}:
            if divisor % 2:
                odd += 1
            else:
                even += 1
    return (even > odd) - (even < odd)


def dec_inc(n: int) -> int:
    """``n + 1`` when ``n`` is a multiple of four, ``n - 1`` otherwise."""
    return n + 1 if n % 4 == 0 else n - 1


def is_cyclic(a: int, b: int, c: int, d: int) -> bool:
    """Whether a quadrilateral with angles ``a``..``d`` has opposite angles summing to 180."""
    return a + c == 180 or b + d == 180