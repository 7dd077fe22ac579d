import pytest

from dailysolve.numbers import (
    apps_to_delete,
    bath_capacity,
    binary_battle_time,
    blackjack_card,
    cheferen_duration,
    choices,
    count_tuesdays,
    dec_inc,
    divisor_balance,
    is_cyclic,
    is_good_nibble,
    is_prime,
    jenga_possible,
    max_tastiness,
    min_steps,
    movie_time,
    mozzarella_plates,
    passes,
    present_coins,
    qualifies,
    sale_total,
    score_possible,
    server,
)


@pytest.mark.parametrize("weeks", [0, 1, 5, 100])
def test_count_tuesdays_whole_weeks(weeks):
    assert count_tuesdays(7 * weeks) == weeks


@pytest.mark.parametrize("weeks", [0, 3, 10])
def test_count_tuesdays_partial_week(weeks):
    base = count_tuesdays(7 * weeks)
    assert count_tuesdays(7 * weeks + 1) == base
    assert count_tuesdays(7 * weeks + 2) == count_tuesdays(7 * weeks + 7)
    assert count_tuesdays(7 * weeks + 6) == count_tuesdays(7 * (weeks + 1))


@pytest.mark.parametrize("a,b,c,d", [(1, 5, 7, 2), (3, 3, 9, 1), (10, 2, 4, 8)])
def test_max_tastiness_is_best_pair(a, b, c, d):
    result = max_tastiness(a, b, c, d)
    combos = [a + c, a + d, b + c, b + d]
    assert result in combos
    assert all(result >= combo for combo in combos)
    assert max_tastiness(b, a, d, c) == result


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 29, 97, 7919])
def test_is_prime_primes(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 35, 49, 91, 7917])
def test_is_prime_non_primes(n):
    assert not is_prime(n)


@pytest.mark.parametrize("k,m", [(1, 5), (3, 4), (7, 1)])
def test_min_steps_exact_and_rounded(k, m):
    assert min_steps(0, k * m, k) == m
    assert min_steps(k * m, 0, k) == m
    assert min_steps(0, k * m + 1, k) == min_steps(0, k * (m + 1), k)


def test_min_steps_same_place():
    assert min_steps(4, 4, 3) == min_steps(9, 9, 1)
    assert min_steps(4, 4, 3) == 0


def test_min_steps_zero_step():
    with pytest.raises(ZeroDivisionError):
        min_steps(1, 2, 0)


@pytest.mark.parametrize(
    "p,q,expected",
    [(0, 0, "Alice"), (1, 0, "Alice"), (2, 0, "Bob"), (1, 2, "Bob"), (2, 2, "Alice")],
)
def test_server(p, q, expected):
    assert server(p, q) == expected
    assert server(p + 4, q) == expected


def test_score_possible():
    assert score_possible(1, 1, 1, 1)
    assert score_possible(2, 3, 5, 3)
    assert not score_possible(2, 3, 1, 5)
    assert not score_possible(2, 3, 5, 2)


@pytest.mark.parametrize("n", [1, 2, 5, 40])
def test_choices_symmetry_and_growth(n):
    assert choices(n) == choices(1 - n)
    assert choices(n + 1) - choices(n) == 2 * n


def test_choices_pinned():
    assert choices(3) == 6


def test_is_good_nibble():
    assert is_good_nibble(4)
    assert is_good_nibble(16)
    assert not is_good_nibble(5)
    assert not is_good_nibble(10)


@pytest.mark.parametrize("a,b", [(10, 10), (5, 6), (2, 9), (1, 10)])
def test_blackjack_card_completes_21(a, b):
    card = blackjack_card(a, b)
    assert card is not None
    assert a + b + card == 21


@pytest.mark.parametrize("a,b", [(1, 1), (10, 11), (11, 11)])
def test_blackjack_card_impossible(a, b):
    assert blackjack_card(a, b) is None


def test_qualifies():
    assert qualifies(5, 1, 2)
    assert qualifies(5, 3, 1)
    assert not qualifies(5, 0, 2)


@pytest.mark.parametrize("a,b", [(3, 5), (1, 1), (10, 0)])
def test_binary_battle_time(a, b):
    assert binary_battle_time(1, a, b) == 0
    assert binary_battle_time(2, a, b) == a
    assert binary_battle_time(8, a, b) == binary_battle_time(4, a, b) + a + b
    assert binary_battle_time(5, a, b) == binary_battle_time(4, a, b)


def test_binary_battle_time_no_players():
    with pytest.raises(ValueError):
        binary_battle_time(0, 1, 1)


@pytest.mark.parametrize("x,h", [(100, 10), (50, 0), (8, 4)])
def test_movie_time(x, h):
    assert movie_time(x, 0) == x
    assert movie_time(x, 2 * h) == x - h


@pytest.mark.parametrize("y,k", [(1, 3), (5, 2), (7, 0)])
def test_bath_capacity(y, k):
    assert bath_capacity(2 * y * k, y) == k
    assert bath_capacity(2 * y * k + 1, y) == k


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (10, 5, 7), (4, 4, 4)])
def test_sale_total_order_independent(a, b, c):
    assert sale_total(a, b, c) == sale_total(c, a, b) == sale_total(b, c, a)


def test_sale_total_cheapest_free():
    assert sale_total(9, 2, 9) == 9 + 9


@pytest.mark.parametrize("n", [1, 4, 10])
def test_passes(n):
    assert passes(n, n, 3 * n)
    assert not passes(n, n, 3 * n + 1)
    assert passes(n, 0, -n)
    assert not passes(n, 0, -n + 1)


@pytest.mark.parametrize("a,b", [(1, 2), (5, 3)])
def test_cheferen_duration(a, b):
    assert cheferen_duration(1, a, b) == b
    assert cheferen_duration(6, a, b) == 3 * (a + b)
    assert cheferen_duration(7, a, b) == cheferen_duration(6, a, b) + b


@pytest.mark.parametrize("n", [0, 1, 4])
def test_present_coins_below_five(n):
    assert present_coins(n) == n


def test_present_coins_every_fifth_free():
    assert present_coins(10) == present_coins(5) + present_coins(5)
    assert present_coins(5) == present_coins(4)


@pytest.mark.parametrize("y,k", [(2, 3), (5, 1), (1, 7)])
def test_mozzarella_plates(y, k):
    assert mozzarella_plates(k * y, y, 0) == k
    assert mozzarella_plates(k * y, y, 29) == k
    assert mozzarella_plates(k * y, y, 30) == mozzarella_plates(k * y + 1, y, 0)


def test_mozzarella_extra_plate():
    assert mozzarella_plates(4, 2, 30) == mozzarella_plates(6, 2, 0)


def test_jenga_possible():
    assert jenga_possible(3, 9)
    assert jenga_possible(5, 0)
    assert not jenga_possible(4, 10)


def test_apps_to_delete():
    assert apps_to_delete(10, 1, 2, 3) == 0
    assert apps_to_delete(10, 1, 2, 8) == 1
    assert apps_to_delete(10, 4, 5, 8) == 2


@pytest.mark.parametrize("n", [1, 3, 9, 15, 21])
def test_divisor_balance_odd_numbers(n):
    assert divisor_balance(n) == -1


@pytest.mark.parametrize("n", [2, 6, 10])
def test_divisor_balance_twice_odd(n):
    assert divisor_balance(n) == 0


@pytest.mark.parametrize("n", [4, 8, 12, 36])
def test_divisor_balance_multiple_of_four(n):
    assert divisor_balance(n) == 1


@pytest.mark.parametrize("n", [0, 4, 8, 100])
def test_dec_inc_multiple_of_four(n):
    assert dec_inc(n) == n + 1


@pytest.mark.parametrize("n", [1, 2, 3, 7, 101])
def test_dec_inc_other(n):
    assert dec_inc(n) == n - 1


def test_is_cyclic():
    assert is_cyclic(90, 90, 90, 90)
    assert is_cyclic(100, 60, 80, 120)
    assert is_cyclic(10, 100, 20, 80)
    assert not is_cyclic(100, 70, 70, 120)