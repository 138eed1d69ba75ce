import pytest

from chancap.engine import (
    do_recursion,
    gen_rand_all,
    gen_rand_array,
    init_by_array,
    init_gen_rand,
    period_certification,
    to_close1_open2,
    to_close_open,
    to_open_close,
    to_open_open,
)
from chancap.params import HIGH_CONST, LOW_MASK, get_params

MEXPS = [521, 19937]


def _masked(status, params):
    return all(
        (half & ~LOW_MASK) == HIGH_CONST
        for word in status[: params.n]
        for half in word
    )


@pytest.mark.parametrize("mexp", MEXPS)
def test_init_gen_rand_shape_and_mask(mexp):
    params = get_params(mexp)
    status = init_gen_rand(1234, params)
    assert len(status) == params.n + 1
    assert _masked(status, params)


@pytest.mark.parametrize("mexp", MEXPS)
def test_init_gen_rand_deterministic_and_seed_dependent(mexp):
    params = get_params(mexp)
    assert init_gen_rand(7, params) == init_gen_rand(7, params)
    assert init_gen_rand(7, params) != init_gen_rand(8, params)


def test_seed_truncated_to_32_bits():
    params = get_params(521)
    assert init_gen_rand(5 + 2**32, params) == init_gen_rand(5, params)


@pytest.mark.parametrize("mexp", MEXPS)
def test_init_by_array(mexp):
    params = get_params(mexp)
    a = init_by_array([1, 2, 3, 4], params)
    b = init_by_array([1, 2, 3, 4], params)
    c = init_by_array([1, 2, 3, 5], params)
    assert a == b
    assert a != c
    assert len(a) == params.n + 1
    assert _masked(a, params)


def test_init_by_array_long_key():
    params = get_params(521)
    key = list(range(200))
    status = init_by_array(key, params)
    assert _masked(status, params)
    assert status != init_by_array(key[:-1], params)


def test_do_recursion_zero_is_zero():
    params = get_params(521)
    zero = (0, 0)
    assert do_recursion(zero, zero, zero, params) == (zero, zero)


def test_do_recursion_is_linear():
    params = get_params(19937)
    a1, b1, l1 = (0x123456789, 0xABCDEF), (0xFFFF0000FFFF, 0x1), (0x42, 0x9999)
    a2, b2, l2 = (0x5555, 0xAAAA0000), (0x77, 0x1234567890ABCDEF), (0x1, 0x31337)

    def xor(x, y):
        return (x[0] ^ y[0], x[1] ^ y[1])

    r1, n1 = do_recursion(a1, b1, l1, params)
    r2, n2 = do_recursion(a2, b2, l2, params)
    r, n = do_recursion(xor(a1, a2), xor(b1, b2), xor(l1, l2), params)
    assert r == xor(r1, r2)
    assert n == xor(n1, n2)


def test_do_recursion_results_fit_64_bits():
    params = get_params(521)
    full = (2**64 - 1, 2**64 - 1)
    r, lung = do_recursion(full, full, full, params)
    assert all(0 <= v < 2**64 for v in r + lung)


@pytest.mark.parametrize("mexp", MEXPS)
def test_gen_rand_array_matches_gen_rand_all(mexp):
    params = get_params(mexp)
    a = init_gen_rand(99, params)
    b = list(a)
    out = gen_rand_array(a, 2 * params.n, params)
    gen_rand_all(b, params)
    first = [h for w in b[: params.n] for h in w]
    gen_rand_all(b, params)
    second = [h for w in b[: params.n] for h in w]
    assert out == first + second
    assert a == b


@pytest.mark.parametrize("mexp", MEXPS)
def test_gen_rand_array_odd_size_continues_state(mexp):
    params = get_params(mexp)
    size = params.n + 3
    a = init_gen_rand(3, params)
    b = list(a)
    whole = gen_rand_array(a, size, params) + gen_rand_array(a, size, params)
    combined = gen_rand_array(b, 2 * size, params)
    assert whole == combined
    assert a == b


def test_generated_words_are_in_one_two():
    params = get_params(521)
    status = init_gen_rand(0, params)
    out = gen_rand_array(status, 50, params)
    assert len(out) == 100
    assert all(1.0 <= to_close1_open2(w) < 2.0 for w in out)
    assert all(0.0 <= to_close_open(w) < 1.0 for w in out)
    assert all(0.0 < to_open_close(w) <= 1.0 for w in out)
    assert all(0.0 < to_open_open(w) < 1.0 for w in out)


def test_gen_rand_array_rejects_small_size():
    params = get_params(19937)
    status = init_gen_rand(0, params)
    with pytest.raises(ValueError):
        gen_rand_array(status, params.n - 1, params)


def test_gen_rand_all_rejects_wrong_state_length():
    params = get_params(521)
    status = init_gen_rand(0, params)[:-1]
    with pytest.raises(ValueError):
        gen_rand_all(status, params)


@pytest.mark.parametrize("mexp", [521, 1279, 19937, 86243])
def test_period_certification_restores_flipped_lung(mexp):
    params = get_params(mexp)
    status = init_gen_rand(11, params)
    certified = list(status)
    period_certification(status, params)
    assert status == certified
    lo, hi = status[params.n]
    status[params.n] = (lo, hi ^ 1)
    period_certification(status, params)
    assert status == certified


def test_conversions_of_exact_one():
    assert to_close1_open2(HIGH_CONST) == 1.0
    assert to_close_open(HIGH_CONST) == 0.0
    assert to_open_close(HIGH_CONST) == 1.0
    assert to_open_open(HIGH_CONST) > 0.0


def test_conversion_relations():
    params = get_params(521)
    out = gen_rand_array(init_gen_rand(5, params), params.n, params)
    for w in out:
        x = to_close1_open2(w)
        assert to_close_open(w) == x - 1.0
        assert to_open_close(w) == 2.0 - x
        assert to_open_open(w) == to_close_open(w | 1)