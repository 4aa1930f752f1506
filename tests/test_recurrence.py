"""Tests for somostools.recurrence module."""
import numpy as np
import pytest

from somostools.recurrence.somos import new_buffer, somos_step, somos4_step


# --- buffer ---

@pytest.mark.parametrize("s", range(1, 31))
def test_new_buffer_seeds_are_one(s):
    buf = new_buffer(s, 64)
    assert len(buf) == 64
    assert all(buf[i] == 1.0 for i in range(s))
    assert all(buf[i] == 0.0 for i in range(s, 64))


def test_new_buffer_rejects_bad_order():
    with pytest.raises(ValueError):
        new_buffer(0, 10)


def test_new_buffer_rejects_short_length():
    with pytest.raises(ValueError):
        new_buffer(4, 4)


# --- general recurrence ---

def test_somos4_prefix():
    buf = new_buffer(4, 16)
    vals = []
    for n in range(4, 12):
        somos_step(4, n, buf)
        vals.append(buf[n])
    # classic Somos-4: 1, 1, 1, 1, 2, 3, 7, 23, 59, 314, 1529, 8209
    assert vals == [2.0, 3.0, 7.0, 23.0, 59.0, 314.0, 1529.0, 8209.0]


def test_somos4_fractions():
    buf = new_buffer(4, 16)
    fracs = [somos_step(4, n, buf) for n in range(4, 9)]
    assert fracs[0] == (2.0, 1.0)    # 1*1 + 1*1
    assert fracs[1] == (3.0, 1.0)    # 2*1 + 1*1
    assert fracs[2] == (7.0, 1.0)    # 3*1 + 2*2
    assert fracs[3] == (23.0, 1.0)   # 7*2 + 3*3
    assert fracs[4] == (118.0, 2.0)  # 23*3 + 7*7, over a[4] = 2


def test_somos5_prefix():
    buf = new_buffer(5, 16)
    for n in range(5, 13):
        somos_step(5, n, buf)
    assert list(buf[5:13]) == [2.0, 3.0, 5.0, 11.0, 37.0, 83.0, 274.0, 1217.0]


def test_somos1_empty_sum():
    buf = new_buffer(1, 8)
    assert somos_step(1, 1, buf) == (0.0, 1.0)
    assert buf[1] == 0.0


def test_somos1_zero_over_zero_is_nan():
    buf = new_buffer(1, 8)
    somos_step(1, 1, buf)
    dividend, divisor = somos_step(1, 2, buf)
    assert (dividend, divisor) == (0.0, 0.0)
    assert np.isnan(buf[2])


def test_division_by_zero_gives_infinity():
    buf = new_buffer(2, 8)
    buf[0] = 0.0
    somos_step(2, 2, buf)
    assert buf[2] == float("inf")


def test_overflow_gives_infinity():
    buf = new_buffer(2, 8)
    buf[1] = 1e200
    dividend, _ = somos_step(2, 2, buf)
    assert dividend == float("inf")
    assert buf[2] == float("inf")


def test_step_writes_only_index_n():
    buf = new_buffer(6, 32)
    for n in range(6, 10):
        somos_step(6, n, buf)
    before = buf.copy()
    somos_step(6, 10, buf)
    changed = [i for i in range(len(buf)) if buf[i] != before[i]]
    assert changed == [10]


def test_step_rejects_index_below_order():
    buf = new_buffer(4, 16)
    with pytest.raises(ValueError):
        somos_step(4, 3, buf)


def test_step_rejects_index_past_buffer():
    buf = new_buffer(4, 16)
    with pytest.raises(ValueError):
        somos_step(4, 16, buf)


# --- Somos-4 reference form ---

def test_somos4_reference_matches_general():
    a = new_buffer(4, 64)
    b = new_buffer(4, 64)
    for n in range(4, 40):
        assert somos_step(4, n, a) == somos4_step(n, b)
        assert a[n] == b[n]
