"""
Tests for the moving average and first-order low-pass filter.
Invalid calls must leave the output untouched, so outputs are pre-filled with a sentinel.
"""

import math
import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from imu_dsp import moving_average, low_pass_filter, low_pass_alpha


SENTINEL = -999.0


def sentinel_like(data):
    return np.full(len(data), SENTINEL)


def reference_moving_average(data, window_size):
    """Direct definition: mean of the trailing window, shrinking at the start."""
    return np.array([
        np.mean(data[max(0, i - window_size + 1):i + 1]) for i in range(len(data))
    ])


def test_moving_average_example():
    data = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    out = sentinel_like(data)

    moving_average(data, out, 3)

    assert_allclose(out, [1.0, 1.5, 2.0, 3.0, 4.0])


def test_moving_average_matches_direct_definition():
    rng = np.random.default_rng(42)
    data = rng.normal(0.0, 5.0, 500)

    for window_size in (1, 2, 7, 13, 64):
        out = sentinel_like(data)
        moving_average(data, out, window_size)
        assert_allclose(out, reference_moving_average(data, window_size), rtol=1e-9, atol=1e-9)


def test_moving_average_window_one_is_identity():
    data = np.array([3.0, -1.0, 4.0, 1.5])
    out = sentinel_like(data)

    moving_average(data, out, 1)

    assert_allclose(out, data)


def test_moving_average_window_equal_to_length():
    data = np.array([2.0, 4.0, 6.0, 8.0])
    out = sentinel_like(data)

    moving_average(data, out, len(data))

    # Expanding average all the way to the full window
    assert_allclose(out, [2.0, 3.0, 4.0, 5.0])


def test_moving_average_window_larger_than_length():
    data = np.array([2.0, 4.0, 6.0, 8.0])
    out = sentinel_like(data)

    moving_average(data, out, 100)

    assert_allclose(out, [2.0, 3.0, 4.0, 5.0])


def test_moving_average_accepts_lists():
    out = np.zeros(3)
    moving_average([1, 2, 3], out, 2)
    assert_allclose(out, [1.0, 1.5, 2.5])


def test_moving_average_is_idempotent():
    data = np.sin(np.linspace(0, 10, 200))
    out = sentinel_like(data)

    moving_average(data, out, 9)
    first = out.copy()
    moving_average(data, out, 9)

    assert_array_equal(out, first)


@pytest.mark.parametrize("window_size", [0, -3])
def test_moving_average_invalid_window_is_noop(window_size):
    data = np.array([1.0, 2.0, 3.0])
    out = sentinel_like(data)

    result = moving_average(data, out, window_size)

    assert result is None
    assert_array_equal(out, SENTINEL)


def test_moving_average_missing_arrays_are_noop():
    out = sentinel_like([0, 0, 0])

    moving_average(None, out, 3)
    assert_array_equal(out, SENTINEL)

    # No output array: nothing to write, nothing raised
    moving_average(np.array([1.0, 2.0, 3.0]), None, 3)


def test_moving_average_empty_input_is_noop():
    out = np.array([SENTINEL])
    moving_average(np.array([]), out, 3)
    assert_array_equal(out, SENTINEL)


def test_low_pass_alpha_formula():
    fc, fs = 5.0, 50.0
    dt = 1.0 / fs
    rc = 1.0 / (2.0 * math.pi * fc)

    assert low_pass_alpha(fc, fs) == pytest.approx(dt / (rc + dt))
    assert 0.0 < low_pass_alpha(fc, fs) < 1.0


def test_low_pass_first_sample_is_seed():
    data = np.array([7.5, 0.0, 0.0, 0.0])
    out = sentinel_like(data)

    low_pass_filter(data, out, 5.0, 50.0)

    assert out[0] == 7.5


def test_low_pass_matches_recurrence():
    rng = np.random.default_rng(0)
    data = rng.normal(0.0, 1.0, 300)
    out = sentinel_like(data)
    fc, fs = 3.0, 100.0

    low_pass_filter(data, out, fc, fs)

    alpha = low_pass_alpha(fc, fs)
    expected = np.empty_like(data)
    expected[0] = data[0]
    for i in range(1, len(data)):
        expected[i] = alpha * data[i] + (1 - alpha) * expected[i - 1]

    assert_allclose(out, expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("fc, fs", [(0.5, 10.0), (5.0, 50.0), (40.0, 256.0)])
def test_low_pass_constant_signal_unchanged(fc, fs):
    data = np.ones(4)
    out = sentinel_like(data)

    low_pass_filter(data, out, fc, fs)

    assert_allclose(out, [1.0, 1.0, 1.0, 1.0])


def test_low_pass_attenuates_high_frequency():
    fs = 200.0
    t = np.arange(0, 5, 1 / fs)
    slow = np.sin(2 * np.pi * 1.0 * t)
    fast = 0.5 * np.sin(2 * np.pi * 60.0 * t)
    out = sentinel_like(t)

    low_pass_filter(slow + fast, out, 5.0, fs)

    residual = out[200:] - slow[200:]
    assert np.std(residual) < np.std(fast)


@pytest.mark.parametrize("fc, fs", [(0.0, 50.0), (-1.0, 50.0), (5.0, 0.0), (5.0, -10.0)])
def test_low_pass_invalid_frequencies_are_noop(fc, fs):
    data = np.array([1.0, 2.0, 3.0])
    out = sentinel_like(data)

    low_pass_filter(data, out, fc, fs)

    assert_array_equal(out, SENTINEL)


def test_low_pass_missing_or_empty_arrays_are_noop():
    out = sentinel_like([0, 0])

    low_pass_filter(None, out, 5.0, 50.0)
    assert_array_equal(out, SENTINEL)

    low_pass_filter(np.array([]), out, 5.0, 50.0)
    assert_array_equal(out, SENTINEL)

    low_pass_filter(np.array([1.0, 2.0]), None, 5.0, 50.0)
