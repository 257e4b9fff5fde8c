"""
Tests for the channel pipeline and the walking analysis entry point.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from imu_dsp import (
    ProcessingConfig,
    process_channel,
    integrate_velocity,
    gate_velocity,
    summarize_channel,
    analyze_walking,
    apply_zupt,
)


def test_process_channel_outputs():
    config = ProcessingConfig(WINDOW_SIZE=3, SAMPLING_RATE=10.0, CUTOFF_FREQUENCY=2.0, MOVEMENT_THRESHOLD=50.0)
    values = [0.0, 0.0, 0.0, 0.0, -1.0, 0.0, 0.0, 0.0, 0.0]

    result = process_channel(values, config)

    assert set(result) == {'raw', 'smoothed', 'low_passed', 'movement', 'movement_samples'}
    assert_allclose(result['smoothed'][:5], [0.0, 0.0, 0.0, 0.0, -1 / 3])
    assert result['low_passed'][0] == 0.0
    assert_array_equal(result['movement'], [0, 0, 0, 1, 1, 1, 0, 0, 0])
    assert result['movement_samples'] == 3


def test_process_channel_rejected_step_leaves_nan():
    config = ProcessingConfig(WINDOW_SIZE=2)

    # Too short for movement detection; the other steps still run
    result = process_channel([1.0, 2.0], config)

    assert_allclose(result['smoothed'], [1.0, 1.5])
    assert np.all(np.isnan(result['movement']))
    assert result['movement_samples'] == 0


def test_integrate_velocity_constant_acceleration():
    accel = np.full(11, 2.0)

    velocity = integrate_velocity(accel, 10.0)

    assert len(velocity) == 11
    assert velocity[0] == 0.0
    assert_allclose(velocity, 2.0 * np.arange(11) / 10.0)


def test_integrate_velocity_empty():
    assert len(integrate_velocity([], 50.0)) == 0


def test_gate_velocity_covers_whole_trace():
    # moving, still (4), moving, still (4), moving
    accel = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0])
    velocity = np.full(11, 5.0)

    gated, confirmations = gate_velocity(velocity, accel, 0.1, 3)

    assert confirmations == [3, 8]
    assert_array_equal(gated, [5, 0, 0, 0, 0, 5, 0, 0, 0, 0, 5])
    # Input is not modified
    assert_array_equal(velocity, np.full(11, 5.0))


def test_gate_velocity_single_call_stops_early():
    accel = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0])
    velocity = np.full(11, 5.0)

    assert apply_zupt(velocity, accel, 0.1, 3) == 1
    # Only the first run is handled by one call
    assert_array_equal(velocity, [5, 0, 0, 0, 5, 5, 5, 5, 5, 5, 5])


def test_gate_velocity_no_stationary_period():
    accel = np.full(6, 3.0)
    velocity = np.arange(6.0)

    gated, confirmations = gate_velocity(velocity, accel, 0.1, 2)

    assert confirmations == []
    assert_array_equal(gated, velocity)


def test_gate_velocity_rejects_bad_arguments():
    with pytest.raises(ValueError):
        gate_velocity(np.zeros(3), np.zeros(4), 0.1, 2)
    with pytest.raises(ValueError):
        gate_velocity(np.zeros(3), np.zeros(3), 0.1, 0)


def test_summarize_channel():
    config = ProcessingConfig(SAMPLING_RATE=4.0, MOVEMENT_THRESHOLD=0.5)
    result = process_channel([0.0, 0.0, 5.0, 0.0, 0.0, 0.0, 0.0, 0.0], config)

    summary = summarize_channel(result, config.SAMPLING_RATE, confirmations=[3, 6])

    assert summary['samples'] == 8
    assert summary['duration_s'] == pytest.approx(2.0)
    assert summary['movement_samples'] == 3
    assert summary['movement_percent'] == pytest.approx(37.5)
    assert summary['stationary_periods'] == 2


def test_config_validation():
    ProcessingConfig().validate()

    assert list(ProcessingConfig().columns()) == [5, 6, 7, 8, 9, 10]

    with pytest.raises(ValueError):
        ProcessingConfig(WINDOW_SIZE=0).validate()
    with pytest.raises(ValueError):
        ProcessingConfig(START_COLUMN=4, END_COLUMN=2).validate()
    with pytest.raises(ValueError):
        ProcessingConfig(SAMPLING_RATE=0.0).validate()


def test_analyze_walking_not_implemented():
    with pytest.raises(NotImplementedError):
        analyze_walking(np.zeros(100), 100)
