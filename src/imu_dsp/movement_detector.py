"""Movement detection from acceleration spikes in position-like signals."""

from typing import Optional
import numpy as np


def detect_movement(
    input_data: Optional[np.ndarray],
    output_data: Optional[np.ndarray],
    threshold: float,
    sampling_rate: float
) -> None:
    """
    Flag samples where the estimated acceleration exceeds a threshold.

    Acceleration is the central second difference of the input,
    (x[i+1] - 2*x[i] + x[i-1]) / dt**2, for interior samples. The first and
    last samples have no second derivative and use an acceleration of 0.0.
    Every sample, boundaries included, is then classified as 1.0 when
    |accel| > threshold and 0.0 otherwise.

    The flags are floats rather than booleans so they can be summed or
    smoothed like any other channel.

    Args:
        input_data: Position samples, uniformly sampled
        output_data: Pre-allocated output array, same length as input_data
        threshold: Acceleration magnitude above which movement is flagged
        sampling_rate: Sampling rate in Hz
    """
    if input_data is None or output_data is None or sampling_rate <= 0:
        return

    position = np.asarray(input_data, dtype=np.float64)
    n = len(position)
    if n < 3:
        return

    dt = 1.0 / sampling_rate
    accel = np.zeros(n)
    accel[1:-1] = (position[2:] - 2.0 * position[1:-1] + position[:-2]) / (dt * dt)

    output_data[:n] = np.where(np.abs(accel) > threshold, 1.0, 0.0)


def count_movement_samples(flags: np.ndarray) -> int:
    """Number of samples flagged as movement."""
    return int(np.count_nonzero(np.asarray(flags) == 1.0))
