"""
Smoothing filters for IMU channel data.

This module provides two stateless smoothing approaches:
1. Trailing moving average (window shrinks at the start of the signal)
2. First-order low-pass filter (one-pole exponential smoothing)

Both write into a caller-provided output array of the same length as the
input. Invalid arguments leave the output untouched and raise nothing, so
callers that need to detect a rejected call should pre-fill the output with
a sentinel value.
"""

import math
from typing import Optional
import numpy as np
from scipy.signal import lfilter


def moving_average(
    input_data: Optional[np.ndarray],
    output_data: Optional[np.ndarray],
    window_size: int
) -> None:
    """
    Trailing moving average with a window that shrinks at the boundary.

    output[i] is the mean of input[max(0, i - window_size + 1) .. i]. Near the
    start of the signal fewer than window_size samples are averaged, with no
    padding. A window larger than the signal is valid and simply averages
    everything available.

    Args:
        input_data: Input samples
        output_data: Pre-allocated output array, same length as input_data
        window_size: Number of trailing samples to average
    """
    if input_data is None or output_data is None or window_size <= 0:
        return

    samples = np.asarray(input_data, dtype=np.float64)
    n = len(samples)
    if n <= 0:
        return

    # Running sum with a leading zero so each window is a single difference
    cumulative = np.concatenate(([0.0], np.cumsum(samples)))
    end = np.arange(1, n + 1)
    start = np.maximum(0, end - window_size)

    output_data[:n] = (cumulative[end] - cumulative[start]) / (end - start)


def low_pass_alpha(cutoff_frequency: float, sampling_rate: float) -> float:
    """
    Smoothing coefficient of the first-order low-pass filter.

    Args:
        cutoff_frequency: Cutoff frequency in Hz
        sampling_rate: Sampling rate in Hz

    Returns:
        alpha = dt / (RC + dt), with dt = 1/fs and RC = 1/(2*pi*fc)
    """
    dt = 1.0 / sampling_rate
    rc = 1.0 / (2.0 * math.pi * cutoff_frequency)
    return dt / (rc + dt)


def low_pass_filter(
    input_data: Optional[np.ndarray],
    output_data: Optional[np.ndarray],
    cutoff_frequency: float,
    sampling_rate: float
) -> None:
    """
    First-order (single-pole) low-pass filter.

    The output is seeded with the first input sample and then follows
    output[i] = alpha * input[i] + (1 - alpha) * output[i-1].
    Roll-off is 6 dB/octave; steeper responses need a higher order, which
    this filter does not provide.

    Args:
        input_data: Input samples
        output_data: Pre-allocated output array, same length as input_data
        cutoff_frequency: Cutoff frequency in Hz
        sampling_rate: Sampling rate in Hz
    """
    if input_data is None or output_data is None:
        return
    if cutoff_frequency <= 0 or sampling_rate <= 0:
        return

    samples = np.asarray(input_data, dtype=np.float64)
    if len(samples) <= 0:
        return

    alpha = low_pass_alpha(cutoff_frequency, sampling_rate)

    # y[i] = alpha*x[i] - (alpha - 1)*y[i-1]; the initial state makes y[0] == x[0]
    b = [alpha]
    a = [1.0, alpha - 1.0]
    zi = [(1.0 - alpha) * samples[0]]
    filtered, _ = lfilter(b, a, samples, zi=zi)

    output_data[:len(samples)] = filtered
