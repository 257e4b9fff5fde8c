"""Channel processing pipeline built on the core signal functions."""

from typing import Dict, List, Tuple
import numpy as np
from scipy.integrate import cumulative_trapezoid

from .config import ProcessingConfig
from .signal_filters import moving_average, low_pass_filter
from .movement_detector import detect_movement, count_movement_samples
from .zupt import scan_zupt, ZuptStatus


def process_channel(values, config: ProcessingConfig) -> Dict:
    """
    Run smoothing, low-pass filtering and movement detection on one channel.

    Output arrays are pre-filled with NaN, so a step that rejected its
    arguments leaves NaN behind instead of stale data.

    Parameters
    ----------
    values : array-like
        Channel samples
    config : ProcessingConfig
        Window size, sampling rate, cutoff and movement threshold

    Returns
    -------
    dict
        - 'raw': input as float64
        - 'smoothed': moving average
        - 'low_passed': low-pass filtered signal
        - 'movement': movement flags (1.0 / 0.0)
        - 'movement_samples': number of flagged samples
    """
    raw = np.asarray(values, dtype=np.float64)

    smoothed = np.full(len(raw), np.nan)
    moving_average(raw, smoothed, config.WINDOW_SIZE)

    low_passed = np.full(len(raw), np.nan)
    low_pass_filter(raw, low_passed, config.CUTOFF_FREQUENCY, config.SAMPLING_RATE)

    movement = np.full(len(raw), np.nan)
    detect_movement(raw, movement, config.MOVEMENT_THRESHOLD, config.SAMPLING_RATE)

    return {
        'raw': raw,
        'smoothed': smoothed,
        'low_passed': low_passed,
        'movement': movement,
        'movement_samples': count_movement_samples(movement),
    }


def integrate_velocity(accel, sampling_rate: float) -> np.ndarray:
    """
    Integrate acceleration to velocity with the trapezoidal rule.

    Parameters
    ----------
    accel : array-like
        Acceleration samples
    sampling_rate : float
        Sampling rate (Hz)

    Returns
    -------
    np.ndarray
        Velocity, starting at 0.0, same length as accel
    """
    accel = np.asarray(accel, dtype=np.float64)
    if len(accel) == 0:
        return np.array([], dtype=np.float64)
    return cumulative_trapezoid(accel, dx=1.0 / sampling_rate, initial=0.0)


def gate_velocity(
    velocity,
    accel,
    threshold: float,
    continuous_count: int
) -> Tuple[np.ndarray, List[int]]:
    """
    Apply ZUPT across a whole trace.

    apply_zupt stops at the first confirmed stationary run, so the scan is
    restarted on the remaining samples until the trace is exhausted.

    Parameters
    ----------
    velocity : array-like
        Velocity samples (not modified)
    accel : array-like
        Acceleration samples, same length as velocity
    threshold : float
        Acceleration magnitude below which a sample is stationary
    continuous_count : int
        Run length required to confirm stationarity

    Returns
    -------
    tuple
        (gated velocity copy, indices where stationarity was confirmed)

    Raises
    ------
    ValueError
        If the arrays differ in length or continuous_count is not positive
    """
    gated = np.array(velocity, dtype=np.float64, copy=True)
    accel = np.asarray(accel, dtype=np.float64)
    confirmations = []

    if len(gated) != len(accel):
        raise ValueError(f"Length mismatch: velocity {len(gated)}, accel {len(accel)}")
    if continuous_count <= 0:
        raise ValueError(f"continuous_count must be positive, got {continuous_count}")

    start = 0
    while start < len(accel):
        segment = gated[start:]  # View, so the gate writes through
        status, offset = scan_zupt(segment, accel[start:], threshold, continuous_count)
        if status != ZuptStatus.STATIONARY:
            break

        confirmed_at = start + offset
        confirmations.append(confirmed_at)
        start = confirmed_at + 1

    return gated, confirmations


def summarize_channel(result: Dict, sampling_rate: float, confirmations: List[int] = None) -> Dict:
    """
    Summary numbers for a processed channel.

    Parameters
    ----------
    result : dict
        Output of process_channel
    sampling_rate : float
        Sampling rate (Hz)
    confirmations : list of int, optional
        Stationary confirmations from gate_velocity

    Returns
    -------
    dict
        Sample count, duration, movement share and stationary period count
    """
    n = len(result['raw'])
    return {
        'samples': n,
        'duration_s': n / sampling_rate if sampling_rate > 0 else None,
        'movement_samples': result['movement_samples'],
        'movement_percent': 100.0 * result['movement_samples'] / n if n > 0 else None,
        'stationary_periods': len(confirmations) if confirmations is not None else None,
    }
