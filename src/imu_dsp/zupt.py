"""Zero-velocity update (ZUPT) gating for integrated velocity."""

from enum import IntEnum
from typing import Optional, Tuple
import numpy as np


class ZuptStatus(IntEnum):
    """Result of a ZUPT scan. Values match the raw integer status codes."""

    INVALID_INPUT = -1
    NOT_DETECTED = 0
    STATIONARY = 1


def apply_zupt(
    velocity_data: Optional[np.ndarray],
    accel_data: Optional[np.ndarray],
    threshold: float,
    continuous_count_threshold: int
) -> ZuptStatus:
    """
    Zero velocity samples while the acceleration stays below a threshold.

    Samples are scanned in order. Each sample with |accel| < threshold
    extends the current stationary run and has its velocity set to 0.0
    straight away, before the run is confirmed. A sample at or above the
    threshold ends the run and keeps its velocity.

    As soon as a run reaches continuous_count_threshold samples the scan
    stops and STATIONARY is returned. Samples after that point are not
    examined or modified, so callers wanting to gate a whole trace must
    call again on the remaining segment.

    Unlike the smoothing filters, invalid input is reported through the
    return value instead of being ignored silently.

    Args:
        velocity_data: Velocity samples, modified in place
        accel_data: Acceleration samples, same length as velocity_data
        threshold: Acceleration magnitude below which a sample is stationary
        continuous_count_threshold: Run length required to confirm stationarity

    Returns:
        STATIONARY (1) if a stationary run was confirmed,
        NOT_DETECTED (0) if the scan finished without one,
        INVALID_INPUT (-1) for missing or empty arrays
    """
    status, _ = scan_zupt(velocity_data, accel_data, threshold, continuous_count_threshold)
    return status


def scan_zupt(
    velocity_data: Optional[np.ndarray],
    accel_data: Optional[np.ndarray],
    threshold: float,
    continuous_count_threshold: int
) -> Tuple[ZuptStatus, Optional[int]]:
    """
    Same scan as apply_zupt, also reporting where stationarity was confirmed.

    Returns:
        (status, index of the sample that completed the run), the index
        being None unless the status is STATIONARY
    """
    if velocity_data is None or accel_data is None:
        return ZuptStatus.INVALID_INPUT, None

    accel = np.asarray(accel_data, dtype=np.float64)
    if len(accel) <= 0:
        return ZuptStatus.INVALID_INPUT, None

    continuous_count = 0
    for i, value in enumerate(accel):
        if abs(value) < threshold:
            continuous_count += 1
            velocity_data[i] = 0.0

            if continuous_count >= continuous_count_threshold:
                return ZuptStatus.STATIONARY, i
        else:
            # Moving: velocity is left as integrated
            continuous_count = 0

    return ZuptStatus.NOT_DETECTED, None
