"""Walking analysis entry point (step count and step distance)."""

from dataclasses import dataclass
import numpy as np


@dataclass
class WalkingSummary:
    """Result of a walking analysis."""
    step_count: int
    avg_step_distance: float


def analyze_walking(position_data: np.ndarray, sampling_size: int) -> WalkingSummary:
    """
    Estimate step count and average step distance from a position signal.

    No step-detection algorithm has been chosen yet, so this entry point only
    fixes the interface.

    Args:
        position_data: Position samples
        sampling_size: Number of samples to analyse

    Returns:
        WalkingSummary with the step count and average step distance

    Raises:
        NotImplementedError: Always
    """
    raise NotImplementedError("Walking analysis has no step-detection algorithm yet")
