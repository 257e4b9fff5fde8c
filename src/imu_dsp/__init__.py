"""Signal processing for IMU channel data."""

from .config import ProcessingConfig, PlotConfig
from .signal_filters import moving_average, low_pass_filter, low_pass_alpha
from .movement_detector import detect_movement, count_movement_samples
from .zupt import apply_zupt, scan_zupt, ZuptStatus
from .gait_analysis import analyze_walking, WalkingSummary
from .data_loader import CsvColumnReader, ColumnData
from .pipeline import process_channel, integrate_velocity, gate_velocity, summarize_channel
from .chart_renderer import ChartRenderer


__all__ = [
    'ProcessingConfig',
    'PlotConfig',
    'moving_average',
    'low_pass_filter',
    'low_pass_alpha',
    'detect_movement',
    'count_movement_samples',
    'apply_zupt',
    'scan_zupt',
    'ZuptStatus',
    'analyze_walking',
    'WalkingSummary',
    'CsvColumnReader',
    'ColumnData',
    'process_channel',
    'integrate_velocity',
    'gate_velocity',
    'summarize_channel',
    'ChartRenderer'
]
