"""Configuration settings for IMU signal processing."""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class ProcessingConfig:
    """Configuration for CSV ingestion and signal processing."""

    DATA_DIR: Path = Path("data")  # Searched for CSV files by the explorer app
    DATA_FILE: Path = Path("demo.csv")
    MAX_DATA_SIZE: int = 100000  # Maximum samples read per column
    SKIP_ROWS: int = 0  # Leading rows ignored by the CSV reader
    START_COLUMN: int = 5  # First column to process (zero-based)
    END_COLUMN: int = 10  # Last column to process (inclusive)
    WINDOW_SIZE: int = 13  # Samples used in moving average

    SAMPLING_RATE: float = 50.0  # Hz
    CUTOFF_FREQUENCY: float = 5.0  # Hz - single-pole low-pass cutoff
    MOVEMENT_THRESHOLD: float = 0.5  # Acceleration magnitude flagged as movement

    # Zero-velocity update parameters
    ZUPT_THRESHOLD: float = 0.05  # Acceleration magnitude considered stationary
    ZUPT_CONTINUOUS_COUNT: int = 10  # Consecutive stationary samples to confirm

    def columns(self) -> range:
        """Inclusive range of columns to process."""
        return range(self.START_COLUMN, self.END_COLUMN + 1)

    def validate(self):
        """
        Check settings that would make every processing call a no-op.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.MAX_DATA_SIZE <= 0:
            raise ValueError(f"MAX_DATA_SIZE must be positive, got {self.MAX_DATA_SIZE}")
        if self.SKIP_ROWS < 0:
            raise ValueError(f"SKIP_ROWS cannot be negative, got {self.SKIP_ROWS}")
        if self.START_COLUMN < 0 or self.END_COLUMN < self.START_COLUMN:
            raise ValueError(
                f"Invalid column range {self.START_COLUMN}..{self.END_COLUMN}"
            )
        if self.WINDOW_SIZE <= 0:
            raise ValueError(f"WINDOW_SIZE must be positive, got {self.WINDOW_SIZE}")
        if self.SAMPLING_RATE <= 0 or self.CUTOFF_FREQUENCY <= 0:
            raise ValueError("SAMPLING_RATE and CUTOFF_FREQUENCY must be positive")
        if self.ZUPT_CONTINUOUS_COUNT <= 0:
            raise ValueError(
                f"ZUPT_CONTINUOUS_COUNT must be positive, got {self.ZUPT_CONTINUOUS_COUNT}"
            )


@dataclass
class PlotConfig:
    """Configuration for charts and figure layout."""

    GRID_ROWS: int = 2
    GRID_COLUMNS: int = 3
    FIGURE_SIZE: tuple = (15, 8)  # Inches, matplotlib figure
    FIGURE_DPI: int = 150
    CHART_HEIGHT: int = 350  # Pixels, Plotly charts
    CHART_LINE_WIDTH: float = 1.5
    CHART_MARGIN: dict = field(default_factory=lambda: dict(l=50, r=20, t=50, b=40))
    CHART_COLORS: dict = field(default_factory=lambda: {
        'input': '#8d99ae',       # Grey
        'smoothed': '#d68032',    # Orange
        'low_passed': '#2a9d8f',  # Teal
        'movement': '#e63946',    # Red
        'velocity': '#457b9d',    # Blue
    })
