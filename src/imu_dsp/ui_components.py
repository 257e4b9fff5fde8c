"""UI components for the Streamlit signal explorer."""

import streamlit as st
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

from .config import ProcessingConfig


class ExplorerUI:
    """Handles rendering of UI components for the signal explorer app."""

    def __init__(self, config: ProcessingConfig):
        """
        Initialize the UI component manager.

        Args:
            config: Processing configuration providing the default control values
        """
        self.config = config

    def render_header(self):
        """Render app title."""
        st.title("IMU signal explorer")
        st.caption("Moving average, low-pass filtering, movement detection and ZUPT gating")

    def render_file_selector(self, files: List[Path]) -> Optional[Path]:
        """
        Render CSV file selection dropdown.

        Args:
            files: Available CSV files

        Returns:
            Selected file or None
        """
        return st.selectbox(
            "Select CSV file",
            files,
            index=0 if files else None,
            format_func=lambda p: p.name
        )

    def render_column_selector(self, n_columns: int) -> int:
        """
        Render column selection.

        Args:
            n_columns: Number of columns available in the file

        Returns:
            Zero-based column index
        """
        default = min(self.config.START_COLUMN, max(n_columns - 1, 0))
        return int(st.number_input(
            "Column (zero-based)",
            min_value=0,
            max_value=max(n_columns - 1, 0),
            value=default,
            step=1
        ))

    def render_processing_controls(self) -> ProcessingConfig:
        """
        Render sidebar controls for every processing parameter.

        Returns:
            ProcessingConfig with the chosen values
        """
        with st.sidebar:
            st.header("Processing")
            sampling_rate = st.number_input(
                "Sampling rate (Hz)", min_value=1.0, value=float(self.config.SAMPLING_RATE), step=1.0
            )
            window_size = st.slider(
                "Moving average window (samples)", min_value=1, max_value=200,
                value=self.config.WINDOW_SIZE
            )
            cutoff = st.number_input(
                "Low-pass cutoff (Hz)", min_value=0.1, max_value=sampling_rate / 2,
                value=min(float(self.config.CUTOFF_FREQUENCY), sampling_rate / 2), step=0.5,
                help="Single-pole filter, 6 dB/octave roll-off"
            )
            movement_threshold = st.number_input(
                "Movement threshold", min_value=0.0,
                value=float(self.config.MOVEMENT_THRESHOLD), step=0.1,
                help="Acceleration magnitude (second difference) flagged as movement"
            )

            st.header("Zero-velocity update")
            zupt_threshold = st.number_input(
                "Stationary threshold", min_value=0.0,
                value=float(self.config.ZUPT_THRESHOLD), step=0.01, format="%.3f"
            )
            zupt_count = st.slider(
                "Consecutive samples to confirm", min_value=1, max_value=200,
                value=self.config.ZUPT_CONTINUOUS_COUNT
            )

        return replace(
            self.config,
            SAMPLING_RATE=sampling_rate,
            WINDOW_SIZE=window_size,
            CUTOFF_FREQUENCY=cutoff,
            MOVEMENT_THRESHOLD=movement_threshold,
            ZUPT_THRESHOLD=zupt_threshold,
            ZUPT_CONTINUOUS_COUNT=zupt_count,
        )

    def create_status_placeholder(self) -> st.delta_generator.DeltaGenerator:
        """
        Create a placeholder for status messages.

        Returns:
            Streamlit empty placeholder
        """
        return st.empty()

    def render_metrics(self, summary: Dict):
        """
        Render channel summary metrics in a row.

        Args:
            summary: Output of pipeline.summarize_channel
        """
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Samples", f"{summary['samples']:,}")
        col2.metric(
            "Duration",
            f"{summary['duration_s']:.1f} s" if summary['duration_s'] is not None else "—"
        )
        col3.metric(
            "Movement",
            f"{summary['movement_percent']:.1f}%" if summary['movement_percent'] is not None else "—",
            help=f"{summary['movement_samples']} flagged samples"
        )
        col4.metric(
            "Stationary periods",
            summary['stationary_periods'] if summary['stationary_periods'] is not None else "—"
        )
