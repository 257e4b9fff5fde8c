"""Chart rendering utilities for processed IMU channels."""

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots
from typing import Optional, Sequence

from .config import PlotConfig


class ChartRenderer:
    """Handles creation and styling of Plotly charts for channel data."""

    def __init__(self, plot_config: PlotConfig):
        """
        Initialize the chart renderer.

        Args:
            plot_config: Plot configuration object
        """
        self.config = plot_config

    def _time_axis(self, n: int, sampling_rate: float) -> np.ndarray:
        return np.arange(n) / sampling_rate

    def _line(self, x, y, key: str, name: str, dash: Optional[str] = None) -> go.Scatter:
        return go.Scatter(
            x=x,
            y=y,
            mode='lines',
            line=dict(color=self.config.CHART_COLORS[key], width=self.config.CHART_LINE_WIDTH, dash=dash),
            name=name,
        )

    def _style(self, fig: go.Figure, title: str):
        fig.update_layout(
            title=title,
            height=self.config.CHART_HEIGHT,
            margin=self.config.CHART_MARGIN,
            legend=dict(
                orientation="h",
                yanchor="bottom",
                y=1.02,
                xanchor="left",
                x=0,
                bgcolor="rgba(255, 255, 255, 0.8)",
            ),
            plot_bgcolor='white',
            paper_bgcolor='white',
        )
        fig.update_xaxes(showgrid=True, gridcolor='rgba(220, 220, 220, 0.3)', zeroline=False)
        fig.update_yaxes(
            showgrid=True,
            gridcolor='rgba(220, 220, 220, 0.3)',
            zeroline=True,
            zerolinecolor='rgba(200, 200, 200, 0.5)',
        )

    def create_smoothing_chart(
        self,
        raw: np.ndarray,
        smoothed: np.ndarray,
        low_passed: np.ndarray,
        sampling_rate: float,
        title: str
    ) -> go.Figure:
        """
        Overlay the raw channel with its smoothed and low-passed versions.

        Args:
            raw: Raw samples
            smoothed: Moving average output
            low_passed: Low-pass filter output
            sampling_rate: Sampling rate in Hz (x-axis in seconds)
            title: Chart title

        Returns:
            Plotly Figure object
        """
        times = self._time_axis(len(raw), sampling_rate)

        fig = go.Figure()
        fig.add_trace(self._line(times, raw, 'input', 'Input'))
        fig.add_trace(self._line(times, smoothed, 'smoothed', 'Moving average'))
        fig.add_trace(self._line(times, low_passed, 'low_passed', 'Low-pass'))

        self._style(fig, title)
        fig.update_xaxes(title_text="Time (s)")
        return fig

    def create_movement_chart(
        self,
        raw: np.ndarray,
        movement: np.ndarray,
        sampling_rate: float,
        title: str
    ) -> go.Figure:
        """
        Stacked chart of the signal and its movement flags.

        Args:
            raw: Position-like samples
            movement: Movement flags (1.0 / 0.0)
            sampling_rate: Sampling rate in Hz
            title: Chart title

        Returns:
            Plotly Figure with subplots
        """
        times = self._time_axis(len(raw), sampling_rate)

        fig = make_subplots(
            rows=2, cols=1,
            shared_xaxes=True,
            vertical_spacing=0.08,
            row_heights=[0.7, 0.3]
        )
        fig.add_trace(self._line(times, raw, 'input', 'Input'), row=1, col=1)
        fig.add_trace(
            go.Scatter(
                x=times,
                y=movement,
                mode='lines',
                line=dict(color=self.config.CHART_COLORS['movement'], width=1, shape='hv'),
                fill='tozeroy',
                name='Movement',
            ),
            row=2, col=1
        )

        self._style(fig, title)
        fig.update_yaxes(range=[-0.1, 1.1], tickvals=[0, 1], row=2, col=1)
        fig.update_xaxes(title_text="Time (s)", row=2, col=1)
        return fig

    def create_velocity_chart(
        self,
        velocity: np.ndarray,
        gated: np.ndarray,
        sampling_rate: float,
        confirmations: Sequence[int] = (),
        title: str = "Velocity"
    ) -> go.Figure:
        """
        Compare integrated velocity with its ZUPT-gated version.

        Args:
            velocity: Integrated velocity
            gated: Velocity after zero-velocity updates
            sampling_rate: Sampling rate in Hz
            confirmations: Sample indices where stationarity was confirmed
            title: Chart title

        Returns:
            Plotly Figure object
        """
        times = self._time_axis(len(velocity), sampling_rate)

        fig = go.Figure()
        fig.add_trace(self._line(times, velocity, 'input', 'Integrated', dash='dot'))
        fig.add_trace(self._line(times, gated, 'velocity', 'ZUPT gated'))

        if len(confirmations) > 0:
            idx = np.asarray(confirmations, dtype=int)
            fig.add_trace(go.Scatter(
                x=times[idx],
                y=np.asarray(gated)[idx],
                mode='markers',
                marker=dict(symbol='x-thin', size=8, color='rgba(0, 0, 0, 0.5)', line=dict(width=1)),
                name='Stationary confirmed',
                hoverinfo='skip'
            ))

        self._style(fig, title)
        fig.update_xaxes(title_text="Time (s)")
        return fig
