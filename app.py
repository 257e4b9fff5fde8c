"""
Streamlit app to explore IMU channels from CSV files: smoothing, low-pass
filtering, movement detection and zero-velocity updates.
"""
import streamlit as st

from imu_dsp import (
    ProcessingConfig,
    PlotConfig,
    CsvColumnReader,
    ChartRenderer,
    process_channel,
    integrate_velocity,
    gate_velocity,
    summarize_channel,
)
from imu_dsp.ui_components import ExplorerUI


# Initialize configurations and components
processing_config = ProcessingConfig()
plot_config = PlotConfig()

st.set_page_config(page_title="IMU signal explorer", layout="wide")
ui = ExplorerUI(processing_config)
renderer = ChartRenderer(plot_config)

# === UI Setup ===
ui.render_header()
config = ui.render_processing_controls()
status = ui.create_status_placeholder()

files = sorted(processing_config.DATA_DIR.glob("*.csv"))
if not files:
    status.error(f"No CSV files found in {processing_config.DATA_DIR}")
    st.stop()

selected_file = ui.render_file_selector(files)


@st.cache_data
def load_columns(path: str, max_data_size: int, skip_rows: int) -> dict:
    """Read every column of the file once; keyed by column index."""
    frame_reader = CsvColumnReader(path, max_data_size, skip_rows)
    return {column: data.values for column, data in frame_reader.read_columns().items()}


try:
    columns = load_columns(str(selected_file), config.MAX_DATA_SIZE, config.SKIP_ROWS)
except FileNotFoundError as e:
    status.error(str(e))
    st.stop()

if not columns:
    status.error(f"{selected_file.name} is empty")
    st.stop()

column = ui.render_column_selector(len(columns))
values = columns[column]

if len(values) == 0:
    status.warning(f"Column {column} has no data")
    st.stop()

status.info(f"Processing {len(values)} samples from column {column} of {selected_file.name}...")

# === Processing ===
result = process_channel(values, config)

# Treat the channel as acceleration for the velocity view
velocity = integrate_velocity(result['raw'], config.SAMPLING_RATE)
gated, confirmations = gate_velocity(
    velocity, result['raw'], config.ZUPT_THRESHOLD, config.ZUPT_CONTINUOUS_COUNT
)

status.success(f"Processed {len(values)} samples from column {column} of {selected_file.name}")

# === Metrics ===
ui.render_metrics(summarize_channel(result, config.SAMPLING_RATE, confirmations))

# === Charts ===
tab1, tab2, tab3 = st.tabs(["Smoothing", "Movement", "Velocity"])

with tab1:
    fig = renderer.create_smoothing_chart(
        result['raw'], result['smoothed'], result['low_passed'],
        config.SAMPLING_RATE,
        title=f"Column {column}: window {config.WINDOW_SIZE}, cutoff {config.CUTOFF_FREQUENCY:.1f} Hz"
    )
    st.plotly_chart(fig, use_container_width=True)

with tab2:
    fig = renderer.create_movement_chart(
        result['raw'], result['movement'], config.SAMPLING_RATE,
        title=f"Movement (|accel| > {config.MOVEMENT_THRESHOLD})"
    )
    st.plotly_chart(fig, use_container_width=True)

with tab3:
    fig = renderer.create_velocity_chart(
        velocity, gated, config.SAMPLING_RATE, confirmations,
        title=f"ZUPT (|accel| < {config.ZUPT_THRESHOLD} for {config.ZUPT_CONTINUOUS_COUNT} samples)"
    )
    st.plotly_chart(fig, use_container_width=True)
