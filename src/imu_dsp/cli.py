"""
Command-line entry point: smooth a range of CSV columns and plot them.

Each column is read from the CSV, smoothed with the trailing moving average
and drawn as input/output traces in its own panel of a grid figure.
"""

import argparse
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
import polars as pl

from .config import ProcessingConfig, PlotConfig
from .data_loader import CsvColumnReader
from .signal_filters import moving_average


def build_parser(defaults: ProcessingConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="imu-dsp",
        description="Smooth IMU CSV columns with a moving average and plot input vs. output."
    )
    ap.add_argument("--file", type=Path, default=defaults.DATA_FILE, help="CSV file to read")
    ap.add_argument("--window-size", type=int, default=defaults.WINDOW_SIZE,
                    help="Moving average window (samples)")
    ap.add_argument("--start-column", type=int, default=defaults.START_COLUMN,
                    help="First column to process (zero-based)")
    ap.add_argument("--end-column", type=int, default=defaults.END_COLUMN,
                    help="Last column to process (inclusive)")
    ap.add_argument("--max-samples", type=int, default=defaults.MAX_DATA_SIZE,
                    help="Maximum samples read per column")
    ap.add_argument("--skip-rows", type=int, default=defaults.SKIP_ROWS,
                    help="Leading rows to ignore")
    ap.add_argument("--output", type=Path, default=None, help="Save the figure to this PNG file")
    ap.add_argument("--export-dir", type=Path, default=None,
                    help="Write index,input,output CSV files per column to this directory")
    ap.add_argument("--show", action="store_true", help="Open an interactive plot window")
    return ap


def config_from_args(args: argparse.Namespace) -> ProcessingConfig:
    config = ProcessingConfig(
        DATA_FILE=args.file,
        MAX_DATA_SIZE=args.max_samples,
        SKIP_ROWS=args.skip_rows,
        START_COLUMN=args.start_column,
        END_COLUMN=args.end_column,
        WINDOW_SIZE=args.window_size,
    )
    config.validate()
    return config


def export_column(export_dir: Path, column: int, input_data: np.ndarray, output_data: np.ndarray) -> Path:
    """Write one column's input and smoothed output as index,input,output."""
    export_dir.mkdir(parents=True, exist_ok=True)
    path = export_dir / f"column_{column}.csv"
    pl.DataFrame({
        'index': np.arange(len(input_data)),
        'input': input_data,
        'output': output_data,
    }).write_csv(path)
    return path


def run(config: ProcessingConfig, plot_config: PlotConfig, output: Optional[Path] = None,
        export_dir: Optional[Path] = None, show: bool = False) -> int:
    """
    Process every configured column and draw the grid figure.

    Returns:
        Process exit code
    """
    reader = CsvColumnReader(config.DATA_FILE, config.MAX_DATA_SIZE, config.SKIP_ROWS)

    try:
        columns = reader.read_columns(config.columns())
    except FileNotFoundError as e:
        print(f"✗ {e}")
        return 1

    fig, axs = plt.subplots(
        plot_config.GRID_ROWS, plot_config.GRID_COLUMNS,
        figsize=plot_config.FIGURE_SIZE,
        squeeze=False
    )
    fig.suptitle(f"Data Visualization from Line {config.START_COLUMN} to {config.END_COLUMN}")
    panels = axs.flatten()

    for panel_idx, column in enumerate(config.columns()):
        data = columns[column]
        print(f"Column {column}: total rows {data.total_rows}, data entries {len(data)}")

        if len(data) == 0:
            print(f"  ⚠️  Skipping column {column}: no data")
            continue
        if panel_idx >= len(panels):
            print(f"  ⚠️  Skipping column {column}: no free panel in the "
                  f"{plot_config.GRID_ROWS}x{plot_config.GRID_COLUMNS} grid")
            continue

        smoothed = np.full(len(data), np.nan)
        moving_average(data.values, smoothed, config.WINDOW_SIZE)

        if export_dir is not None:
            path = export_column(export_dir, column, data.values, smoothed)
            print(f"  Saved {path}")

        ax = panels[panel_idx]
        ax.plot(data.values, color=plot_config.CHART_COLORS['input'], label='Input')
        ax.plot(smoothed, color=plot_config.CHART_COLORS['smoothed'], label='Output')
        ax.set_title(f'Line {column}')
        ax.set_xlabel('Sample')
        ax.legend()
        ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output is not None:
        fig.savefig(output, dpi=plot_config.FIGURE_DPI)
        print(f"Saved figure to {output}")

    if show:
        plt.show()
    plt.close(fig)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser(ProcessingConfig())
    args = ap.parse_args(argv)

    try:
        config = config_from_args(args)
    except ValueError as e:
        ap.error(str(e))

    return run(config, PlotConfig(), output=args.output, export_dir=args.export_dir, show=args.show)


if __name__ == "__main__":
    raise SystemExit(main())
