"""
Chart Colors - Command line entry point.

Loads a CSV, builds a SeriesChart, and prints the color resolved for every
series. Optionally writes the colored chart as a standalone HTML file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_THEME
from .logging_config import configure_logging
from .palettes import DIVERGING_STOPS

logger = logging.getLogger(__name__)


def validate_file(file_path: Path) -> None:
    """
    Validate that the CSV file exists and is a regular file.

    Raises:
        FileNotFoundError: If file does not exist or is not a file.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")
    if not file_path.is_file():
        raise FileNotFoundError(f"Path is not a file: {file_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chart-colors",
        description="Resolve series colors for the numeric columns of a CSV file",
    )
    parser.add_argument("csv_file", help="Path to CSV file")
    parser.add_argument(
        "--index-col",
        default=None,
        help="Column to use as the x-axis (default: row number)",
    )
    parser.add_argument(
        "--theme",
        choices=["light", "dark"],
        default=DEFAULT_THEME,
        help="Default palette and chart theme (default: light)",
    )
    scale_group = parser.add_mutually_exclusive_group()
    scale_group.add_argument(
        "--ordinal",
        nargs="+",
        metavar="COLOR",
        help="Color series from these colors in column order",
    )
    scale_group.add_argument(
        "--linear",
        nargs="*",
        metavar="COLOR",
        help="Color series by value along these color stops "
             f"(default: {' '.join(DIVERGING_STOPS)})",
    )
    parser.add_argument(
        "--by",
        choices=["key", "value"],
        default=None,
        help="Color key: series name or series mean "
             "(default: value with --linear, key otherwise)",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Write the colored chart to this HTML file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for chart-colors.

    Returns:
        Exit code:
        - 0: Success
        - 1: Data error (file not found, no numeric columns, bad color)
        - 2: Unexpected error
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        # Defer heavy imports until after CLI parsing
        import numpy as np
        import pandas as pd
        from .chart import SeriesChart
        from .colorspace import parse_color

        csv_path = Path(args.csv_file).resolve()
        validate_file(csv_path)

        logger.info("Loading CSV: %s", csv_path)
        df = pd.read_csv(csv_path, index_col=args.index_col)

        chart = SeriesChart(df, theme=args.theme)

        by = args.by
        if args.linear is not None:
            stops = args.linear or DIVERGING_STOPS
            for stop in stops:
                parse_color(stop)
            by = by or "value"
            if by != "value":
                raise ValueError("--linear colors series by value; series names are not numeric keys")
            chart.color.linear_colors(stops)
        elif args.ordinal:
            chart.color.ordinal_colors(args.ordinal)

        if by == "value":
            chart.color.set_color_accessor(lambda d, i=None: d["value"])
            if args.linear is not None:
                chart.color.calculate_color_domain()
                if len(stops) > 2:
                    lo, hi = chart.color.color_domain()
                    chart.color.set_color_domain(np.linspace(lo, hi, len(stops)).tolist())

        logger.info(
            "Resolving colors for %d series (domain: %s)",
            len(chart.data()),
            chart.color.color_domain(),
        )

        for i, datum in enumerate(chart.data()):
            color = chart.color.get_color(datum, i)
            print(f"{datum['key']}\t{datum['value']:.6g}\t{color}")

        if args.html is not None:
            chart.create_figure().write_html(str(args.html))
            logger.info("Wrote chart: %s", args.html)

        return 0

    except FileNotFoundError as e:
        logger.error("File error: %s", e)
        return 1

    except ValueError as e:
        logger.error("Data error: %s", e)
        return 1

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
