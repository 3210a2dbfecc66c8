"""
Historical Data Source for backtesting.

Reads CSV price files into an ordered list of PricePoint objects that the
backtest engine consumes.
"""

import csv
import io
import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from backtester.simulation.models import PricePoint

logger = logging.getLogger(__name__)

# Any of these header names is treated as the bar timestamp
TIMESTAMP_COLUMNS = ("date", "time", "timestamp")
PRICE_FIELDS = ("open", "high", "low", "close", "volume")


def _parse_timestamp(value: str) -> datetime:
    # fromisoformat only accepts a trailing Z from Python 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _optional_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


def _parse_row(header: list[str], row: list[str], row_number: int) -> PricePoint:
    """
    Convert one CSV row to a PricePoint.

    Only the timestamp and close are required to parse. Other price fields
    become None when blank or non-numeric, and unknown columns are ignored.

    Raises:
        ValueError: If the timestamp or close value is invalid
    """
    values = {key: raw.strip() for key, raw in zip(header, row, strict=True)}

    timestamp_key = next((key for key in TIMESTAMP_COLUMNS if key in values), None)
    if timestamp_key is not None:
        timestamp = _parse_timestamp(values[timestamp_key])
    else:
        # No timestamp column: fall back to the row number
        timestamp = datetime.fromtimestamp(row_number, tz=timezone.utc)

    return PricePoint(
        timestamp=timestamp,
        close=float(values["close"]),
        **{
            name: _optional_float(values[name]) if name in values else None
            for name in PRICE_FIELDS
            if name != "close"
        },
    )


def parse_price_csv(text: str) -> list[PricePoint]:
    """
    Parse CSV text into price points.

    The first line is the header (case-insensitive). Rows with the wrong
    number of fields, or whose timestamp or close does not parse, are
    skipped.

    Args:
        text: Full CSV contents

    Returns:
        Price points in file order

    Raises:
        ValueError: If there is no close column
    """
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        return []

    reader = csv.reader(io.StringIO("\n".join(lines)))
    header = [name.strip().lower() for name in next(reader)]
    if "close" not in header:
        raise ValueError(f"CSV header has no 'close' column: {header}")

    points: list[PricePoint] = []
    skipped = 0

    for row_number, row in enumerate(reader, start=1):
        if len(row) != len(header):
            skipped += 1
            continue
        try:
            points.append(_parse_row(header, row, row_number))
        except ValueError as e:
            logger.debug(f"Skipping row {row_number}: {e}")
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} malformed row(s)")

    return points


class HistoricalDataSource:
    """
    Reads historical CSV data into memory.

    Usage:
        source = HistoricalDataSource("data/historical/BTCUSDT_1d.csv")
        result = run_backtest(source.series)
    """

    def __init__(self, filepath: str | Path):
        """
        Initialize with path to CSV file.

        Args:
            filepath: Path to a CSV file with at least a close column
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"Historical data file not found: {filepath}")

        self.series = parse_price_csv(self.filepath.read_text())
        if not self.series:
            raise ValueError(f"No data found in {self.filepath}")

    @property
    def start_time(self) -> datetime:
        """Get the start timestamp of the data."""
        return self.series[0].timestamp

    @property
    def end_time(self) -> datetime:
        """Get the end timestamp of the data."""
        return self.series[-1].timestamp

    @property
    def candle_count(self) -> int:
        """Get the number of bars in the data."""
        return len(self.series)

    def stream(self) -> Iterator[PricePoint]:
        """Yield price points in chronological order."""
        yield from self.series

    def __repr__(self) -> str:
        return (
            f"HistoricalDataSource({self.filepath.name}, "
            f"{self.candle_count} bars, "
            f"{self.start_time.strftime('%Y-%m-%d')} to "
            f"{self.end_time.strftime('%Y-%m-%d')})"
        )
