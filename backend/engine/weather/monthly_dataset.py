"""Monthly-mean irradiance dataset parsing utilities."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class MonthlyIrradiance:
    """Monthly-mean daily irradiation, January first (kWh/m²/day)."""

    ghi_daily: tuple[float, ...]  # Global Horizontal Irradiation
    dhi_daily: tuple[float, ...]  # Diffuse Horizontal Irradiation

    def validate(self) -> None:
        """Validate both tables have 12 values."""
        for name in ("ghi_daily", "dhi_daily"):
            values = getattr(self, name)
            if len(values) != MONTHS_PER_YEAR:
                raise ValueError(
                    f"{name} has {len(values)} values, expected {MONTHS_PER_YEAR}"
                )


def parse_monthly_csv(
    csv_text: str, column_map: dict[str, str] | None = None
) -> MonthlyIrradiance:
    """Parse a 12-row monthly irradiance CSV.

    Args:
        csv_text: CSV content as string, one row per calendar month in order.
        column_map: Optional mapping from standard names (``ghi``, ``dhi``)
            to CSV column headers.

    Rows with missing or non-numeric cells are skipped, so a file with any
    such row fails the row-count check.
    """
    col_map = {"ghi": "ghi", "dhi": "dhi", **(column_map or {})}

    reader = csv.DictReader(io.StringIO(csv_text.strip()))
    ghi, dhi = [], []

    for row in reader:
        try:
            g = float(row[col_map["ghi"]])
            d = float(row[col_map["dhi"]])
        except (KeyError, TypeError, ValueError):
            continue
        ghi.append(g)
        dhi.append(d)

    if len(ghi) != MONTHS_PER_YEAR:
        raise ValueError(
            f"Expected {MONTHS_PER_YEAR} monthly records, got {len(ghi)}"
        )

    data = MonthlyIrradiance(ghi_daily=tuple(ghi), dhi_daily=tuple(dhi))
    data.validate()
    return data


def load_monthly_dataset(path: str | Path) -> MonthlyIrradiance:
    """Read and parse a monthly irradiance CSV file.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if it
    does not hold exactly 12 usable rows.
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_monthly_csv(text)
