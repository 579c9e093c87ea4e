"""Weather data module (monthly irradiance datasets)."""

from .monthly_dataset import MonthlyIrradiance, load_monthly_dataset, parse_monthly_csv

__all__ = [
    "MonthlyIrradiance",
    "load_monthly_dataset",
    "parse_monthly_csv",
]
