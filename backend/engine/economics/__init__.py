"""Economic analysis module."""

from .savings import SavingsResult, compute_savings, demand_cap

__all__ = ["SavingsResult", "compute_savings", "demand_cap"]
