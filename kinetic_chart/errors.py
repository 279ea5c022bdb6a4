from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when series input cannot be interpreted as a chart series."""


class ChartStyleError(ValueError):
    """Raised when a styling configuration value is invalid."""
