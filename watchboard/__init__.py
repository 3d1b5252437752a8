"""Watchboard: congressional stock-trade and weather/astronomy dashboards."""

__version__ = "0.1.0"
