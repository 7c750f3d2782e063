from __future__ import annotations


class PlotScaleError(Exception):
    """Base error for plotscale."""


class PlotScaleDataError(PlotScaleError):
    """Raised when a raw column cannot be ingested by a scale."""


class ScaleConfigError(PlotScaleError, ValueError):
    """Raised for invalid scale configuration."""
