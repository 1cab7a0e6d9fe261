"""Report and histogram data for finished runs."""

from langseg.services.reporting.generator import ReportGenerator
from langseg.services.reporting.histogram import HistogramBuilder

__all__ = [
    "ReportGenerator",
    "HistogramBuilder",
]
