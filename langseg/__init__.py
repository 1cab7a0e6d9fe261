"""English/French language segmentation by chi-squared frequency analysis."""

__version__ = "0.1.0"
