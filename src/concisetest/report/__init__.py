"""Console reporting."""

from concisetest.report.reporter import Reporter

__all__ = ["Reporter"]
