"""Service layer for generating and sharing charts."""

from starlikers.services.charts import ChartService

__all__ = ["ChartService"]
