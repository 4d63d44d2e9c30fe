"""
Optimization criteria.
"""
from enum import Enum


class OptimizationCriterion(str, Enum):
    """Axis along which listings are ranked."""
    PRICE = "PRICE"
    DELIVERY_DATE = "DELIVERY_DATE"
    RATING = "RATING"
