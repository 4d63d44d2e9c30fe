"""
Product Picker - choose the cheapest, fastest and best rated product
from a search results page.
"""
from .models import (
    Listing,
    OptimalProductUrls,
    OptimizationCriterion,
    PickerRunExport,
    RawProductElement,
)
from .pipeline import find_optimal_products, optimize, run_picker

__version__ = "0.1.0"

__all__ = [
    "Listing",
    "OptimalProductUrls",
    "OptimizationCriterion",
    "PickerRunExport",
    "RawProductElement",
    "find_optimal_products",
    "optimize",
    "run_picker",
]
