"""
Pydantic models for Product Picker.
"""

from .listing import Listing, RawProductElement
from .criteria import OptimizationCriterion
from .export import OptimalProductUrls, PriceSummary, RunMetadata, PickerRunExport

__all__ = [
    # Listing
    "Listing",
    "RawProductElement",
    # Criteria
    "OptimizationCriterion",
    # Export
    "OptimalProductUrls",
    "PriceSummary",
    "RunMetadata",
    "PickerRunExport",
]
