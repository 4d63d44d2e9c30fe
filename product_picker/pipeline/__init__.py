"""Pipeline modules for picking products."""

from .builder import build_listing, build_listings
from .optimizer import optimize
from .orchestrator import find_optimal_products, run_picker

__all__ = [
    "build_listing",
    "build_listings",
    "optimize",
    "find_optimal_products",
    "run_picker",
]
