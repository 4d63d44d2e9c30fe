"""
Pipeline orchestrator - picks the optimal products for the three canonical orders.
"""
import logging
import uuid
from datetime import datetime
from typing import Optional

import numpy as np

from ..models.criteria import OptimizationCriterion
from ..models.export import OptimalProductUrls, PickerRunExport, PriceSummary, RunMetadata
from ..models.listing import Listing, RawProductElement
from .builder import build_listings
from .optimizer import optimize


logger = logging.getLogger(__name__)


PRICE = OptimizationCriterion.PRICE
DELIVERY_DATE = OptimizationCriterion.DELIVERY_DATE
RATING = OptimizationCriterion.RATING

# Result field -> cascading criteria order
OPTIMIZATION_ORDERS: dict[str, list[OptimizationCriterion]] = {
    "fastest_delivery": [DELIVERY_DATE, PRICE, RATING],
    "cheapest": [PRICE, RATING, DELIVERY_DATE],
    "highest_rating": [RATING, PRICE, DELIVERY_DATE],
}


def find_optimal_products(listings: list[Listing]) -> OptimalProductUrls:
    """
    Find the urls of the products optimized, in cascading order, for
    delivery speed, price and rating.
    """
    urls = {}
    for field_name, criteria in OPTIMIZATION_ORDERS.items():
        chosen = optimize(listings, criteria)
        urls[field_name] = chosen.url if chosen is not None else None

    return OptimalProductUrls(**urls)


def summarize_prices(listings: list[Listing]) -> PriceSummary:
    """Price statistics over the priced listings."""
    prices = [l.price for l in listings if l.price is not None]
    if not prices:
        return PriceSummary()

    prices_array = np.array(prices)
    return PriceSummary(
        n=len(prices),
        min_price=float(np.min(prices_array)),
        max_price=float(np.max(prices_array)),
        median_price=float(np.median(prices_array)),
    )


def run_picker(
    elements: list[RawProductElement],
    url_template: Optional[str] = None,
) -> PickerRunExport:
    """
    Run the full picker pipeline.

    Pipeline steps:
    1. Build a listing for every raw element
    2. Pick the optimal product for each optimization order
    3. Return the urls with run metadata and a price summary

    Args:
        elements: Raw product elements, in page order
        url_template: Product url template (uses config if None)

    Returns:
        PickerRunExport with urls and metadata
    """
    run_id = str(uuid.uuid4())[:8]
    started_at = datetime.now()

    logger.info(f"Starting picker run {run_id} with {len(elements)} elements")

    # Step 1: Build listings
    listings = build_listings(elements, url_template)

    # Step 2: Optimize
    urls = find_optimal_products(listings)

    metadata = RunMetadata(
        run_id=run_id,
        started_at=started_at,
        completed_at=datetime.now(),
        total_elements=len(elements),
        listings_with_url=sum(1 for l in listings if l.url is not None),
        listings_with_price=sum(1 for l in listings if l.price is not None),
        listings_with_delivery_date=sum(1 for l in listings if l.delivery_date is not None),
        listings_with_rating=sum(1 for l in listings if l.rating is not None),
    )

    export = PickerRunExport(
        metadata=metadata,
        urls=urls,
        price_summary=summarize_prices(listings),
    )

    logger.info(
        f"Picker run {run_id} completed: cheapest={urls.cheapest}, "
        f"fastest_delivery={urls.fastest_delivery}, highest_rating={urls.highest_rating}"
    )
    return export
