"""
Listing builder - one structured Listing per raw page element.
"""
import logging
from datetime import date
from typing import Iterable, Optional

from ..models.listing import Listing, RawProductElement
from .parsers import (
    derive_product_url,
    parse_delivery_date,
    parse_price,
    parse_rating,
    parse_rating_count,
)


logger = logging.getLogger(__name__)


def earliest_parsed_date(texts: Iterable[str]) -> Optional[date]:
    """Earliest of the delivery dates that parse, or None if none do."""
    dates = [d for d in (parse_delivery_date(t) for t in texts if t) if d is not None]
    if not dates:
        return None
    return min(dates)


def build_listing(element: RawProductElement, url_template: Optional[str] = None) -> Listing:
    """
    Parse a raw element into a Listing.
    Missing or unparseable fields are left as None.
    """
    return Listing(
        url=derive_product_url(element.product_id, url_template),
        price=parse_price(element.price_whole, element.price_fraction),
        delivery_date=earliest_parsed_date(element.delivery_date_texts),
        rating=parse_rating(element.rating_text),
        rating_count=parse_rating_count(element.rating_count_text),
    )


def build_listings(
    elements: list[RawProductElement],
    url_template: Optional[str] = None,
) -> list[Listing]:
    """Build listings for all elements, keeping their order."""
    listings = [build_listing(element, url_template) for element in elements]
    logger.debug(f"Built {len(listings)} listings from {len(elements)} elements")
    return listings
