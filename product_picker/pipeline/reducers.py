"""
Aggregate reducers - best value per criterion and the listings that reach it.

Listings without the relevant field are ignored. A rating of 0 counts as no rating.
"""
from datetime import date
from typing import Optional

from ..models.listing import Listing


def earliest_delivery_date(listings: list[Listing]) -> Optional[date]:
    """Earliest delivery date among the listings."""
    dates = [l.delivery_date for l in listings if l.delivery_date is not None]
    if not dates:
        return None
    return min(dates)


def listings_with_earliest_delivery(listings: list[Listing]) -> list[Listing]:
    """All listings delivered on the earliest date."""
    earliest = earliest_delivery_date(listings)
    if earliest is None:
        return []
    return [l for l in listings if l.delivery_date is not None and l.delivery_date == earliest]


def lowest_price(listings: list[Listing]) -> Optional[float]:
    """Lowest price among the listings. Does not account for currency."""
    prices = [l.price for l in listings if l.price is not None]
    if not prices:
        return None
    return min(prices)


def listings_with_lowest_price(listings: list[Listing]) -> list[Listing]:
    """All listings sold at the lowest price."""
    lowest = lowest_price(listings)
    if lowest is None:
        return []
    return [l for l in listings if l.price is not None and l.price == lowest]


def _is_rated(listing: Listing) -> bool:
    return listing.rating is not None and listing.rating != 0


def highest_rating(listings: list[Listing]) -> Optional[float]:
    """
    Highest rating among the listings.
    Does not take the amount of ratings into account.
    """
    ratings = [l.rating for l in listings if _is_rated(l)]
    if not ratings:
        return None
    return max(ratings)


def listings_with_highest_rating(listings: list[Listing]) -> list[Listing]:
    """All listings with the highest rating."""
    highest = highest_rating(listings)
    if highest is None:
        return []
    return [l for l in listings if _is_rated(l) and l.rating == highest]
