"""
Cascading optimizer - narrow listings through an ordered list of criteria.
"""
import logging
from typing import Callable, Optional, Sequence, Union

from ..models.criteria import OptimizationCriterion
from ..models.listing import Listing
from .reducers import (
    listings_with_earliest_delivery,
    listings_with_highest_rating,
    listings_with_lowest_price,
)


logger = logging.getLogger(__name__)


Reducer = Callable[[list[Listing]], list[Listing]]

REDUCERS: dict[OptimizationCriterion, Reducer] = {
    OptimizationCriterion.PRICE: listings_with_lowest_price,
    OptimizationCriterion.DELIVERY_DATE: listings_with_earliest_delivery,
    OptimizationCriterion.RATING: listings_with_highest_rating,
}


def resolve_criterion(tag: Union[OptimizationCriterion, str]) -> Optional[OptimizationCriterion]:
    """Map a criterion or its string tag to the enum, None if unrecognized."""
    try:
        return OptimizationCriterion(tag)
    except (ValueError, TypeError):
        return None


def optimize(
    listings: list[Listing],
    criteria: Sequence[Union[OptimizationCriterion, str]],
) -> Optional[Listing]:
    """
    Pick the listing that best matches the criteria, in cascading order.

    Each criterion narrows the candidates to those at its best value. A criterion
    that would leave no candidates (e.g. no listing has a price) is skipped.
    Remaining ties are broken by highest rating, then by input order.

    Args:
        listings: Listings to choose from
        criteria: One or more criteria, most important first

    Returns:
        The chosen listing, or None if there are no listings or a criterion
        is not recognized
    """
    candidates = list(listings)

    for tag in criteria:
        criterion = resolve_criterion(tag)
        if criterion is None:
            logger.warning(f"Unrecognized optimization criterion {tag!r}, aborting")
            return None

        narrowed = REDUCERS[criterion](candidates)
        if not narrowed:
            logger.debug(f"{criterion.value} cannot discriminate, keeping {len(candidates)} candidates")
            continue

        logger.debug(f"{criterion.value} narrowed {len(candidates)} candidates to {len(narrowed)}")
        candidates = narrowed

    if len(candidates) > 1:
        narrowed = listings_with_highest_rating(candidates)
        if narrowed:
            candidates = narrowed

    if not candidates:
        return None
    return candidates[0]
