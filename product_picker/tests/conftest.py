"""
Shared fixtures.
"""
from datetime import date

import pytest

from product_picker.models.listing import Listing


@pytest.fixture
def aug():
    """Build a date in August of a fixed year."""
    return lambda day: date(2021, 8, day)


@pytest.fixture
def three_listings(aug) -> list[Listing]:
    """A is cheap, B is cheap and well rated, C is fastest."""
    return [
        Listing(url="A", price=10, rating=4, delivery_date=aug(2)),
        Listing(url="B", price=10, rating=5, delivery_date=aug(3)),
        Listing(url="C", price=15, rating=5, delivery_date=aug(1)),
    ]
