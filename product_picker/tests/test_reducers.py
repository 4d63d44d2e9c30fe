"""
Tests for the aggregate reducers.
"""
from product_picker.models.listing import Listing
from product_picker.pipeline.reducers import (
    earliest_delivery_date,
    highest_rating,
    listings_with_earliest_delivery,
    listings_with_highest_rating,
    listings_with_lowest_price,
    lowest_price,
)


class TestPriceReducers:
    """Tests for the lowest price reducers."""

    def test_listings_at_lowest_price(self):
        """Test that all listings at the lowest price are returned."""
        first = Listing(url="1", price=5)
        second = Listing(url="2", price=5)
        listings = [first, second, Listing(url="3"), Listing(url="4", price=8)]

        result = listings_with_lowest_price(listings)

        assert result == [first, second]
        assert lowest_price(listings) == 5

    def test_zero_price_counts(self):
        """Test that a price of zero is a real price."""
        listings = [Listing(url="1", price=3), Listing(url="2", price=0)]

        assert lowest_price(listings) == 0
        assert [l.url for l in listings_with_lowest_price(listings)] == ["2"]

    def test_no_prices(self):
        """Test a collection without any price."""
        listings = [Listing(url="1"), Listing(url="2", rating=4)]

        assert lowest_price(listings) is None
        assert listings_with_lowest_price(listings) == []


class TestDeliveryDateReducers:
    """Tests for the earliest delivery reducers."""

    def test_listings_at_earliest_date(self, aug):
        """Test that all listings delivered first are returned."""
        listings = [
            Listing(url="1", delivery_date=aug(3)),
            Listing(url="2", delivery_date=aug(1)),
            Listing(url="3"),
            Listing(url="4", delivery_date=aug(1)),
        ]

        assert earliest_delivery_date(listings) == aug(1)
        assert [l.url for l in listings_with_earliest_delivery(listings)] == ["2", "4"]

    def test_no_dates(self):
        """Test a collection without any delivery date."""
        assert earliest_delivery_date([Listing()]) is None
        assert listings_with_earliest_delivery([Listing()]) == []


class TestRatingReducers:
    """Tests for the highest rating reducers."""

    def test_listings_at_highest_rating(self):
        """Test that all listings with the highest rating are returned."""
        listings = [
            Listing(url="1", rating=4.5),
            Listing(url="2", rating=3),
            Listing(url="3", rating=4.5),
        ]

        assert highest_rating(listings) == 4.5
        assert [l.url for l in listings_with_highest_rating(listings)] == ["1", "3"]

    def test_zero_rating_is_ignored(self):
        """Test that a zero rating counts as no rating."""
        listings = [Listing(url="1", rating=0), Listing(url="2")]

        assert highest_rating(listings) is None
        assert listings_with_highest_rating(listings) == []

    def test_zero_rating_never_matches(self):
        """Test that zero rated listings are not part of the result."""
        listings = [Listing(url="1", rating=0), Listing(url="2", rating=1)]
        assert [l.url for l in listings_with_highest_rating(listings)] == ["2"]


class TestEmptyListings:
    """Tests for listings without any field."""

    def test_blank_listings_are_ignored(self):
        """Test that blank listings never cause errors or matches."""
        listings = [Listing(), Listing()]

        assert lowest_price(listings) is None
        assert earliest_delivery_date(listings) is None
        assert highest_rating(listings) is None
        assert listings_with_lowest_price([]) == []
        assert listings_with_earliest_delivery([]) == []
        assert listings_with_highest_rating([]) == []
