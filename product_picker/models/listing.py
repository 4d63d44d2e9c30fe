"""
Listing models - raw page elements and the structured listings built from them.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawProductElement(BaseModel):
    """
    Raw text pulled from one product element of a search results page.
    Nothing here is parsed yet, every field may be missing.
    """
    product_id: Optional[str] = None
    delivery_date_texts: list[str] = Field(default_factory=list)
    price_whole: Optional[str] = None
    price_fraction: Optional[str] = None
    rating_text: Optional[str] = None
    rating_count_text: Optional[str] = None


class Listing(BaseModel):
    """
    Structured product listing.
    Some properties may not be retrievable from the page, so all are optional.
    """
    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    price: Optional[float] = None  # no currency
    delivery_date: Optional[date] = None
    rating: Optional[float] = None  # 0 means unrated
    rating_count: Optional[int] = None
