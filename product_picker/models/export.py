"""
Result models - chosen product urls and the full run export.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OptimalProductUrls(BaseModel):
    """Urls of the products chosen for each optimization order."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cheapest: Optional[str] = None
    fastest_delivery: Optional[str] = None
    highest_rating: Optional[str] = None


class PriceSummary(BaseModel):
    """Price statistics over the listings that have a price."""
    n: int = Field(default=0, description="Number of priced listings")
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    median_price: Optional[float] = None


class RunMetadata(BaseModel):
    """Metadata for a picker run."""
    run_id: str = Field(description="Unique run identifier")
    started_at: datetime
    completed_at: Optional[datetime] = None

    # Processing stats
    total_elements: int = 0
    listings_with_url: int = 0
    listings_with_price: int = 0
    listings_with_delivery_date: int = 0
    listings_with_rating: int = 0


class PickerRunExport(BaseModel):
    """Complete export of a picker run."""
    metadata: RunMetadata
    urls: OptimalProductUrls = Field(default_factory=OptimalProductUrls)
    price_summary: PriceSummary = Field(default_factory=PriceSummary)
