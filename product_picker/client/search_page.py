"""
Search page reader - raw product elements from a saved search results page.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..config import get_config
from ..models.listing import RawProductElement


logger = logging.getLogger(__name__)


PRODUCT_SELECTOR = '[data-asin]:not([data-asin=""])'
DELIVERY_DATE_SELECTOR = "div.sg-row div.a-row span.a-color-base.a-text-bold"
PRICE_WHOLE_SELECTOR = ".a-price-whole"
PRICE_FRACTION_SELECTOR = ".a-price-fraction"
RATING_SELECTOR = "span.a-icon-alt"
RATING_COUNT_SELECTOR = "span.a-size-base.s-underline-text"


def _text(node: Optional[Tag]) -> Optional[str]:
    if node is None:
        return None
    return node.get_text(strip=True) or None


class SearchPageReader:
    """
    Reads product elements out of search results HTML.
    Only the raw text is collected, parsing happens in the pipeline.
    """

    def __init__(self, html: str, parser: Optional[str] = None):
        self.parser = parser or get_config().extraction.html_parser
        self.soup = BeautifulSoup(html, self.parser)

    def product_elements(self) -> list[RawProductElement]:
        """All product elements on the page, in document order."""
        nodes = self.soup.select(PRODUCT_SELECTOR)
        elements = [self._read_element(node) for node in nodes]
        logger.info(f"Found {len(elements)} product elements")
        return elements

    def _read_element(self, node: Tag) -> RawProductElement:
        delivery_texts = [
            text
            for text in (_text(span) for span in node.select(DELIVERY_DATE_SELECTOR))
            if text
        ]

        return RawProductElement(
            product_id=node.get("data-asin") or None,
            delivery_date_texts=delivery_texts,
            price_whole=_text(node.select_one(PRICE_WHOLE_SELECTOR)),
            price_fraction=_text(node.select_one(PRICE_FRACTION_SELECTOR)),
            rating_text=_text(node.select_one(RATING_SELECTOR)),
            rating_count_text=_text(node.select_one(RATING_COUNT_SELECTOR)),
        )


def read_search_page(path: Union[str, Path], parser: Optional[str] = None) -> list[RawProductElement]:
    """Read a saved search results page and return its product elements."""
    html = Path(path).read_text(encoding="utf-8")
    return SearchPageReader(html, parser).product_elements()
