"""
Field parsers - turn raw page text into typed values.

Every parser is total: malformed or missing input gives None, never an exception.
"""
import math
import re
from datetime import date
from typing import Any, Optional

from ..config import get_config


# "Mon, Aug 2" or "Mon, Aug 2 - Wed, Aug 4"
DELIVERY_DATE_PATTERN = re.compile(
    r"[A-Z][a-z]{2}, [A-Z][a-z]{2} \d{1,2}( - [A-Z][a-z]{2}, [A-Z][a-z]{2} \d{1,2})?",
    re.ASCII,
)

RATING_PATTERN = re.compile(r"(\d\.\d|\d) out of 5 stars", re.ASCII)

# Leading numeric prefix, read the way a browser's parseFloat reads it
FLOAT_PREFIX_PATTERN = re.compile(r"^\s*(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

INT_PREFIX_PATTERN = re.compile(r"^\s*(\d+)", re.ASCII)

MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}

PRODUCT_ID_PLACEHOLDER = "{product_id}"


def parse_delivery_date(text: Any, year: Optional[int] = None) -> Optional[date]:
    """
    Parse a delivery date in the format "Mon, Aug 2".

    For a range like "Mon, Aug 2 - Wed, Aug 4" only the left date is used.
    The page does not show a year, so the current year is assumed.
    """
    if not isinstance(text, str):
        return None

    trimmed = text.strip()
    if not DELIVERY_DATE_PATTERN.fullmatch(trimmed):
        return None

    # "Mon, Aug 2 - Wed, Aug 4" -> "Aug 2 - Wed" -> ("Aug", "2")
    month_day = trimmed.split(", ")[1]
    month_name, day = month_day.split(" ")[:2]

    month = MONTHS.get(month_name)
    if month is None:
        return None

    if year is None:
        year = date.today().year

    try:
        return date(year, month, int(day))
    except ValueError:
        return None


def parse_float_prefix(text: str) -> Optional[float]:
    """Read the leading number of a string, ignoring whatever follows it."""
    match = FLOAT_PREFIX_PATTERN.match(text)
    if not match:
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_price(whole: Any, fraction: Any) -> Optional[float]:
    """
    Combine the whole and fraction parts of a displayed price.

    The parts are joined as they are: "12" and "99" give 1299.0, while a whole
    part that already carries the point ("12.") gives 12.99.
    Does not account for currency.
    """
    if not isinstance(whole, str) or not isinstance(fraction, str):
        return None
    if not whole or not fraction:
        return None

    return parse_float_prefix(f"{whole}{fraction}")


def parse_rating(text: Any) -> Optional[float]:
    """Parse a rating like "4.5 out of 5 stars". Ignores how many ratings there are."""
    if not isinstance(text, str) or not text:
        return None

    if not RATING_PATTERN.fullmatch(text):
        return None

    rating = float(text.split(" ")[0])
    if not math.isfinite(rating):
        return None
    return rating


def parse_rating_count(text: Any) -> Optional[int]:
    """Parse a rating count like "1,234"."""
    if not isinstance(text, str) or not text:
        return None

    match = INT_PREFIX_PATTERN.match(text.replace(",", ""))
    if not match:
        return None
    return int(match.group(1))


def derive_product_url(product_id: Any, template: Optional[str] = None) -> Optional[str]:
    """Build the product url from its id. Returns None when there is no id."""
    if not isinstance(product_id, str) or not product_id:
        return None

    if template is None:
        template = get_config().extraction.product_url_template
    return template.replace(PRODUCT_ID_PLACEHOLDER, product_id)


def product_id_from_url(url: Any, template: Optional[str] = None) -> Optional[str]:
    """Recover the product id from a url built by derive_product_url."""
    if not isinstance(url, str) or not url:
        return None

    if template is None:
        template = get_config().extraction.product_url_template
    prefix, _, suffix = template.partition(PRODUCT_ID_PLACEHOLDER)

    if len(url) <= len(prefix) + len(suffix):
        return None
    if not url.startswith(prefix) or not url.endswith(suffix):
        return None
    product_id = url[len(prefix):len(url) - len(suffix)]
    return product_id or None
