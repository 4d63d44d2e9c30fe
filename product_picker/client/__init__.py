"""Readers producing raw product elements."""

from .search_page import SearchPageReader, read_search_page

__all__ = ["SearchPageReader", "read_search_page"]
