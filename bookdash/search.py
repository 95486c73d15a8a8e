"""Title lookup for the search box."""
import logging
from typing import Iterable, List, Optional

from fuzzywuzzy import process

from .errors import InvalidQuery
from .models import Book

logger = logging.getLogger(__name__)


def _clean_query(query):
    cleaned = (query or "").strip()
    if not cleaned:
        raise InvalidQuery("Please enter a book title to search.")
    return cleaned


def find_by_title(table: Iterable[Book], query: str) -> Optional[Book]:
    """
    First book, in table order, whose title contains the query (case-insensitive).

    Only one book is ever returned even when several titles match. Returns
    None when nothing matches.

    Raises:
        InvalidQuery: if the query is empty or whitespace
    """
    needle = _clean_query(query).lower()

    for book in table:
        if needle in book.title.lower():
            return book
    return None


def suggest_titles(table: Iterable[Book], query: str, limit: int = 3, threshold: int = 60) -> List[str]:
    """Close title matches to offer when a search finds nothing."""
    cleaned = _clean_query(query)

    titles = list(dict.fromkeys(book.title for book in table if book.title))
    if not titles:
        return []

    matches = process.extract(cleaned, titles, limit=limit)
    logger.debug(f"Fuzzy matches for {cleaned!r}: {matches}")
    return [title for title, score in matches if score >= threshold]
