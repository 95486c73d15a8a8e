"""Filtering of the book table by genre, year and rating."""
from typing import Iterable, List, Optional, Tuple

from .models import Book, BookTable, FilterCriteria

RATING_BOUNDS = (0.0, 5.0)


def filter_books(
    table: Iterable[Book],
    criteria: Optional[FilterCriteria] = None,
    *,
    genres: Optional[Iterable[str]] = None,
    year_range: Optional[Tuple[int, int]] = None,
    rating_range: Optional[Tuple[float, float]] = None,
) -> List[Book]:
    """
    Books matching every constraint, in table order.

    Either pass a FilterCriteria or the three constraints as keywords. A book
    passes only if its main genre is selected, its year is known and inside
    the year range, and its rating is inside the rating range. Both ranges
    are inclusive. An empty genre selection matches nothing.
    """
    if criteria is None:
        criteria = FilterCriteria(
            genres=genres or (),
            year_range=year_range if year_range is not None else FilterCriteria().year_range,
            rating_range=rating_range if rating_range is not None else RATING_BOUNDS,
        )

    if not criteria.genres:
        return []

    year_lo, year_hi = criteria.year_range
    rating_lo, rating_hi = criteria.rating_range

    return [
        book for book in table
        if book.main_genre in criteria.genres
        and book.year is not None
        and year_lo <= book.year <= year_hi
        and rating_lo <= book.rating <= rating_hi
    ]


def default_criteria(table: BookTable) -> FilterCriteria:
    """Initial control state: every genre, the whole year span, any rating."""
    span = table.year_span or FilterCriteria().year_range
    return FilterCriteria(
        genres=frozenset(table.genres),
        year_range=span,
        rating_range=RATING_BOUNDS,
    )
