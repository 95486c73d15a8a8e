"""Aggregate views over the full book table for the dashboard charts."""
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .models import Book, GenreVolume, YearBin


def top_genres_by_rating_volume(table: Iterable[Book], n: int = 10) -> List[GenreVolume]:
    """
    Genres ranked by the total number of ratings their books received.

    Works on the whole table regardless of the current filters. Books without
    a main genre are left out. Ties keep the order in which the genres first
    appear in the table.
    """
    records = [
        {"genre": book.main_genre, "num_ratings": book.num_ratings or 0}
        for book in table
        if book.main_genre is not None
    ]
    if not records or n <= 0:
        return []

    df = pd.DataFrame(records)
    grouped = (
        df.groupby("genre", sort=False)["num_ratings"]
        .agg(book_count="size", total_ratings="sum")
        .reset_index()
        .sort_values("total_ratings", ascending=False, kind="stable")
        .head(n)
    )

    return [
        GenreVolume(
            genre=row.genre,
            book_count=int(row.book_count),
            total_ratings=int(row.total_ratings),
        )
        for row in grouped.itertuples(index=False)
    ]


def year_histogram(
    table: Iterable[Book],
    bin_width: int = 10,
    origin: Optional[int] = None,
) -> List[YearBin]:
    """
    Count books per fixed-width block of publication years.

    Bins cover [start, start + bin_width). The origin defaults to the earliest
    year rounded down to a multiple of bin_width. Every bin up to the one
    holding the latest year is returned, empty bins included.
    """
    if bin_width < 1:
        raise ValueError(f"bin_width must be positive, got {bin_width}")

    years = pd.Series([book.year for book in table if book.year is not None], dtype="int64")
    if years.empty:
        return []

    if origin is None:
        origin = (int(years.min()) // bin_width) * bin_width
    years = years[years >= origin]
    if years.empty:
        return []

    counts = ((years - origin) // bin_width).value_counts()
    last_bin = int(counts.index.max())

    return [
        YearBin(bin_start=origin + i * bin_width, count=int(counts.get(i, 0)))
        for i in range(last_bin + 1)
    ]


def summary_stats(books: Iterable[Book]) -> Dict[str, Any]:
    """Header metrics for a subset of books."""
    books = list(books)
    return {
        "total_books": len(books),
        "average_rating": sum(book.rating for book in books) / len(books) if books else None,
        "unique_authors": len({book.author for book in books}),
        "unique_genres": len({book.main_genre for book in books if book.main_genre}),
    }
