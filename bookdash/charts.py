"""Plotly figures for the dashboard charts."""
from typing import Sequence

import pandas as pd
import plotly.express as px

from .derive import parse_star_counts
from .models import Book, GenreVolume, YearBin


def top_genres_figure(volumes: Sequence[GenreVolume]):
    df = pd.DataFrame(
        [(v.genre, v.book_count, v.total_ratings) for v in volumes],
        columns=["genre", "book_count", "total_ratings"],
    )
    # Plotly draws horizontal bars bottom-up, so reverse to keep the top genre first
    df = df.iloc[::-1]
    return px.bar(
        df, x="total_ratings", y="genre", orientation="h",
        hover_data={"book_count": True},
        title="Top Genres by Number of Ratings",
        labels={"total_ratings": "Number of Ratings", "genre": "Genre", "book_count": "Books"},
    )


def year_histogram_figure(bins: Sequence[YearBin], bin_width: int = 10):
    df = pd.DataFrame(
        [(b.bin_start, b.count) for b in bins],
        columns=["bin_start", "count"],
    )
    df["period"] = df["bin_start"].map(lambda start: f"{start}-{start + bin_width - 1}")
    return px.bar(
        df, x="period", y="count",
        title="Books by Publication Year",
        labels={"period": "Publication Year", "count": "Books"},
    )


def star_breakdown_figure(book: Book):
    """Ratings per star level for one book, or None if the breakdown is unusable."""
    counts = parse_star_counts(book.ratings_by_stars)
    if not counts:
        return None

    stars = [f"{len(counts) - i} ★" for i in range(len(counts))]
    df = pd.DataFrame({"stars": stars, "ratings": counts})
    return px.bar(
        df, x="ratings", y="stars", orientation="h",
        title="Ratings by Stars",
        labels={"ratings": "Ratings", "stars": ""},
    )
