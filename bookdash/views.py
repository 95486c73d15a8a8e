"""Projections handed to the table widget and the detail panel."""
from typing import Any, Dict, Iterable

import pandas as pd

from .derive import parse_list_field, parse_star_counts
from .models import Book

DISPLAY_COLUMNS = ["Title", "Author", "Genre", "Year", "Rating", "Number of Ratings"]


def display_frame(books: Iterable[Book]) -> pd.DataFrame:
    rows = [
        [book.title, book.author, book.main_genre, book.year, book.rating, book.num_ratings]
        for book in books
    ]
    df = pd.DataFrame(rows, columns=DISPLAY_COLUMNS)
    df["Year"] = df["Year"].astype("Int64")
    df["Rating"] = df["Rating"].astype(float)
    df["Number of Ratings"] = df["Number of Ratings"].astype("int64")
    return df


def book_details(book: Book) -> Dict[str, Any]:
    """Everything the detail panel shows for one book."""
    return {
        "Title": book.title,
        "Author": book.author,
        "Genre": book.main_genre,
        "Year": book.year,
        "Rating": book.rating,
        "Number of Ratings": book.num_ratings,
        "Liked Percent": book.liked_percent,
        "Genres": parse_list_field(book.genres_raw),
        "Description": book.description,
        "Ratings by Stars": parse_star_counts(book.ratings_by_stars),
    }
