"""
Loads the books CSV into an immutable BookTable.

Only rows in the configured language are kept; main genre and publication
year are derived for every kept row.
"""
import logging
from typing import Optional

import numpy as np
import pandas as pd

from .derive import extract_year, main_genre
from .errors import LoadError
from .models import Book, BookTable

REQUIRED_COLUMNS = [
    "title",
    "author",
    "rating",
    "numRatings",
    "description",
    "genres",
    "language",
    "publishDate",
    "ratingsByStars",
    "likedPercent",
]

TEXT_COLUMNS = ["title", "author", "description", "genres", "language", "publishDate", "ratingsByStars"]
NUMERIC_COLUMNS = ["rating", "numRatings", "likedPercent"]


class BookCSVLoader:
    """
    Reads a books CSV export into Book records.

    Key behaviour:
    - Rows whose language is not an exact match are dropped, never stored
    - Unparseable ratings count as 0, matching how the dashboard shows them
    - Irregular genre and date fields degrade to None instead of failing the row
    """

    def __init__(self, language: str = "English", current_year: Optional[int] = None):
        self.language = language
        self.current_year = current_year
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self, csv_path: str) -> BookTable:
        """
        Load the dataset.

        Args:
            csv_path: Path to the books CSV

        Returns:
            BookTable with one Book per kept row, in file order

        Raises:
            LoadError: if the file is missing, unreadable or lacks required columns
        """
        self.logger.info(f"Loading books from {csv_path}")

        df = self._read_csv(csv_path)
        self._check_columns(df)

        total_rows = len(df)
        df = self._clean(df)
        df = df[df["language"] == self.language].reset_index(drop=True)

        books = self._to_books(df)

        missing_genre = sum(1 for book in books if book.main_genre is None)
        missing_year = sum(1 for book in books if book.year is None)
        self.logger.info(f"Loaded {len(books)} of {total_rows} rows (language={self.language})")
        self.logger.info(f"Records without main genre: {missing_genre}, without year: {missing_year}")

        return BookTable(books=tuple(books), source=str(csv_path))

    def _read_csv(self, csv_path):
        try:
            with open(csv_path, newline="", encoding="utf-8") as f:
                return pd.read_csv(f, dtype=str)
        except FileNotFoundError as e:
            raise LoadError(f"Dataset not found: {csv_path}") from e
        except pd.errors.EmptyDataError as e:
            raise LoadError(f"Dataset is empty: {csv_path}") from e
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise LoadError(f"Dataset is malformed: {csv_path}: {e}") from e
        except OSError as e:
            raise LoadError(f"Dataset unreadable: {csv_path}: {e}") from e

    def _check_columns(self, df):
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise LoadError(f"Dataset is missing required columns: {', '.join(missing)}")

    def _clean(self, df):
        df = df[REQUIRED_COLUMNS].copy()

        for col in TEXT_COLUMNS:
            df[col] = df[col].fillna("")

        for col in NUMERIC_COLUMNS:
            # "inf" parses as a number but is as unusable as garbage text
            df[col] = pd.to_numeric(df[col], errors="coerce").replace([np.inf, -np.inf], np.nan)

        df["rating"] = df["rating"].fillna(0.0)
        df["numRatings"] = df["numRatings"].fillna(0)
        df["numRatings"] = df["numRatings"].clip(lower=0).astype(int)

        return df

    def _to_books(self, df):
        books = []
        for row in df.itertuples(index=False):
            books.append(Book(
                title=row.title,
                author=row.author,
                rating=float(row.rating),
                num_ratings=int(row.numRatings),
                description=row.description,
                genres_raw=row.genres,
                main_genre=main_genre(row.genres),
                year=extract_year(row.publishDate, self.current_year),
                ratings_by_stars=row.ratingsByStars,
                liked_percent=self._safe_percent(row.likedPercent),
                language=row.language,
            ))
        return books

    def _safe_percent(self, value):
        """Liked percent as a float, or None when missing or out of range"""
        if pd.isna(value):
            return None
        value = float(value)
        if value < 0 or value > 100:
            return None
        return value


def load_books(csv_path: str, language: str = "English") -> BookTable:
    """
    Convenience function to load the dataset once at startup.

    Args:
        csv_path: Path to the books CSV
        language: Only rows with exactly this language are kept

    Returns:
        The loaded BookTable
    """
    return BookCSVLoader(language=language).load(csv_path)
