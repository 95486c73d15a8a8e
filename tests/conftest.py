"""Shared fixtures for the dashboard tests."""
import csv

import pytest

from bookdash.models import Book, BookTable

CSV_COLUMNS = [
    "bookId", "title", "author", "rating", "description", "language", "genres",
    "publishDate", "numRatings", "ratingsByStars", "likedPercent",
]


def make_book(title="Untitled", main_genre="Fiction", year=2010, rating=4.0, num_ratings=100, **kwargs):
    """Build a Book with sensible defaults for the fields a test does not care about."""
    fields = {
        "title": title,
        "author": "Anon",
        "rating": rating,
        "num_ratings": num_ratings,
        "description": "",
        "genres_raw": f"['{main_genre}']" if main_genre else "[]",
        "main_genre": main_genre,
        "year": year,
        "ratings_by_stars": "[]",
        "liked_percent": None,
        "language": "English",
    }
    fields.update(kwargs)
    return Book(**fields)


@pytest.fixture
def sample_table():
    return BookTable(books=(
        make_book("Harry Potter and the Sorcerer's Stone", "Fantasy", 1997, 4.47, 9000,
                  author="J.K. Rowling", ratings_by_stars="['5000', '2500', '1000', '300', '200']"),
        make_book("The Great Gatsby", "Classics", 1925, 3.93, 4000, author="F. Scott Fitzgerald"),
        make_book("Gone Girl", "Mystery", 2012, 4.10, 3000, author="Gillian Flynn"),
        make_book("The Hobbit", "Fantasy", 1937, 4.28, 3500, author="J.R.R. Tolkien"),
        make_book("Pride and Prejudice", "Classics", 1813, 4.27, 5000, author="Jane Austen"),
        make_book("Unknown Date Book", "Fiction", None, 3.50, 10),
        make_book("No Genre Book", None, 2001, 3.00, 20000),
    ))


@pytest.fixture
def write_csv(tmp_path):
    """Write rows (dicts) to a CSV with the dataset's header and return its path."""
    def _write(rows, columns=CSV_COLUMNS, name="books.csv"):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return str(path)
    return _write
