"""
Book explorer dashboard core.

The operations here work on an injected, read-only BookTable and never touch
Streamlit, so every one of them can run outside the app.
"""

from .errors import LoadError, InvalidQuery
from .models import Book, BookTable, FilterCriteria, GenreVolume, YearBin
from .loader import BookCSVLoader, load_books
from .filters import filter_books, default_criteria
from .recommend import pick_random
from .aggregate import top_genres_by_rating_volume, year_histogram, summary_stats
from .search import find_by_title, suggest_titles
from .state import DashboardState

__all__ = [
    "LoadError",
    "InvalidQuery",
    "Book",
    "BookTable",
    "FilterCriteria",
    "GenreVolume",
    "YearBin",
    "BookCSVLoader",
    "load_books",
    "filter_books",
    "default_criteria",
    "pick_random",
    "top_genres_by_rating_volume",
    "year_histogram",
    "summary_stats",
    "find_by_title",
    "suggest_titles",
    "DashboardState",
]
