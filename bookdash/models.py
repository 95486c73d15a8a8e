"""Data models for the book explorer dashboard."""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Book:
    """One book record with its raw and derived fields."""
    title: str
    author: str
    rating: float
    num_ratings: int
    description: str
    genres_raw: str
    main_genre: Optional[str]
    year: Optional[int]
    ratings_by_stars: str
    liked_percent: Optional[float]
    language: str


@dataclass(frozen=True)
class BookTable:
    """
    The loaded dataset.

    Holds the records as a tuple so nothing downstream can append, drop or
    reorder them. Filtering, grouping and searching all read from here.
    """
    books: Tuple[Book, ...] = ()
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def __getitem__(self, index: int) -> Book:
        return self.books[index]

    @property
    def genres(self) -> List[str]:
        """Distinct main genres, sorted for the genre picker."""
        return sorted({book.main_genre for book in self.books if book.main_genre})

    @property
    def year_span(self) -> Optional[Tuple[int, int]]:
        years = [book.year for book in self.books if book.year is not None]
        if not years:
            return None
        return min(years), max(years)


@dataclass(frozen=True)
class FilterCriteria:
    """Genre set, year range and rating range currently picked by the user."""
    genres: FrozenSet[str] = field(default_factory=frozenset)
    year_range: Tuple[int, int] = (1000, 9999)
    rating_range: Tuple[float, float] = (0.0, 5.0)

    def __post_init__(self):
        # Streamlit hands back lists; normalise so equality checks work
        object.__setattr__(self, "genres", frozenset(self.genres))
        object.__setattr__(self, "year_range", tuple(self.year_range))
        object.__setattr__(self, "rating_range", tuple(self.rating_range))


@dataclass(frozen=True)
class GenreVolume:
    genre: str
    book_count: int
    total_ratings: int


@dataclass(frozen=True)
class YearBin:
    bin_start: int
    count: int
