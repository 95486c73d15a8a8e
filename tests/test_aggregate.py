"""Tests for the chart aggregates."""
import pytest

from bookdash.aggregate import summary_stats, top_genres_by_rating_volume, year_histogram
from bookdash.models import BookTable, GenreVolume, YearBin

from conftest import make_book


def test_top_genres_sums_and_counts(sample_table):
    result = top_genres_by_rating_volume(sample_table)

    assert result == [
        GenreVolume("Fantasy", 2, 12500),
        GenreVolume("Classics", 2, 9000),
        GenreVolume("Mystery", 1, 3000),
        GenreVolume("Fiction", 1, 10),
    ]


def test_top_genres_truncates(sample_table):
    result = top_genres_by_rating_volume(sample_table, n=2)

    assert [v.genre for v in result] == ["Fantasy", "Classics"]


def test_top_genres_ties_keep_encounter_order():
    table = BookTable(books=(
        make_book("A", "Zeta", num_ratings=50),
        make_book("B", "Alpha", num_ratings=50),
        make_book("C", "Mid", num_ratings=70),
    ))

    result = top_genres_by_rating_volume(table)

    assert [v.genre for v in result] == ["Mid", "Zeta", "Alpha"]


def test_top_genres_properties(sample_table):
    result = top_genres_by_rating_volume(sample_table, n=3)

    assert len(result) <= 3
    totals = [v.total_ratings for v in result]
    assert totals == sorted(totals, reverse=True)
    assert sum(v.book_count for v in result) <= len(sample_table)


def test_top_genres_empty_table():
    assert top_genres_by_rating_volume(BookTable()) == []


def test_year_histogram_bins(sample_table):
    bins = year_histogram(sample_table, bin_width=50)

    assert bins[0] == YearBin(1800, 1)
    assert [b.bin_start for b in bins] == [1800, 1850, 1900, 1950, 2000]
    assert [b.count for b in bins] == [1, 0, 2, 1, 2]


def test_year_histogram_counts_every_known_year(sample_table):
    bins = year_histogram(sample_table)
    known = sum(1 for book in sample_table if book.year is not None)

    assert sum(b.count for b in bins) == known
    starts = [b.bin_start for b in bins]
    assert all(b - a == 10 for a, b in zip(starts, starts[1:]))


def test_year_histogram_custom_origin():
    table = BookTable(books=(make_book("A", year=2003), make_book("B", year=2011)))

    assert year_histogram(table, bin_width=5, origin=2001) == [
        YearBin(2001, 1), YearBin(2006, 0), YearBin(2011, 1)
    ]


def test_year_histogram_no_years():
    table = BookTable(books=(make_book("A", year=None),))
    assert year_histogram(table) == []


def test_year_histogram_rejects_bad_width(sample_table):
    with pytest.raises(ValueError):
        year_histogram(sample_table, bin_width=0)


def test_summary_stats(sample_table):
    stats = summary_stats(list(sample_table)[:2])

    assert stats["total_books"] == 2
    assert stats["average_rating"] == pytest.approx((4.47 + 3.93) / 2)
    assert stats["unique_authors"] == 2
    assert stats["unique_genres"] == 2


def test_summary_stats_empty():
    assert summary_stats([])["average_rating"] is None
