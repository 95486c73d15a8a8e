"""Tests for the chart figures."""
from bookdash.aggregate import top_genres_by_rating_volume, year_histogram
from bookdash.charts import star_breakdown_figure, top_genres_figure, year_histogram_figure


def test_top_genres_figure_puts_top_genre_first(sample_table):
    fig = top_genres_figure(top_genres_by_rating_volume(sample_table))

    # Horizontal bars are drawn bottom-up
    assert list(fig.data[0].y)[-1] == "Fantasy"
    assert list(fig.data[0].x)[-1] == 12500


def test_year_histogram_figure_labels(sample_table):
    fig = year_histogram_figure(year_histogram(sample_table, bin_width=50), bin_width=50)

    assert list(fig.data[0].x) == ["1800-1849", "1850-1899", "1900-1949", "1950-1999", "2000-2049"]
    assert list(fig.data[0].y) == [1, 0, 2, 1, 2]


def test_star_breakdown_figure(sample_table):
    fig = star_breakdown_figure(sample_table[0])

    assert list(fig.data[0].x) == [5000, 2500, 1000, 300, 200]
    assert list(fig.data[0].y)[0] == "5 ★"


def test_star_breakdown_figure_without_data(sample_table):
    assert star_breakdown_figure(sample_table[1]) is None
