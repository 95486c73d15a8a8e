"""
Per-record field derivation.

The source data is known to be irregular, so none of these raise: anything
that does not parse degrades to None or an empty list.
"""
import re
from datetime import date
from typing import List, Optional

import pandas as pd

LIST_SYNTAX_CHARS = "[]'"
LIST_SEPARATOR = ", "
YEAR_PATTERN = re.compile(r"(?<!\d)\d{4}(?!\d)")
MIN_YEAR = 1000
FUTURE_YEAR_SLACK = 5


def _is_missing(value):
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _strip_list_syntax(raw):
    cleaned = str(raw)
    for char in LIST_SYNTAX_CHARS:
        cleaned = cleaned.replace(char, "")
    return cleaned


def parse_list_field(raw) -> List[str]:
    """Split a serialized list such as "['Fiction', 'Classics']" into its non-empty entries."""
    if _is_missing(raw):
        return []
    return [token for token in _strip_list_syntax(raw).split(LIST_SEPARATOR) if token]


def main_genre(raw) -> Optional[str]:
    # First token as written; a blank first entry means no genre
    if _is_missing(raw):
        return None
    first = _strip_list_syntax(raw).split(LIST_SEPARATOR)[0]
    return first or None


def extract_year(raw_date, current_year: Optional[int] = None) -> Optional[int]:
    """
    Pull the first run of exactly four digits out of a publish-date string.

    Values later than current_year + 5 or earlier than 1000 come from typos
    and OCR noise ("9021", "0003"), so they are dropped rather than kept. Longer
    digit runs such as "20015" are not years at all.
    """
    if _is_missing(raw_date):
        return None

    match = YEAR_PATTERN.search(str(raw_date))
    if not match:
        return None

    if current_year is None:
        current_year = date.today().year

    year = int(match.group())
    if year > current_year + FUTURE_YEAR_SLACK or year < MIN_YEAR:
        return None
    return year


def parse_star_counts(raw) -> List[int]:
    """Rating counts per star level, five stars first, as stored in ratingsByStars."""
    counts = []
    for token in parse_list_field(raw):
        token = token.strip()
        if not token.isdigit():
            return []
        counts.append(int(token))
    return counts
