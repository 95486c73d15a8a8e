"""
Explicit dashboard state.

Each user action recomputes only the view it owns:
- changing a control recomputes the filtered subset
- pressing Recommend draws a new pick from the current subset
- pressing Search looks up a title
- selecting a table row puts that book in the detail panel

Changing filters therefore never advances the recommendation.
"""
import logging
from typing import List, Optional

import numpy as np

from .filters import default_criteria, filter_books
from .models import Book, BookTable, FilterCriteria
from .recommend import pick_random
from .search import find_by_title, suggest_titles

logger = logging.getLogger(__name__)


class DashboardState:
    """Current criteria plus the views derived from them, over one read-only table."""

    def __init__(self, table: BookTable, criteria: Optional[FilterCriteria] = None):
        self.table = table
        self.criteria = criteria if criteria is not None else default_criteria(table)
        self.subset: List[Book] = filter_books(table, self.criteria)

        self.recommendation: Optional[Book] = None
        self.recommended = False

        self.search_query: Optional[str] = None
        self.search_result: Optional[Book] = None
        self.suggestions: List[str] = []

        self.selected_index: Optional[int] = None
        self.detail: Optional[Book] = None

    def update_criteria(self, criteria: FilterCriteria) -> bool:
        """Recompute the subset if the criteria changed. Returns True when it did."""
        if criteria == self.criteria:
            return False

        self.criteria = criteria
        self.subset = filter_books(self.table, criteria)
        # Row indices pointed into the old subset
        self.selected_index = None
        logger.debug(f"Criteria changed, {len(self.subset)} books match")
        return True

    def recommend(self, rng: Optional[np.random.Generator] = None) -> Optional[Book]:
        self.recommended = True
        self.recommendation = pick_random(self.subset, rng)
        if self.recommendation is not None:
            self.detail = self.recommendation
        logger.debug(f"Recommended: {self.recommendation.title if self.recommendation else None}")
        return self.recommendation

    def search(self, query: str) -> Optional[Book]:
        """
        Look up a title. Suggestions are filled in only when nothing matched.

        Raises:
            InvalidQuery: if the query is blank; state is left untouched
        """
        result = find_by_title(self.table, query)

        self.search_query = query.strip()
        self.search_result = result
        self.suggestions = [] if result is not None else suggest_titles(self.table, query)
        if result is not None:
            self.detail = result
        logger.debug(f"Search {self.search_query!r}: {result.title if result else 'no match'}")
        return result

    def select_row(self, index: int) -> Book:
        if index < 0 or index >= len(self.subset):
            raise IndexError(f"Row {index} is outside the {len(self.subset)} filtered books")

        self.selected_index = index
        self.detail = self.subset[index]
        return self.detail

    def apply_selection(self, rows):
        """Sync with the table widget's selected rows; only a newly selected row updates the detail."""
        if not rows:
            # Deselecting lets the same row be picked again later
            self.selected_index = None
            return None
        if rows[0] == self.selected_index or rows[0] >= len(self.subset):
            return None
        return self.select_row(rows[0])
