import logging

import streamlit as st

from bookdash.aggregate import summary_stats, top_genres_by_rating_volume, year_histogram
from bookdash.charts import star_breakdown_figure, top_genres_figure, year_histogram_figure
from bookdash.config import Config
from bookdash.errors import LoadError
from bookdash.loader import load_books
from bookdash.models import FilterCriteria
from bookdash.state import DashboardState
from bookdash.views import book_details, display_frame

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@st.cache_data
def load_app_data(csv_path, language):
    return load_books(csv_path, language=language)


@st.cache_data
def load_chart_data(csv_path, language, top_n, bin_width):
    table = load_app_data(csv_path, language)
    return top_genres_by_rating_volume(table, top_n), year_histogram(table, bin_width)


def get_state(table):
    state = st.session_state.get("dashboard_state")
    if state is None or state.table.source != table.source:
        state = DashboardState(table)
        st.session_state.dashboard_state = state
    return state


def sidebar_criteria(table, current):
    st.header("🔍 Filters")

    genres = st.multiselect(
        "Genres",
        options=table.genres,
        default=sorted(current.genres),
        key="filter_genres"
    )

    span = table.year_span
    if span and span[0] < span[1]:
        year_range = st.slider(
            "Publication year", span[0], span[1],
            value=current.year_range, key="filter_years"
        )
    else:
        year_range = current.year_range

    rating_range = st.slider(
        "Rating", 0.0, 5.0,
        value=(float(current.rating_range[0]), float(current.rating_range[1])),
        step=0.05, key="filter_rating"
    )

    return FilterCriteria(genres=genres, year_range=year_range, rating_range=rating_range)


def display_book_details(book):
    details = book_details(book)
    st.subheader(f"📖 {details['Title']}")

    col1, col2 = st.columns([1, 2])

    with col1:
        st.metric("Author", details["Author"] or "Unknown")
        st.metric("Rating", f"{details['Rating']:.2f} ⭐")
        st.metric("Number of Ratings", f"{details['Number of Ratings']:,}")
        if details["Liked Percent"] is not None:
            st.metric("Liked", f"{details['Liked Percent']:.0f}%")
        st.write(f"**Published:** {details['Year'] or 'Unknown'}")

    with col2:
        if details["Genres"]:
            st.write("**Genres:**")
            st.info(", ".join(details["Genres"]))
        if details["Description"]:
            st.write(details["Description"])

        fig = star_breakdown_figure(book)
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True)


def display_books(state):
    if not state.subset:
        st.warning("No books match the current filters.")
        return

    st.subheader(f"📚 Books ({len(state.subset):,} found)")

    # A new key per criteria clears the row selection when the subset changes
    event = st.dataframe(
        display_frame(state.subset),
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"books_table_{hash(state.criteria)}",
        column_config={
            "Rating": st.column_config.NumberColumn(format="%.2f ⭐"),
            "Year": st.column_config.NumberColumn(format="%d"),
        }
    )

    state.apply_selection(event.selection.rows)


def display_search(state):
    st.subheader("🔎 Find a Book by Title")

    query = st.text_input(
        "Title contains:",
        placeholder="e.g., 'harry potter'",
        key="title_query"
    ).strip()

    if st.button("🔎 Search", key="search_btn", type="primary"):
        if query:
            with st.spinner("Searching..."):
                state.search(query)
        else:
            st.warning("Please enter a book title to search.")

    if state.search_query is None:
        return

    if state.search_result is not None:
        st.success(f"Found: **{state.search_result.title}**")
    else:
        st.info(f"No books found matching '{state.search_query}'.")
        if state.suggestions:
            st.write("Did you mean:")
            for title in state.suggestions:
                st.write(f"- {title}")


def display_charts(csv_path, language):
    volumes, bins = load_chart_data(csv_path, language, Config.TOP_GENRES_N, Config.YEAR_BIN_WIDTH)

    col1, col2 = st.columns(2)
    with col1:
        if volumes:
            st.plotly_chart(top_genres_figure(volumes), use_container_width=True)
        else:
            st.info("No genre data available.")
    with col2:
        if bins:
            st.plotly_chart(year_histogram_figure(bins, Config.YEAR_BIN_WIDTH), use_container_width=True)
        else:
            st.info("No publication years available.")


def main():
    st.set_page_config(
        page_title="Book Explorer",
        page_icon="📚",
        layout="wide"
    )

    csv_path = Config.BOOKS_CSV_PATH
    language = Config.BOOKS_LANGUAGE

    try:
        with st.spinner("Loading books..."):
            table = load_app_data(csv_path, language)
    except LoadError as e:
        logger.error(f"Failed to load dataset: {e}")
        st.error(f"❌ Error loading data: {e}")
        st.stop()

    state = get_state(table)

    with st.sidebar:
        state.update_criteria(sidebar_criteria(table, state.criteria))

        st.markdown("---")
        if st.button("🎲 Recommend me a book", key="recommend_btn", type="primary", use_container_width=True):
            state.recommend()

        if state.recommended and state.recommendation is None:
            st.warning("No books match the current filters, so there is nothing to recommend.")
        elif state.recommendation is not None:
            st.success(f"Try **{state.recommendation.title}** by {state.recommendation.author}")

        st.markdown("---")
        st.caption(f"Dataset: {len(table):,} {language} books")

    st.title("📚 Book Explorer")

    stats = summary_stats(state.subset)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Books in view", f"{stats['total_books']:,}")
    col2.metric(
        "Average rating",
        f"{stats['average_rating']:.2f}" if stats["average_rating"] is not None else "N/A"
    )
    col3.metric("Authors", f"{stats['unique_authors']:,}")
    col4.metric("Genres", f"{stats['unique_genres']:,}")

    tab1, tab2, tab3 = st.tabs(["📚 Browse", "🔎 Search", "📊 Charts"])

    with tab1:
        display_books(state)

    with tab2:
        display_search(state)

    with tab3:
        display_charts(csv_path, language)

    st.markdown("---")
    if state.detail is not None:
        display_book_details(state.detail)
    else:
        st.info("Select a row, press Recommend, or search for a title to see book details.")


if __name__ == "__main__":
    main()
