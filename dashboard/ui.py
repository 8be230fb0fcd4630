"""
UI
==

This module implements the dashboard UI.
"""

from dataclasses import replace

import plotly.express as px
import streamlit as st
from streamlit_autorefresh import st_autorefresh

from analytics.metrics import analyze_questions, word_counts_to_frame
from config.settings import TOP_WORDS_MODES
from dashboard.data_management import load_local_file, pending_source, sync_with_source

MODE_LABELS = {
    "top3": "Top 3 words",
    "top10": "Top 10 words (min. 3 occurrences)",
}


def initialize_session_state(settings):
    """Initializes page config and session variables."""
    st.set_page_config(page_title="Quiz Words Dash", layout="wide")

    if 'raw_data' not in st.session_state:
        st.session_state.raw_data = "initial"
    if 'source' not in st.session_state:
        st.session_state.source = "file" if settings.data_path else "url"
    if 'data_path' not in st.session_state:
        st.session_state.data_path = settings.data_path
    if 'fetch_error' not in st.session_state:
        st.session_state.fetch_error = None
    if 'analysis' not in st.session_state:
        st.session_state.analysis = None
    if 'last_sync' not in st.session_state:
        st.session_state.last_sync = None
    if 'last_auto_refresh' not in st.session_state:
        st.session_state.last_auto_refresh = 0


def render_sidebar(settings):
    with st.sidebar:
        st.title("📝 Quiz Words Dash")
        st.header("Data Source")
        data_url = st.text_input("Quiz data URL", value=settings.data_url)
        data_path = st.text_input("Local JSON file", value=settings.data_path)

        if st.button("🚀 Reload from URL"):
            st.session_state.source = "url"
            st.session_state.raw_data = "loading"
            st.rerun()

        if st.button("📂 Load local file", disabled=not data_path):
            st.session_state.source = "file"
            st.session_state.data_path = data_path
            st.session_state.raw_data = "loading"
            st.rerun()

        st.divider()
        st.header("Analysis")
        modes = list(TOP_WORDS_MODES)
        mode = st.radio(
            "Ranking",
            modes,
            index=modes.index(settings.top_words_mode) if settings.top_words_mode in modes else 0,
            format_func=lambda m: MODE_LABELS.get(m, m),
        )

        st.divider()
        st.subheader("Update Settings")
        enable_auto_sync = st.checkbox("Enable Auto-sync", value=settings.auto_refresh)
        interval = st.slider("Interval (minutes)", 2, 10, 5, disabled=not enable_auto_sync)

        if enable_auto_sync:
            refresh_count = st_autorefresh(interval=interval * 60 * 1000, key="quiz_auto_sync")
            if refresh_count > st.session_state.last_auto_refresh:
                st.session_state.last_auto_refresh = refresh_count
                st.session_state.raw_data = "loading"

    return data_url, mode


def render_summary(summary):
    st.subheader("Summary Statistics")
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("Questions", summary.total_questions)
    c2.metric("Well Answered", summary.well_answered_count)
    c3.metric("Wrong Answered", summary.wrong_answered_count)
    c4.metric("Words Analyzed", summary.words_analyzed)
    c5.metric("Avg Words / Question", f"{summary.average_words_per_question:.2f}")


def render_word_list(title, word_counts, color):
    if not word_counts:
        st.caption(f"{title}: no words reach the minimum frequency.")
        return

    st.subheader(title)
    st.markdown("\n".join(f"{rank}. {wc.word} : {wc.count}"
                          for rank, wc in enumerate(word_counts, start=1)))

    df_words = word_counts_to_frame(word_counts)
    fig = px.bar(df_words, x="Count", y="Word", orientation="h",
                 color_discrete_sequence=[color])
    fig.update_layout(
        yaxis={'categoryorder': 'array', 'categoryarray': df_words["Word"].tolist()[::-1]},
        height=120 + len(df_words) * 30,
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False
    )
    st.plotly_chart(fig, width="stretch", key=f"plot_{title}")


def render_results(analysis):
    render_summary(analysis.summary)
    st.divider()

    column1, column2 = st.columns(2)
    with column1:
        render_word_list("Well Answered", analysis.well_answered, "#2ca02c")
    with column2:
        render_word_list("Wrong Answered", analysis.wrong_answered, "#d62728")


def run_dashboard(settings):
    initialize_session_state(settings)

    data_url, mode = render_sidebar(settings)

    source = pending_source(st.session_state.raw_data, st.session_state.source)
    if source == "file":
        load_local_file(st.session_state.data_path)
    elif source == "url":
        sync_with_source(data_url, settings.fetch_timeout)

    if st.session_state.fetch_error:
        st.error(f"Error loading quiz questions: {st.session_state.fetch_error}")
        return

    questions = st.session_state.raw_data if isinstance(st.session_state.raw_data, list) else []

    if st.button(f"Check {MODE_LABELS.get(mode, mode).lower()}", disabled=not questions):
        run_settings = replace(settings, top_words_mode=mode)
        st.session_state.analysis = analyze_questions(questions, run_settings)

    if st.session_state.last_sync:
        st.caption(f"{len(questions)} questions loaded from {st.session_state.last_sync}")

    if st.session_state.analysis is not None:
        render_results(st.session_state.analysis)
    elif not questions:
        st.info("No quiz questions available. Check the data source in the sidebar.")
