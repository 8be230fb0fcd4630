"""
Data Management
===============

This module loads quiz questions into the Streamlit session.
"""
import asyncio
import logging
from datetime import datetime

import streamlit as st

from fetcher.parser import QuizDataError
from fetcher.quiz_fetcher import QuizFetcher, load_local_questions

logger = logging.getLogger(__name__)


async def run_fetcher_async(data_url, timeout):
    fetcher = QuizFetcher(data_url, timeout=timeout)
    try:
        return await fetcher.fetch_questions()
    finally:
        await fetcher.close()


def _store_questions(questions, source_label):
    st.session_state.raw_data = questions
    st.session_state.fetch_error = None
    st.session_state.analysis = None
    st.session_state.last_sync = f"{source_label} at {datetime.now().strftime('%H:%M:%S')}"


def _store_error(error):
    logger.error("Loading quiz questions failed: %s", error.message)
    st.session_state.raw_data = None
    st.session_state.analysis = None
    st.session_state.fetch_error = error.message


def sync_with_source(data_url, timeout):
    with st.status("Loading quiz questions...", expanded=False) as status:
        try:
            questions = asyncio.run(run_fetcher_async(data_url, timeout))
        except QuizDataError as e:
            _store_error(e)
            status.update(label="Loading failed.", state="error")
            return

        _store_questions(questions, data_url)
        status.update(label=f"Loaded {len(questions)} questions.", state="complete")


def load_local_file(path):
    try:
        questions = load_local_questions(path)
    except QuizDataError as e:
        _store_error(e)
        return

    _store_questions(questions, path)
    st.success(f"Loaded {len(questions)} questions from {path}")


def pending_source(raw_data, active_source):
    """Returns the source to (re)load on this run, or None when data is current."""
    if raw_data in ("initial", "loading"):
        return active_source
    return None
