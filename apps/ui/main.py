"""Streamlit main application."""

import streamlit as st

from packages.ops.logging import setup_logging

setup_logging()

st.set_page_config(
    page_title="Proposal Board",
    page_icon="🗳️",
    layout="centered",
)

st.sidebar.title("Proposal Board")
st.sidebar.caption("Submit a proposal and browse everything submitted so far.")

from apps.ui.pages.proposals import render

render()
