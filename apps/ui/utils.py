"""UI utilities."""

import asyncio
import os
from typing import Any, Coroutine, TypeVar

import streamlit as st

from packages.client import ProposalViewController
from packages.stores import get_proposal_store

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

T = TypeVar("T")


def get_controller() -> ProposalViewController:
    """Get the proposal view controller for this browser session."""
    if "proposal_controller" not in st.session_state:
        store = get_proposal_store(base_url=API_BASE_URL)
        st.session_state.proposal_controller = ProposalViewController(store)
    return st.session_state.proposal_controller


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a controller coroutine from the Streamlit script thread."""
    return asyncio.run(coro)
