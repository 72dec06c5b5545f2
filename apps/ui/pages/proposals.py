"""Proposals page."""

import streamlit as st

from apps.ui.utils import get_controller, run_async
from packages.client import ProposalView, SubmitOutcome


def render_form(view: ProposalView):
    """Render the add-proposal form and handle submission."""
    controller = get_controller()

    with st.form("add_proposal"):
        title = st.text_input("Title", value=view.title)
        description = st.text_input("Description", value=view.description)
        submitted = st.form_submit_button("Add Proposal", disabled=view.busy)

    if not submitted:
        return

    controller.set_title(title)
    controller.set_description(description)
    outcome = run_async(controller.submit())

    if outcome == SubmitOutcome.INCOMPLETE:
        st.warning("Title and description are required.")
    elif outcome == SubmitOutcome.CREATED:
        st.rerun()
    # Rejected/unavailable: error shown with the list below, drafts kept


def render_list(view: ProposalView):
    """Render the proposals list."""
    st.subheader("Proposals")

    if view.error:
        st.error(view.error)

    if not view.items:
        st.info(view.empty_message)
        return

    for proposal in view.items:
        with st.container(border=True):
            st.markdown(f"### {proposal.title}")
            st.write(proposal.description)


def render():
    """Render proposals page."""
    st.title("Proposals")
    controller = get_controller()

    run_async(controller.mount())

    render_form(controller.render())

    if st.button("Refresh"):
        run_async(controller.refresh())

    render_list(controller.render())


# Streamlit also runs files under pages/ directly as sidebar pages
if __name__ == "__main__":
    render()
