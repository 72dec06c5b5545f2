"""Test view rendering."""

from packages.client.view import (
    NO_PROPOSALS_MESSAGE,
    ProposalViewState,
    ViewStatus,
    render_view,
)
from packages.core.schemas import Proposal


def test_empty_state_shows_indicator():
    """Empty snapshot renders the explicit indicator."""
    view = render_view(ProposalViewState(status=ViewStatus.LOADED))
    assert view.items == []
    assert view.empty_message == NO_PROPOSALS_MESSAGE
    assert NO_PROPOSALS_MESSAGE == "No proposals found."


def test_not_loaded_yet_shows_indicator():
    """Before the first load completes the indicator is shown too."""
    view = render_view(ProposalViewState(status=ViewStatus.LOADING))
    assert view.empty_message == NO_PROPOSALS_MESSAGE
    assert view.busy is True


def test_items_keep_store_order_and_duplicates():
    """Items are rendered verbatim: no sorting, filtering or dedup."""
    proposals = [
        Proposal(title="b", description="2"),
        Proposal(title="a", description="1"),
        Proposal(title="b", description="2"),
    ]
    view = render_view(ProposalViewState(proposals=proposals, status=ViewStatus.LOADED))
    assert view.items == proposals
    assert view.empty_message is None


def test_failed_load_keeps_snapshot_and_error():
    """Failed load still shows the previous snapshot alongside the error."""
    state = ProposalViewState(
        proposals=[Proposal(title="t", description="d")],
        status=ViewStatus.LOAD_FAILED,
        error="Could not load proposals",
    )
    view = render_view(state)
    assert [p.title for p in view.items] == ["t"]
    assert view.error == "Could not load proposals"
    assert view.busy is False


def test_can_submit_requires_both_fields():
    """Submit is enabled only when both drafts are non-empty."""
    assert render_view(ProposalViewState(title="t", description="")).can_submit is False
    assert render_view(ProposalViewState(title="", description="d")).can_submit is False
    assert render_view(ProposalViewState(title="t", description="d")).can_submit is True
