"""E2E test: view controller against the real API over HTTP."""

import pytest

from packages.client import NO_PROPOSALS_MESSAGE, ProposalViewController, SubmitOutcome, ViewStatus


@pytest.mark.asyncio
async def test_submit_and_reload_against_api(api_store):
    """Initial empty load, submit, reload shows the new proposal."""
    controller = ProposalViewController(api_store)
    await controller.mount()
    assert controller.render().empty_message == NO_PROPOSALS_MESSAGE

    controller.set_title("Upgrade parks")
    controller.set_description("Add benches")
    assert await controller.submit() == SubmitOutcome.CREATED

    view = controller.render()
    assert view.status == ViewStatus.LOADED
    assert [(p.title, p.description) for p in view.items] == [("Upgrade parks", "Add benches")]
    assert (view.title, view.description) == ("", "")


@pytest.mark.asyncio
async def test_write_visibility(api_store):
    """After a successful create the next list includes it."""
    await api_store.create_proposal("t", "d")
    proposals = await api_store.list_proposals()
    assert [(p.title, p.description) for p in proposals] == [("t", "d")]


@pytest.mark.asyncio
async def test_server_rejection_keeps_drafts(api_store):
    """A whitespace-only title passes the form check but the API rejects it."""
    controller = ProposalViewController(api_store)
    await controller.mount()

    controller.set_title("   ")
    controller.set_description("Add benches")
    outcome = await controller.submit()

    assert outcome == SubmitOutcome.REJECTED
    assert controller.state.title == "   "
    assert controller.state.description == "Add benches"
    assert "must not be blank" in controller.state.error
    assert controller.render().items == []
