"""View state and rendering for the proposals screen."""

import enum

from pydantic import BaseModel, Field

from packages.core.schemas import Proposal

NO_PROPOSALS_MESSAGE = "No proposals found."


class ViewStatus(str, enum.Enum):
    """Proposal list lifecycle."""

    UNINITIALIZED = "UNINITIALIZED"
    LOADING = "LOADING"
    LOADED = "LOADED"
    LOAD_FAILED = "LOAD_FAILED"
    SUBMITTING = "SUBMITTING"


class ProposalViewState(BaseModel):
    """Mutable UI state owned by the view controller."""

    title: str = ""
    description: str = ""
    proposals: list[Proposal] = Field(default_factory=list)
    status: ViewStatus = ViewStatus.UNINITIALIZED
    error: str | None = None


class ProposalView(BaseModel):
    """What the screen shows for a given state."""

    status: ViewStatus
    title: str
    description: str
    items: list[Proposal]
    empty_message: str | None = None
    error: str | None = None
    busy: bool = False
    can_submit: bool = False


def drafts_complete(title: str, description: str) -> bool:
    """Required-field check: both drafts must be non-empty."""
    return title != "" and description != ""


def render_view(state: ProposalViewState) -> ProposalView:
    """Derive the view from state.

    Items keep the exact order of the last applied load. An empty snapshot
    always renders the "no proposals" indicator.
    """
    items = list(state.proposals)
    return ProposalView(
        status=state.status,
        title=state.title,
        description=state.description,
        items=items,
        empty_message=None if items else NO_PROPOSALS_MESSAGE,
        error=state.error,
        busy=state.status in (ViewStatus.LOADING, ViewStatus.SUBMITTING),
        can_submit=drafts_complete(state.title, state.description),
    )
