"""Proposal client: view controller and rendering."""

from packages.client.controller import ProposalViewController, SubmitOutcome
from packages.client.view import NO_PROPOSALS_MESSAGE, ProposalView, ViewStatus, render_view

__all__ = [
    "NO_PROPOSALS_MESSAGE",
    "ProposalView",
    "ProposalViewController",
    "SubmitOutcome",
    "ViewStatus",
    "render_view",
]
