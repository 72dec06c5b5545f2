"""In-memory proposal store (offline mode and tests)."""

import logging

from packages.core.errors import Rejected
from packages.core.interfaces import IProposalStore
from packages.core.schemas import Proposal

logger = logging.getLogger(__name__)


class InMemoryProposalStore(IProposalStore):
    """Process-local proposal collection in insertion order."""

    def __init__(self, proposals: list[Proposal] | None = None):
        self._proposals: list[Proposal] = list(proposals or [])

    async def list_proposals(self) -> list[Proposal]:
        return list(self._proposals)

    async def create_proposal(self, title: str, description: str) -> Proposal:
        if not title.strip() or not description.strip():
            raise Rejected("title and description must not be blank", status_code=422)
        proposal = Proposal(title=title, description=description)
        self._proposals.append(proposal)
        logger.info(f"Stored proposal in memory: {title}")
        return proposal
