"""Proposal store interface."""

from abc import ABC, abstractmethod

from packages.core.schemas import Proposal


class IProposalStore(ABC):
    """Remote proposal collection.

    Implementations raise ``RemoteUnavailable`` for transport/remote errors and
    ``Rejected`` when a write is refused.
    """

    @abstractmethod
    async def list_proposals(self) -> list[Proposal]:
        """Get the full collection in store order."""
        pass

    @abstractmethod
    async def create_proposal(self, title: str, description: str) -> Proposal:
        """Append one proposal. Returns the record as accepted by the store."""
        pass
