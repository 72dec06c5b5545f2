"""Proposal store factory."""

import logging
import os

from packages.core.interfaces import IProposalStore
from packages.stores.http_store import HttpProposalStore
from packages.stores.memory_store import InMemoryProposalStore

logger = logging.getLogger(__name__)


def get_proposal_store(base_url: str | None = None) -> IProposalStore:
    """Get store instance based on PROPOSAL_STORE_MODE environment variable."""
    store_mode = os.getenv("PROPOSAL_STORE_MODE", "http").lower()

    if store_mode == "memory":
        logger.info("Using in-memory proposal store")
        return InMemoryProposalStore()
    else:
        logger.info("Using HTTP proposal store")
        return HttpProposalStore(base_url=base_url)
