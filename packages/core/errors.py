"""Proposal store errors."""

from typing import Any


class ProposalStoreError(Exception):
    """Base error for remote proposal store operations."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail


class RemoteUnavailable(ProposalStoreError):
    """Transport failure, timeout or server-side error."""

    pass


class Rejected(ProposalStoreError):
    """The store refused a write (e.g. malformed payload)."""

    pass
