"""Proposal view controller: load on mount, write then reload on submit."""

import enum
import logging
from typing import Callable

from packages.client.view import (
    ProposalView,
    ProposalViewState,
    ViewStatus,
    drafts_complete,
    render_view,
)
from packages.core.errors import Rejected, RemoteUnavailable
from packages.core.interfaces import IProposalStore

logger = logging.getLogger(__name__)

ViewListener = Callable[[ProposalView], None]


class SubmitOutcome(str, enum.Enum):
    """Result of a submit attempt."""

    CREATED = "CREATED"
    INCOMPLETE = "INCOMPLETE"
    REJECTED = "REJECTED"
    UNAVAILABLE = "UNAVAILABLE"


class ProposalViewController:
    """Keeps the proposal form and list in sync with the remote store.

    All state changes go through this class and happen on one event loop.
    After every change the view is re-derived and passed to subscribers.

    Each load gets a sequence number. A load result is applied only if no
    newer load has settled before it, so a slow response can never overwrite
    a fresher snapshot.
    """

    def __init__(self, store: IProposalStore):
        self._store = store
        self.state = ProposalViewState()
        self._listeners: list[ViewListener] = []
        self._issued_seq = 0
        self._settled_seq = 0
        self._last_load_ok: bool | None = None

    # Subscription

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a listener called with the view after each state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def render(self) -> ProposalView:
        return render_view(self.state)

    def _emit(self) -> None:
        view = self.render()
        for listener in list(self._listeners):
            listener(view)

    # Drafts

    def set_title(self, value: str) -> None:
        self.state.title = value
        self._emit()

    def set_description(self, value: str) -> None:
        self.state.description = value
        self._emit()

    def can_submit(self) -> bool:
        return drafts_complete(self.state.title, self.state.description)

    # Loading

    async def mount(self) -> None:
        """Initial load. Does nothing once the controller has been mounted."""
        if self.state.status != ViewStatus.UNINITIALIZED:
            return
        await self.refresh()

    async def refresh(self) -> bool:
        """Reload the full list. Returns True if the result was applied."""
        self._issued_seq += 1
        seq = self._issued_seq
        self.state.status = ViewStatus.LOADING
        self._emit()

        try:
            proposals = await self._store.list_proposals()
        except RemoteUnavailable as e:
            if self._is_stale(seq):
                return False
            self._settled_seq = seq
            self._last_load_ok = False
            # Prior snapshot stays on screen
            self.state.status = ViewStatus.LOAD_FAILED
            self.state.error = f"Could not load proposals: {e.message}"
            logger.warning("Proposal load failed", extra={"load_seq": seq})
            self._emit()
            return False

        if self._is_stale(seq):
            return False
        self._settled_seq = seq
        self._last_load_ok = True
        self.state.proposals = list(proposals)
        self.state.status = ViewStatus.LOADED
        self.state.error = None
        logger.info(f"Loaded {len(proposals)} proposals", extra={"load_seq": seq})
        self._emit()
        return True

    def _is_stale(self, seq: int) -> bool:
        if seq < self._settled_seq:
            logger.info(
                f"Discarding stale load result (newer load {self._settled_seq} already settled)",
                extra={"load_seq": seq},
            )
            return True
        return False

    def _resting_status(self) -> ViewStatus:
        if self._issued_seq > self._settled_seq:
            # A load issued earlier is still pending
            return ViewStatus.LOADING
        if self._last_load_ok is None:
            return ViewStatus.UNINITIALIZED
        return ViewStatus.LOADED if self._last_load_ok else ViewStatus.LOAD_FAILED

    # Submission

    async def submit(self) -> SubmitOutcome:
        """Create a proposal from the drafts, then reload the list.

        The reload is issued only after the create has completed. On failure
        the drafts are left untouched so the user can retry.
        """
        if not self.can_submit():
            logger.info("Submit skipped: title and description are required")
            return SubmitOutcome.INCOMPLETE

        title = self.state.title
        description = self.state.description
        self.state.status = ViewStatus.SUBMITTING
        self.state.error = None
        self._emit()

        try:
            await self._store.create_proposal(title, description)
        except Rejected as e:
            self._fail_submit(f"Proposal rejected: {e.message}")
            return SubmitOutcome.REJECTED
        except RemoteUnavailable as e:
            self._fail_submit(f"Could not submit proposal: {e.message}")
            return SubmitOutcome.UNAVAILABLE

        logger.info(f"Proposal created: {title}")
        # Keep anything typed while the write was in flight
        if self.state.title == title:
            self.state.title = ""
        if self.state.description == description:
            self.state.description = ""

        await self.refresh()
        return SubmitOutcome.CREATED

    def _fail_submit(self, message: str) -> None:
        logger.warning(message)
        self.state.status = self._resting_status()
        self.state.error = message
        self._emit()
