"""Smoke test script: full client cycle against the proposals API."""

import asyncio
import os
import sys
import traceback

# In-process database unless one is configured
os.environ.setdefault("DATABASE_URL", "sqlite://")

import httpx
from fastapi.testclient import TestClient

from apps.api.dependencies import engine
from apps.api.main import app
from packages.client import NO_PROPOSALS_MESSAGE, ProposalViewController, SubmitOutcome
from packages.core.database import init_db
from packages.stores.http_store import HttpProposalStore

client = TestClient(app)


def check_health():
    """Verify the API health endpoint."""
    response = client.get("/health")
    response.raise_for_status()
    health = response.json()
    print(f"Health: {health['status']} {health['checks']}")
    assert health["status"] == "healthy", health


async def run_client_cycle():
    """Mount, submit, reload and check what the view renders."""
    store = HttpProposalStore(base_url="http://smoke", transport=httpx.ASGITransport(app=app))
    controller = ProposalViewController(store)

    await controller.mount()
    view = controller.render()
    print(f"Initial load: {len(view.items)} proposals")
    if not view.items:
        assert view.empty_message == NO_PROPOSALS_MESSAGE

    before = len(view.items)
    controller.set_title("Upgrade parks")
    controller.set_description("Add benches")
    outcome = await controller.submit()
    print(f"Submit outcome: {outcome.value}")
    assert outcome == SubmitOutcome.CREATED, controller.state.error

    view = controller.render()
    assert len(view.items) == before + 1
    assert (view.items[-1].title, view.items[-1].description) == ("Upgrade parks", "Add benches")
    assert (view.title, view.description) == ("", "")

    # Server-side rejection keeps the drafts
    controller.set_title("   ")
    controller.set_description("whitespace title")
    outcome = await controller.submit()
    print(f"Blank title outcome: {outcome.value} ({controller.state.error})")
    assert outcome == SubmitOutcome.REJECTED
    assert controller.state.title == "   "


def main():
    """Run smoke test."""
    try:
        init_db(engine)
        check_health()
        asyncio.run(run_client_cycle())
        print("\n✅ Smoke test passed")
        return 0
    except Exception:
        print("\n❌ Smoke test failed")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
