"""HTTP proposal store backed by the proposals API."""

import logging
import os
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from packages.core.errors import Rejected, RemoteUnavailable
from packages.core.interfaces import IProposalStore
from packages.core.schemas import Proposal

logger = logging.getLogger(__name__)

_proposal_list = TypeAdapter(list[Proposal])

# 4xx statuses that mean "try again later" rather than "bad request"
RETRYABLE_CLIENT_STATUSES = {408, 429}
ACCEPTED_CREATE_STATUSES = {200, 201}


def error_message(response: httpx.Response) -> str:
    """Extract a readable message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    detail: Any = body.get("detail") if isinstance(body, dict) else body
    if detail is None:
        return response.reason_phrase
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict) and "message" in detail:
        return str(detail["message"])
    if isinstance(detail, list):
        # FastAPI validation errors
        messages = []
        for entry in detail:
            if isinstance(entry, dict):
                field = ".".join(str(part) for part in entry.get("loc", [])[1:])
                msg = entry.get("msg", "invalid")
                messages.append(f"{field}: {msg}" if field else msg)
            else:
                messages.append(str(entry))
        return "; ".join(messages)
    return str(detail)


class HttpProposalStore(IProposalStore):
    """Proposal store talking to ``GET/POST /proposals``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP store.

        Args:
            base_url: API base URL. Defaults to API_BASE_URL.
            timeout: Request timeout in seconds. Defaults to API_TIMEOUT.
            transport: Optional httpx transport (ASGI app or mock in tests).
        """
        self.base_url = (base_url or os.getenv("API_BASE_URL", "http://localhost:8000")).rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("API_TIMEOUT", "5.0"))
        self._transport = transport

    async def _request(self, method: str, endpoint: str, json: dict[str, Any] | None = None) -> httpx.Response:
        # A fresh client per call: the UI runs each coroutine on its own event loop.
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                return await client.request(method, endpoint, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {self.base_url}{endpoint} failed: {e!r}")
            raise RemoteUnavailable(f"Proposal service unreachable: {e}") from e

    async def list_proposals(self) -> list[Proposal]:
        """Get all proposals."""
        response = await self._request("GET", "/proposals")
        if not response.is_success:
            logger.warning(f"Listing proposals failed with HTTP {response.status_code}")
            raise RemoteUnavailable(
                f"Proposal service returned {response.status_code}: {error_message(response)}",
                status_code=response.status_code,
            )

        try:
            proposals = _proposal_list.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unexpected proposal list payload: {e}")
            raise RemoteUnavailable("Proposal service returned an invalid proposal list") from e

        logger.debug(f"Loaded {len(proposals)} proposals")
        return proposals

    async def create_proposal(self, title: str, description: str) -> Proposal:
        """Create a proposal."""
        response = await self._request(
            "POST",
            "/proposals",
            json={"title": title, "description": description},
        )
        status_code = response.status_code

        if 400 <= status_code < 500 and status_code not in RETRYABLE_CLIENT_STATUSES:
            message = error_message(response)
            logger.info(f"Proposal rejected with HTTP {status_code}: {message}")
            raise Rejected(message, status_code=status_code, detail=response.text)
        if status_code not in ACCEPTED_CREATE_STATUSES:
            # Includes 3xx: redirects are not followed, so nothing was written
            logger.warning(f"Creating proposal failed with HTTP {status_code}")
            raise RemoteUnavailable(
                f"Proposal service returned {status_code}: {error_message(response)}",
                status_code=status_code,
            )

        try:
            return Proposal.model_validate(response.json())
        except (ValueError, ValidationError):
            # 200/201: the write went through, the echo is only an acknowledgment
            return Proposal(title=title, description=description)
