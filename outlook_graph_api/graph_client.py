"""
Microsoft Graph client for reading Outlook messages.

The handler only sees the ``MailProvider`` protocol; ``GraphMailClient`` is
the httpx-backed implementation wired in at startup.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from outlook_graph_api.constants import DEFAULT_TIMEOUT_SECONDS, GRAPH_BASE
from outlook_graph_api.models import MessageCollectionResponse

logger = logging.getLogger(__name__)


class MessageQuery(BaseModel):
    filter: Optional[str] = None
    top: Optional[int] = Field(default=None, ge=1)
    orderby: List[str] = Field(default_factory=list)
    select: List[str] = Field(default_factory=list)

    def to_params(self) -> Dict[str, str]:
        """Render as OData system query options."""
        params: Dict[str, str] = {}
        if self.filter:
            params["$filter"] = self.filter
        if self.top is not None:
            params["$top"] = str(self.top)
        if self.orderby:
            params["$orderby"] = ",".join(self.orderby)
        if self.select:
            params["$select"] = ",".join(self.select)
        return params


class TokenCredential(Protocol):
    async def get_token(self) -> str:
        ...


class MailProvider(Protocol):
    """Query the message collection of the current mailbox user."""

    async def list_messages(self, query: MessageQuery) -> Optional[MessageCollectionResponse]:
        ...


class GraphMailClient:
    def __init__(
        self,
        credential: TokenCredential,
        base_url: str = GRAPH_BASE,
        mailbox_user: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self.mailbox_user = mailbox_user
        self.timeout = timeout
        self._transport = transport

    @property
    def messages_url(self) -> str:
        if self.mailbox_user:
            # Guest UPNs carry "#EXT#"
            return f"{self.base_url}/users/{quote(self.mailbox_user, safe='@')}/messages"
        return f"{self.base_url}/me/messages"

    async def list_messages(self, query: MessageQuery) -> Optional[MessageCollectionResponse]:
        token = await self.credential.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(self.messages_url, headers=headers, params=query.to_params())
            logger.info("Graph API request URL: %s", resp.url)
            logger.info("Graph API status: %s", resp.status_code)
            if resp.status_code >= 400:
                logger.warning("Graph API error response: %s", resp.text[:500])
            resp.raise_for_status()
            body = resp.json()

        if body is None:
            return None
        return MessageCollectionResponse.model_validate(body)
