"""
OAuth2 client credentials grant against the Microsoft identity platform.
Tokens are cached in memory until shortly before they expire.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, Optional

import httpx

from outlook_graph_api.constants import (
    DEFAULT_TIMEOUT_SECONDS, DEFAULT_TOKEN_EXPIRES_IN,
    ERROR_NO_ACCESS_TOKEN, GRAPH_DEFAULT_SCOPE, LOGIN_AUTHORITY,
    TOKEN_EXPIRY_BUFFER_SECONDS,
)

logger = logging.getLogger(__name__)


class ClientSecretCredential:
    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        scope: str = GRAPH_DEFAULT_SCOPE,
        authority: str = LOGIN_AUTHORITY,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.scope = scope
        self.token_url = f"{authority.rstrip('/')}/{tenant_id}/oauth2/v2.0/token"
        self.timeout = timeout
        self._transport = transport
        self._access_token: Optional[str] = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    def _cached(self, now: float) -> Optional[str]:
        if self._access_token and self._expires_at - TOKEN_EXPIRY_BUFFER_SECONDS > now:
            return self._access_token
        return None

    async def get_token(self) -> str:
        """Return a bearer token, exchanging client credentials when the cache is cold."""
        cached = self._cached(time.time())
        if cached:
            return cached

        # One exchange at a time; waiters pick up the fresh token
        async with self._lock:
            now = time.time()
            cached = self._cached(now)
            if cached:
                return cached
            return await self._exchange(now)

    async def _exchange(self, now: float) -> str:
        data: Dict[str, str] = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "scope": self.scope,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.token_url, data=data)
            logger.info("Token exchange status: %s", resp.status_code)
            if resp.status_code >= 400:
                logger.warning("Token exchange error: %s", resp.text[:300])
            resp.raise_for_status()
            js = resp.json()

        access_token = js.get("access_token")
        if not access_token:
            raise RuntimeError(ERROR_NO_ACCESS_TOKEN)
        expires_in = int(js.get("expires_in") or DEFAULT_TOKEN_EXPIRES_IN)
        self._access_token = access_token
        self._expires_at = now + expires_in
        logger.info("Token exchange successful, access_token length: %d", len(access_token))
        return access_token
