from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from outlook_graph_api.config import (
    configure_logging, get_authority, get_azure_credentials, get_graph_base_url,
    get_graph_scope, get_mailbox_user, get_timeout_seconds, get_ui_origins,
)
from outlook_graph_api.credentials import ClientSecretCredential
from outlook_graph_api.graph_client import GraphMailClient, MailProvider
from outlook_graph_api.handler import get_latest_unread
from outlook_graph_api.models import LatestUnreadMessage

logger = logging.getLogger(__name__)


def build_graph_client() -> GraphMailClient:
    """Build the Graph client from the environment; missing credentials are fatal."""
    creds = get_azure_credentials()
    timeout = get_timeout_seconds()
    credential = ClientSecretCredential(
        creds.tenant_id,
        creds.client_id,
        creds.client_secret,
        scope=get_graph_scope(),
        authority=get_authority(),
        timeout=timeout,
    )
    return GraphMailClient(
        credential,
        base_url=get_graph_base_url(),
        mailbox_user=get_mailbox_user(),
        timeout=timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    app.state.mail_provider = build_graph_client()
    logger.info("Graph client ready for %s", app.state.mail_provider.messages_url)
    yield
    del app.state.mail_provider


app = FastAPI(title="Outlook Graph API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_ui_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_mail_provider(request: Request) -> MailProvider:
    return request.app.state.mail_provider


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get(
    "/api/email/latest-unread",
    response_model=LatestUnreadMessage,
    responses={404: {"description": "No unread message"}},
)
async def latest_unread(provider: MailProvider = Depends(get_mail_provider)):
    message = await get_latest_unread(provider)
    if message is None:
        return Response(status_code=404)
    return message


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
