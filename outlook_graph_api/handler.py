"""Latest unread message lookup."""
from __future__ import annotations

import logging
from typing import Optional

from outlook_graph_api.constants import (
    LATEST_FIRST_ORDERBY, LATEST_UNREAD_SELECT, LATEST_UNREAD_TOP, UNREAD_FILTER,
)
from outlook_graph_api.graph_client import MailProvider, MessageQuery
from outlook_graph_api.models import LatestUnreadMessage, Message

logger = logging.getLogger(__name__)


def build_latest_unread_query() -> MessageQuery:
    return MessageQuery(
        filter=UNREAD_FILTER,
        top=LATEST_UNREAD_TOP,
        orderby=[LATEST_FIRST_ORDERBY],
        select=list(LATEST_UNREAD_SELECT),
    )


def _sender_address(message: Message) -> Optional[str]:
    sender = message.from_
    if sender is None or sender.emailAddress is None:
        return None
    return sender.emailAddress.address


def to_latest_unread(message: Message) -> LatestUnreadMessage:
    """Map a Graph message to the response payload; fields are copied verbatim."""
    return {
        "subject": message.subject,
        "from": _sender_address(message),
        "receivedDateTime": message.receivedDateTime,
        "bodyPreview": message.bodyPreview,
    }


async def get_latest_unread(provider: MailProvider) -> Optional[LatestUnreadMessage]:
    """
    Fetch the newest unread message for the mailbox user.

    Returns None when there is no unread message. Provider errors are not
    caught here.
    """
    messages = await provider.list_messages(build_latest_unread_query())
    items = messages.value if messages is not None else None
    if not items:
        logger.debug("No unread message found")
        return None
    return to_latest_unread(items[0])
