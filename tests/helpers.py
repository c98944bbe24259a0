"""Builders for Graph wire records used across the test suite."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from outlook_graph_api.models import MessageCollectionResponse


def graph_message(
    subject: Optional[str] = "Test Email",
    sender: Optional[str] = "sender@example.com",
    received: Optional[str] = "2024-05-01T09:30:00Z",
    preview: Optional[str] = "preview text",
) -> Dict[str, Any]:
    msg: Dict[str, Any] = {
        "id": "AAMkAGI2",
        "subject": subject,
        "receivedDateTime": received,
        "bodyPreview": preview,
        "isRead": False,
    }
    if sender is not None:
        msg["from"] = {"emailAddress": {"name": "Sender", "address": sender}}
    return msg


def collection(messages: Optional[List[Dict[str, Any]]]) -> MessageCollectionResponse:
    return MessageCollectionResponse.model_validate({"value": messages})
