from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypedDict


class GraphModel(BaseModel):
    # Graph adds fields freely; keep only what we read
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EmailAddress(GraphModel):
    address: Optional[str] = None
    name: Optional[str] = None


class Recipient(GraphModel):
    emailAddress: Optional[EmailAddress] = None


class Message(GraphModel):
    subject: Optional[str] = None
    from_: Optional[Recipient] = Field(default=None, alias="from")
    receivedDateTime: Optional[str] = None  # ISO 8601, passed through as-is
    bodyPreview: Optional[str] = None


class MessageCollectionResponse(GraphModel):
    value: Optional[List[Message]] = None


# "from" is a keyword, hence the functional form
LatestUnreadMessage = TypedDict(
    "LatestUnreadMessage",
    {
        "subject": Optional[str],
        "from": Optional[str],
        "receivedDateTime": Optional[str],
        "bodyPreview": Optional[str],
    },
)
