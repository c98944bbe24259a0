"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from outlook_graph_api.constants import (
    DEFAULT_TIMEOUT_SECONDS, ERROR_MISSING_CREDENTIALS,
    GRAPH_BASE, GRAPH_DEFAULT_SCOPE, LOGIN_AUTHORITY,
)

# Load env from the working directory and the package directory
load_dotenv()
load_dotenv(Path(__file__).with_name(".env"))


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing."""


@dataclass
class AzureCredentials:
    tenant_id: str
    client_id: str
    client_secret: str


def get_azure_credentials() -> AzureCredentials:
    """Read the app registration identity; all three values are required."""
    tenant_id = os.environ.get("AZURE_TENANT_ID", "").strip()
    client_id = os.environ.get("AZURE_CLIENT_ID", "").strip()
    client_secret = os.environ.get("AZURE_CLIENT_SECRET", "").strip()
    if not tenant_id or not client_id or not client_secret:
        raise ConfigurationError(ERROR_MISSING_CREDENTIALS)
    return AzureCredentials(tenant_id=tenant_id, client_id=client_id, client_secret=client_secret)


def get_graph_base_url() -> str:
    """Get Graph API root URL."""
    return os.environ.get("GRAPH_BASE_URL", GRAPH_BASE).rstrip("/")


def get_graph_scope() -> str:
    """Get Graph API scope for the client credentials grant."""
    return os.environ.get("GRAPH_SCOPE", GRAPH_DEFAULT_SCOPE)


def get_authority() -> str:
    """Get identity platform authority."""
    return os.environ.get("GRAPH_AUTHORITY", LOGIN_AUTHORITY).rstrip("/")


def get_mailbox_user() -> Optional[str]:
    """Get the mailbox user id/UPN; None means the signed-in user (/me)."""
    return os.environ.get("GRAPH_MAILBOX_USER", "").strip() or None


def get_timeout_seconds() -> float:
    """Get outbound HTTP timeout."""
    raw = os.environ.get("GRAPH_TIMEOUT_SECONDS", "")
    try:
        return float(raw) if raw else float(DEFAULT_TIMEOUT_SECONDS)
    except ValueError:
        raise ConfigurationError(f"GRAPH_TIMEOUT_SECONDS must be a number, got {raw!r}") from None


def get_ui_origins() -> List[str]:
    """Get allowed UI origins from environment variable."""
    origin_str = os.environ.get("UI_ORIGIN", "http://localhost:3000")
    # Support comma-separated origins
    origins = [o.strip() for o in origin_str.split(",") if o.strip()]
    return origins if origins else ["http://localhost:3000"]


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
