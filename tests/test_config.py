import pytest

from outlook_graph_api import config
from outlook_graph_api.config import ConfigurationError
from outlook_graph_api.main import build_graph_client

IDENTITY_VARS = ("AZURE_TENANT_ID", "AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET")


@pytest.fixture
def identity(monkeypatch):
    monkeypatch.setenv("AZURE_TENANT_ID", "tenant")
    monkeypatch.setenv("AZURE_CLIENT_ID", "client")
    monkeypatch.setenv("AZURE_CLIENT_SECRET", "secret")
    for name in ("GRAPH_BASE_URL", "GRAPH_AUTHORITY", "GRAPH_MAILBOX_USER", "GRAPH_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_azure_credentials(identity):
    creds = config.get_azure_credentials()

    assert (creds.tenant_id, creds.client_id, creds.client_secret) == ("tenant", "client", "secret")


@pytest.mark.parametrize("missing", IDENTITY_VARS)
def test_missing_identity_is_fatal(identity, missing):
    identity.delenv(missing)

    with pytest.raises(ConfigurationError, match="not configured"):
        build_graph_client()


@pytest.mark.parametrize("missing", IDENTITY_VARS)
def test_blank_identity_is_fatal(identity, missing):
    identity.setenv(missing, "   ")

    with pytest.raises(ConfigurationError):
        config.get_azure_credentials()


def test_build_graph_client_defaults(identity):
    client = build_graph_client()

    assert client.messages_url == "https://graph.microsoft.com/v1.0/me/messages"
    assert client.timeout == 30.0
    assert client.credential.token_url == "https://login.microsoftonline.com/tenant/oauth2/v2.0/token"


def test_timeout_must_be_numeric(identity):
    identity.setenv("GRAPH_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ConfigurationError) as excinfo:
        config.get_timeout_seconds()

    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__


def test_ui_origins_split(monkeypatch):
    monkeypatch.setenv("UI_ORIGIN", "http://a.test, http://b.test,")

    assert config.get_ui_origins() == ["http://a.test", "http://b.test"]
