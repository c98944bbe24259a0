"""Application constants."""

# Microsoft Graph
GRAPH_BASE = "https://graph.microsoft.com/v1.0"
GRAPH_DEFAULT_SCOPE = "https://graph.microsoft.com/.default"
LOGIN_AUTHORITY = "https://login.microsoftonline.com"
DEFAULT_TIMEOUT_SECONDS = 30

# Latest unread query
UNREAD_FILTER = "isRead eq false"
LATEST_FIRST_ORDERBY = "receivedDateTime desc"
LATEST_UNREAD_TOP = 1
LATEST_UNREAD_SELECT = ["subject", "from", "receivedDateTime", "bodyPreview"]

# OAuth
TOKEN_EXPIRY_BUFFER_SECONDS = 60  # Refresh tokens 60s before expiry
DEFAULT_TOKEN_EXPIRES_IN = 3600

# Error messages
ERROR_MISSING_CREDENTIALS = "Azure AD credentials are not configured."
ERROR_NO_ACCESS_TOKEN = "No access_token for Graph API"
