"""Outlook Graph API: latest unread mail over Microsoft Graph."""

__version__ = "0.1.0"
