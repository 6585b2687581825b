"""
Google API Clients

Service-account credentials shared by the Sheets tabular store and the
Drive blob store.

The credentials object is the process-wide handle. Discovery service objects
are built per call: their httplib2 transport is not thread-safe and every
call runs in a worker thread.
"""

import json
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]


def load_credentials(credentials_json: str | None) -> service_account.Credentials:
    """
    Build service-account credentials from a JSON document.

    Args:
        credentials_json: The service-account key file contents

    Returns:
        Scoped service-account credentials

    Raises:
        ValueError: If no credentials are configured
    """
    if not credentials_json:
        raise ValueError("GOOGLE_CREDENTIALS is not set")

    info = json.loads(credentials_json)
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def build_sheets(credentials: service_account.Credentials) -> Any:
    """Build a Sheets v4 service."""
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def build_drive(credentials: service_account.Credentials) -> Any:
    """Build a Drive v3 service."""
    return build("drive", "v3", credentials=credentials, cache_discovery=False)
