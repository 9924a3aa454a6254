"""Google OAuth helper shared by the YouTube and Sheets integrations.

- Stores credentials in ``UploaderConfig.tokens_file``
- Desktop OAuth (InstalledAppFlow.run_local_server) on first use
- Refreshes & persists tokens automatically.

In code:
    from sheet_uploader.integrations.google.auth import authorize
    client = authorize(config)
    yt = client.youtube()
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import google_auth_httplib2
import httplib2
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from ...config import SCOPES, UploaderConfig
from ...exceptions import FatalSetupError

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"


def client_config(config: UploaderConfig) -> Dict[str, Any]:
    """Return the installed-app client config built from ``config``."""

    return {
        "installed": {
            "client_id": config.client_id,
            "client_secret": config.client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": ["http://localhost"],
        }
    }


# --- Token helpers ------------------------------------------------------------

def _load_token_json(tokens_file: Path) -> Optional[Dict[str, Any]]:
    if tokens_file.exists():
        try:
            return json.loads(tokens_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable token file %s: %s", tokens_file, exc)
            return None
    return None


def _save_token_json(tokens_file: Path, creds: Credentials) -> None:
    tokens_file.parent.mkdir(parents=True, exist_ok=True)
    tokens_file.write_text(creds.to_json(), encoding="utf-8")


# --- Credential helpers -------------------------------------------------------

def load_creds(tokens_file: Path) -> Optional[Credentials]:
    """Load credentials from disk without refreshing them."""
    tok = _load_token_json(tokens_file)
    if not tok:
        return None
    try:
        return Credentials.from_authorized_user_info(tok, SCOPES)
    except ValueError as exc:
        logger.warning("Stored token in %s is invalid: %s", tokens_file, exc)
        return None


def ensure_creds(config: UploaderConfig) -> Credentials:
    """Return valid credentials, saved to ``config.tokens_file``.

    Opens a browser on first-time auth; then refreshes silently next runs.
    Any failure is reported as :class:`FatalSetupError`.
    """
    creds = load_creds(config.tokens_file)
    if creds:
        if creds.expired and creds.refresh_token:
            try:
                creds.refresh(Request())
                _save_token_json(config.tokens_file, creds)
            except GoogleAuthError as exc:
                logger.warning("Token refresh failed, re-authorizing: %s", exc)
        if creds.valid:
            return creds

    try:
        flow = InstalledAppFlow.from_client_config(client_config(config), SCOPES)
        creds = flow.run_local_server(port=0)
    except Exception as exc:
        raise FatalSetupError(f"Google authorization failed: {exc}") from exc
    _save_token_json(config.tokens_file, creds)
    return creds


class GoogleClient:
    """Authenticated handle shared by every worker.

    The credentials are shared read-only. API resources are built lazily per
    thread because ``httplib2`` connections are not thread safe.
    """

    def __init__(self, credentials: Credentials, *, timeout: float | None = None) -> None:
        self.credentials = credentials
        self.timeout = timeout
        self._local = threading.local()

    def _http(self) -> google_auth_httplib2.AuthorizedHttp:
        return google_auth_httplib2.AuthorizedHttp(
            self.credentials, http=httplib2.Http(timeout=self.timeout)
        )

    def _resource(self, name: str, version: str):
        cache = getattr(self._local, "resources", None)
        if cache is None:
            cache = self._local.resources = {}
        key = (name, version)
        if key not in cache:
            cache[key] = build(name, version, http=self._http(), cache_discovery=False)
        return cache[key]

    def youtube(self):
        """Return this thread's YouTube Data API v3 resource."""
        return self._resource("youtube", "v3")

    def sheets(self):
        """Return this thread's Sheets API v4 resource."""
        return self._resource("sheets", "v4")


def authorize(config: UploaderConfig) -> GoogleClient:
    """Run the one-time authorization and return the shared client."""

    creds = ensure_creds(config)
    return GoogleClient(creds, timeout=config.request_timeout)


__all__ = ["GoogleClient", "authorize", "client_config", "ensure_creds", "load_creds"]
