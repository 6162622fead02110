"""
Notion OAuth 2.0 authorization-code flow.
"""

import base64
from typing import Optional
from urllib.parse import urlencode

import requests

from app.db.token_store import TokenStore
from app.models.schemas import NotionTokenRecord
from app.utils.error_handling import (
    MissingClientCredentialsError,
    MissingCodeError,
    NotionNotConfiguredError,
    OAuthExchangeError,
)
from app.utils.logger import logging

NOTION_AUTHORIZE_URL = "https://api.notion.com/v1/oauth/authorize"
NOTION_TOKEN_URL = "https://api.notion.com/v1/oauth/token"
DEFAULT_REDIRECT_URI = "http://localhost:3000/auth/notion/callback"


class NotionOAuthBroker:
    """Builds authorization URLs and exchanges codes for access tokens."""

    def __init__(self, config, store: TokenStore, session: Optional[requests.Session] = None):
        """
        Initialize the broker.

        Args:
            config: Application config providing NOTION_* settings and FRONTEND_URL
            store: Token store receiving exchanged credentials
            session: HTTP session used for the token exchange
        """
        self.client_id = config.NOTION_CLIENT_ID
        self.client_secret = config.NOTION_CLIENT_SECRET
        self.redirect_uri = config.NOTION_REDIRECT_URI
        self.frontend_url = config.FRONTEND_URL
        self.store = store
        self.session = session or requests.Session()

    def build_authorization_url(self) -> str:
        if not self.client_id or not self.redirect_uri:
            raise NotionNotConfiguredError()

        query = urlencode({
            "client_id": self.client_id,
            "response_type": "code",
            "owner": "user",
            "redirect_uri": self.redirect_uri,
        })
        logging.info(f"Generated Notion OAuth URL for client: {self.client_id}")
        return f"{NOTION_AUTHORIZE_URL}?{query}"

    def _basic_credentials(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def exchange_code(self, code: Optional[str]) -> NotionTokenRecord:
        """
        Exchange an authorization code for a token and store it by bot ID.

        Args:
            code: Authorization code from Notion's redirect

        Returns:
            The stored NotionTokenRecord

        Raises:
            MissingCodeError: if no code was supplied
            MissingClientCredentialsError: if client ID or secret is not configured
            OAuthExchangeError: if Notion rejects the exchange or the call fails
        """
        if not code:
            raise MissingCodeError()
        if not self.client_id or not self.client_secret:
            raise MissingClientCredentialsError()

        try:
            response = self.session.post(
                NOTION_TOKEN_URL,
                json={
                    "grant_type": "authorization_code",
                    "code": code,
                    "redirect_uri": self.redirect_uri or DEFAULT_REDIRECT_URI,
                },
                headers={
                    "Authorization": f"Basic {self._basic_credentials()}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
            response.raise_for_status()
            data = response.json()
            record = NotionTokenRecord(
                access_token=data["access_token"],
                refresh_token=data.get("refresh_token"),
                bot_id=data["bot_id"],
                workspace_id=data.get("workspace_id"),
                workspace_name=data.get("workspace_name"),
            )
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise OAuthExchangeError(upstream_status=status, details=str(e)) from e
        except (requests.RequestException, KeyError, TypeError, ValueError) as e:
            raise OAuthExchangeError(details=str(e)) from e

        self.store.put(record)
        logging.info(
            f"Notion OAuth completed for bot: {record.bot_id}, workspace: {record.workspace_name}"
        )
        return record

    def dashboard_url(self, **params) -> str:
        return f"{self.frontend_url}/dashboard?{urlencode(params)}"

    def callback_redirect(self, code: Optional[str]) -> str:
        """
        Run the exchange and return the frontend URL to redirect the browser to.

        Upstream failures are reported through the redirect target only.
        Missing code or credentials still raise.
        """
        try:
            record = self.exchange_code(code)
        except OAuthExchangeError as e:
            logging.error(f"Error processing Notion OAuth callback: {e.details}")
            if e.upstream_status == 400:
                return self.dashboard_url(error="invalid_code")
            return self.dashboard_url(error="oauth_failed")

        return self.dashboard_url(connected="true", bot_id=record.bot_id)
