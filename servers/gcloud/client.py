"""Google Cloud REST client.

Each product lives on its own googleapis.com host, so requests use absolute
URLs against one shared ``httpx.AsyncClient``. Access tokens come from a
google-auth credentials object and are refreshed off the event loop.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from shared.errors import PlatformError
from shared.http_client import PlatformClient

logger = structlog.get_logger()

PLATFORM = "Google Cloud"
SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]

RESOURCE_MANAGER = "https://cloudresourcemanager.googleapis.com/v1"
STORAGE = "https://storage.googleapis.com/storage/v1"
COMPUTE = "https://compute.googleapis.com/compute/v1"
RUN = "https://run.googleapis.com/v2"
LOGGING = "https://logging.googleapis.com/v2"
SERVICE_USAGE = "https://serviceusage.googleapis.com/v1"


def load_credentials(path: str):
    """Load service-account credentials from a JSON key file."""
    return service_account.Credentials.from_service_account_file(path, scopes=SCOPES)


class GoogleCredentialsAuth(httpx.Auth):
    """httpx auth flow that attaches a fresh OAuth2 access token."""

    def __init__(self, credentials):
        self.credentials = credentials
        self._lock = asyncio.Lock()

    async def async_auth_flow(self, request: httpx.Request):
        async with self._lock:
            if not self.credentials.valid:
                try:
                    await asyncio.to_thread(self.credentials.refresh, GoogleAuthRequest())
                except GoogleAuthError as e:
                    raise PlatformError(PLATFORM, f"credential refresh failed: {e}") from e
                logger.debug("gcloud_token_refreshed")
        request.headers["Authorization"] = f"Bearer {self.credentials.token}"
        yield request


class GCloudClient:
    """Google Cloud client scoped to one project."""

    def __init__(self, project_id: str, credentials, transport: httpx.AsyncBaseTransport | None = None):
        self.project_id = project_id
        self.http = PlatformClient(
            PLATFORM,
            "https://googleapis.com",
            headers={"Accept": "application/json"},
            auth=GoogleCredentialsAuth(credentials),
            transport=transport,
        )

    async def get(self, url: str, **params) -> Any:
        return await self.http.get(url, params=params)

    async def post(self, url: str, payload: dict) -> Any:
        return await self.http.post(url, payload)

    async def aclose(self) -> None:
        await self.http.aclose()
