import logging
from typing import Dict, Optional

import httpx
from pydantic import Field, SecretStr

from . import metrics
from .errors import describe_http_error
from .schemas import CamelModel, CredentialTestResult

logger = logging.getLogger(__name__)

CREDENTIAL_NAME = "bullSchedulerApi"
DEFAULT_SERVER_URL = "https://your-bullscheduler-server.com"
VERIFY_PATH = "/verify-auth"

CREDENTIAL_DESCRIPTOR = {
    "name": CREDENTIAL_NAME,
    "displayName": "BullScheduler API",
    "documentationUrl": "https://github.com/BrOrlandi/BullScheduler",
    "properties": [
        {
            "displayName": "Server URL",
            "name": "url",
            "type": "string",
            "default": DEFAULT_SERVER_URL,
            "required": True,
        },
        {
            "displayName": "API Key",
            "name": "apiKey",
            "type": "string",
            "typeOptions": {"password": True},
            "default": "",
            "required": True,
        },
    ],
    "authenticate": {
        "type": "generic",
        "properties": {"headers": {"Authorization": "=Bearer {{$credentials.apiKey}}"}},
    },
    "test": {
        "request": {
            "baseURL": "={{$credentials.url}}",
            "url": VERIFY_PATH,
            "method": "GET",
        },
    },
}


class BullSchedulerCredentials(CamelModel):
    url: str = Field(default=DEFAULT_SERVER_URL, min_length=1)
    api_key: SecretStr

    def endpoint(self, path: str) -> str:
        return f"{self.url.rstrip('/')}{path}"

    def authenticate(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Return a copy of `headers` carrying the bearer Authorization header."""
        authenticated = dict(headers or {})
        authenticated["Authorization"] = f"Bearer {self.api_key.get_secret_value()}"
        return authenticated


async def verify_credentials(client: httpx.AsyncClient, credentials: BullSchedulerCredentials) -> CredentialTestResult:
    """Single authenticated GET to /verify-auth. No retries, nothing cached."""
    try:
        response = await client.get(credentials.endpoint(VERIFY_PATH), headers=credentials.authenticate())
        response.raise_for_status()
    except httpx.HTTPError as exc:
        message = describe_http_error(exc)
        logger.warning("credential test against %s failed: %s", credentials.url, message)
        metrics.credential_tests_total.labels(result="error").inc()
        return CredentialTestResult(status="Error", message=message)
    metrics.credential_tests_total.labels(result="ok").inc()
    return CredentialTestResult(status="OK", message="Connection successful")
