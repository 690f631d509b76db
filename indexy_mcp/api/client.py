"""
Indexy API Gateway Client

Sends authenticated requests to the Indexy Agent API and hands back the
parsed JSON. Remote errors are not interpreted: the status and raw body
text travel up in IndexyAPIError for the agent to read.
"""

import json
import sys
from typing import Any, Optional

import httpx

from ..config import DEFAULT_HTTP_TIMEOUT, Config
from ..errors import IndexyAPIError, IndexyRequestError, IndexyResponseError
from .payments import payment_hooks


class IndexyClient:
    """Async HTTP client for the Indexy API"""

    BODY_METHODS = ("POST", "PATCH", "PUT")

    def __init__(
        self,
        base_url: str,
        auth,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        event_hooks: Optional[dict] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: API root, e.g. https://indexy.co
            auth: ApiKeyAuth or WalletAuth, asked for headers on every call
            timeout: Seconds before httpx gives up on a request
            event_hooks: httpx event hooks (x402 payments)
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url
        self.auth = auth
        self.http = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            event_hooks=event_hooks,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: Config, auth) -> "IndexyClient":
        return cls(
            config.API_URL,
            auth,
            timeout=config.HTTP_TIMEOUT,
            event_hooks=payment_hooks(config, auth),
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self.http.aclose()

    async def request(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        """
        Make an authenticated API request.

        Args:
            endpoint: Path (and query string) appended to the base URL
            method: GET, POST, PATCH or PUT
            body: JSON body, only sent for POST/PATCH/PUT

        Returns:
            Parsed JSON response, {} when the body is empty
        """
        url = f"{self.base_url}{endpoint}"
        method = method.upper()

        headers = {
            "Content-Type": "application/json",
            # Signed fresh each time in wallet modes
            **self.auth.headers(),
        }

        content = None
        if body is not None and method in self.BODY_METHODS:
            content = json.dumps(body)

        print(f"📡 [{self.auth.mode.value}] {method} {url}", file=sys.stderr)

        try:
            response = await self.http.request(method, url, headers=headers, content=content)
        except httpx.TransportError as e:
            raise IndexyRequestError(
                f"{method} {url} failed: {type(e).__name__}: {e}"
            ) from e

        text = response.text
        if not response.is_success:
            raise IndexyAPIError(response.status_code, text)

        if not text:
            return {}
        try:
            return json.loads(text)
        except ValueError as e:
            raise IndexyResponseError(
                f"Invalid JSON in response ({response.status_code}): {text[:200]}"
            ) from e
