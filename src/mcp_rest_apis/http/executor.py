"""Outbound HTTP calls for the ``request`` tool."""

from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel

from ..audit import AuditLog
from ..exceptions import RequestError
from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpOutcome(BaseModel):
    """Normalized result of a successful HTTP call.

    Attributes:
        status: HTTP status code.
        data: Response body as text.
        headers: Response headers.
    """

    status: int
    data: str
    headers: Dict[str, str]


class HttpExecutor:
    """
    Issues one HTTP request per call and normalizes the outcome.

    Any 2xx status counts as success. Every other status, and every
    network-level failure, raises ``RequestError``. Each call writes a
    ``request`` and a ``response`` entry to the audit log when one is given.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        audit: Optional[AuditLog] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            timeout: Timeout in seconds for each request.
            audit: Optional audit log receiving request and response entries.
            transport: Optional httpx transport, mainly for tests.
        """
        self.timeout = timeout
        self.audit = audit
        self._transport = transport

    async def execute(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        payload: Optional[str] = None,
        body: Any = None,
    ) -> HttpOutcome:
        """Send the request and return the normalized outcome.

        Args:
            url: Target URL.
            method: HTTP method.
            headers: Request headers, passed through unchanged.
            payload: Pre-serialized request body. Ignored for GET and DELETE.
            body: The caller's original body, only recorded in the audit log.

        Returns:
            The status, body text and headers of the response.

        Raises:
            RequestError: If the request fails or the status is not 2xx.
        """
        method = method.upper()
        request_headers = dict(headers)
        content: Optional[str] = None

        if payload is not None and method in ("POST", "PUT"):
            content = payload
            if not any(k.lower() == "content-type" for k in request_headers):
                request_headers["Content-Type"] = "application/json"

        self._audit("request", {"type": method, "url": url, "headers": dict(headers), "body": body})
        logger.info("%s %s", method, url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = await client.request(method, url, headers=request_headers, content=content)
        # InvalidURL is not an HTTPError; non-ASCII header values raise UnicodeEncodeError (a ValueError)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            msg = f"Request to {url} failed: {str(e) or type(e).__name__}"
            logger.error(msg)
            self._audit("response", {"error": msg, "status": None})
            raise RequestError(msg) from e

        if not response.is_success:
            msg = f"HTTP error! status: {response.status_code}"
            logger.warning("%s %s returned %d", method, url, response.status_code)
            self._audit("response", {"error": msg, "status": response.status_code, "data": response.text})
            raise RequestError(msg, status=response.status_code)

        outcome = HttpOutcome(status=response.status_code, data=response.text, headers=dict(response.headers))
        self._audit("response", outcome.model_dump())
        logger.debug("%s %s returned %d (%d bytes)", method, url, outcome.status, len(response.content))
        return outcome

    def _audit(self, tag: str, payload: Any) -> None:
        if self.audit is not None:
            self.audit.append(tag, payload)
