"""
================================================================================
Base Service with Allure Integration
================================================================================

Shared HTTP layer for API service wrappers.

    - One pre-configured httpx.Client (the request specification) per service
    - JSON POST and query-parameter GET helpers
    - Allure reporting of every exchange with cURL command generation
    - Masking of sensitive headers and body fields in reports

Responses are returned as-is: no status-code checks and no retries.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import allure
import httpx
from allure_commons.types import AttachmentType
from loguru import logger

from testsuites.api_testing.models.request import RequestModel

from .config_manager import ConfigManager


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000

JSON_CONTENT_TYPE = "application/json"

SENSITIVE_HEADERS = {"authorization", "x-api-key", "x-app-auth", "cookie", "set-cookie"}
SENSITIVE_FIELDS = ["password", "secret", "token", "api_key", "authorization", "session"]
MASK = "***MASKED***"


class BaseService:
    """
    Base class for service wrappers.

    Subclasses add one method per endpoint and delegate to
    `post_request` / `get_request`.

    Usage:
        >>> with BaseService() as service:
        ...     response = service.get_request("/api/health", {"verbose": "true"})
        ...     print(response.status_code)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[ConfigManager] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Build the request specification.

        Args:
            base_url: Service root. Read from configuration when omitted.
            config: Configuration manager. Created on demand.
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        if base_url is None:
            config = config or ConfigManager()
            base_url = config.get_base_url()

        self.base_url = base_url
        self.request_spec = httpx.Client(base_url=base_url, transport=transport)

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.request_spec.close()

    def post_request(self, payload: Any, endpoint: str) -> httpx.Response:
        """
        Send a JSON POST request.

        Args:
            payload: Request model, dict or list serialized as the JSON body,
                     or str/bytes sent as-is
            endpoint: Path appended to the base URL

        Returns:
            Raw httpx.Response
        """
        body = self._serialize(payload)
        headers = {"Content-Type": JSON_CONTENT_TYPE}
        if isinstance(body, (str, bytes)):
            response = self.request_spec.post(endpoint, content=body, headers=headers)
        else:
            response = self.request_spec.post(endpoint, json=body, headers=headers)
        self._report("POST", endpoint, response, headers=headers, body=body)
        return response

    def get_request(
        self,
        endpoint: str,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a GET request with query parameters.

        Args:
            endpoint: Path appended to the base URL
            query_params: Query string parameters

        Returns:
            Raw httpx.Response
        """
        params = dict(query_params or {})
        response = self.request_spec.get(endpoint, params=params)
        self._report("GET", endpoint, response, params=params)
        return response

    @staticmethod
    def _serialize(payload: Any) -> Any:
        """Convert request models to plain JSON data."""
        if isinstance(payload, RequestModel):
            return payload.to_payload()
        return payload

    def _report(
        self,
        method: str,
        endpoint: str,
        response: httpx.Response,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the exchange and attach it to the Allure report.

        Attaches:
            - Request URL (with query string)
            - Request headers and body (masked)
            - Query parameters
            - cURL command for reproduction
            - Response status and body (truncated if too long)
        """
        full_url = str(response.request.url)
        logger.debug(f"{method} {full_url} -> {response.status_code}")

        status_mark = "OK" if response.status_code < 400 else "FAIL"
        step_title = f"[{status_mark}] {method} {endpoint} -> {response.status_code}"

        with allure.step(step_title):
            allure.attach(
                full_url,
                name="Request URL",
                attachment_type=AttachmentType.TEXT
            )

            safe_headers = self._redact_headers(headers or {})
            if safe_headers:
                allure.attach(
                    json.dumps(safe_headers, ensure_ascii=False, indent=2),
                    name="Request Headers",
                    attachment_type=AttachmentType.JSON
                )

            safe_body = self._redact_body(self._decode_body(body))
            if safe_body is not None:
                if isinstance(safe_body, str):
                    allure.attach(
                        safe_body,
                        name="Request Body",
                        attachment_type=AttachmentType.TEXT
                    )
                else:
                    allure.attach(
                        json.dumps(safe_body, ensure_ascii=False, indent=2),
                        name="Request Body",
                        attachment_type=AttachmentType.JSON
                    )

            if params:
                allure.attach(
                    json.dumps(params, ensure_ascii=False, indent=2, default=str),
                    name="Query Params",
                    attachment_type=AttachmentType.JSON
                )

            allure.attach(
                self._build_curl(method, full_url, safe_headers, safe_body),
                name="cURL Command",
                attachment_type=AttachmentType.TEXT
            )

            allure.attach(
                str(response.status_code),
                name="Response Status",
                attachment_type=AttachmentType.TEXT
            )

            try:
                response_content = json.dumps(
                    response.json(), ensure_ascii=False, indent=2
                )
                attachment_type = AttachmentType.JSON
            except ValueError:
                response_content = response.text or "<empty>"
                attachment_type = AttachmentType.TEXT

            if len(response_content) > MAX_RESPONSE_LENGTH:
                response_content = (
                    f"{response_content[:MAX_RESPONSE_LENGTH]}\n\n"
                    f"... [Truncated, full length: {len(response_content)} chars] ..."
                )
                attachment_type = AttachmentType.TEXT

            allure.attach(
                response_content,
                name="Response Body",
                attachment_type=attachment_type
            )

    @staticmethod
    def _decode_body(body: Any) -> Any:
        """Parse raw str/bytes bodies as JSON so they can be masked; keep text otherwise."""
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        if isinstance(body, str):
            try:
                return json.loads(body)
            except ValueError:
                return body
        return body

    def _redact_headers(self, headers: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Mask sensitive header values before logging.
        """
        masked = {}
        for key, value in headers.items():
            if key.lower() in SENSITIVE_HEADERS:
                masked[key] = MASK
            else:
                masked[key] = value
        return masked

    def _redact_body(self, payload: Any) -> Any:
        """
        Recursively mask sensitive fields in request bodies.
        """
        if isinstance(payload, dict):
            redacted = {}
            for key, value in payload.items():
                if any(token in str(key).lower() for token in SENSITIVE_FIELDS):
                    redacted[key] = MASK
                else:
                    redacted[key] = self._redact_body(value)
            return redacted
        if isinstance(payload, list):
            return [self._redact_body(item) for item in payload]
        return payload

    def _build_curl(
        self,
        method: str,
        url: str,
        headers: Dict[str, Any],
        body: Any,
    ) -> str:
        """Build a copy-paste ready cURL command (already masked input)."""
        parts = [f"curl -X {method}"]

        for key, value in headers.items():
            parts.append(f"-H '{key}: {value}'")

        if body is not None:
            body_json = body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)
            parts.append(f"-d '{body_json}'")

        parts.append(f"'{url}'")

        return " \\\n  ".join(parts)


__all__ = [
    "BaseService",
    "JSON_CONTENT_TYPE",
]
