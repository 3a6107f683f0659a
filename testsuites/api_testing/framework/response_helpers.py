"""
================================================================================
Response Helpers
================================================================================

Small utilities for inspecting raw httpx responses in tests:

    - is_json: content-type check before deserializing
    - as_model: deserialize a JSON body into a pydantic model
    - pretty_print: indented body for console output

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel


ModelT = TypeVar("ModelT", bound=BaseModel)


class ResponseFormatError(Exception):
    """Raised when a response body cannot be read as the requested model."""
    pass


def is_json(response: httpx.Response) -> bool:
    """
    Return True when the response declares a JSON media type.

    Matches application/json, application/problem+json and similar
    structured-syntax suffixes, ignoring parameters such as charset.
    """
    content_type = response.headers.get("Content-Type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def as_model(response: httpx.Response, model_cls: Type[ModelT]) -> ModelT:
    """
    Deserialize a JSON response into `model_cls`.

    Raises:
        ResponseFormatError: When the response is not JSON
    """
    if not is_json(response):
        raise ResponseFormatError(
            f"Expected JSON response, got Content-Type "
            f"'{response.headers.get('Content-Type', '')}' "
            f"(status {response.status_code})"
        )

    try:
        data = response.json()
    except ValueError as e:
        raise ResponseFormatError(f"Malformed JSON body: {e}") from e

    return model_cls.model_validate(data)


def pretty_print(response: httpx.Response) -> str:
    """
    Print and return the response body in a readable form.

    JSON bodies are indented; other bodies are returned as text.
    """
    try:
        body = json.dumps(response.json(), ensure_ascii=False, indent=2)
    except ValueError:
        body = response.text

    logger.debug(f"Response {response.status_code} body length: {len(body)}")
    print(body)
    return body


__all__ = [
    "ResponseFormatError",
    "as_model",
    "is_json",
    "pretty_print",
]
