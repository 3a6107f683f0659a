"""
================================================================================
Request Models
================================================================================

Payloads sent to the authentication endpoints.

Python attribute names are snake_case; the JSON wire names are camelCase
aliases. Serialize with `to_payload()`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestModel(BaseModel):
    """Base class for request payloads."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready body using wire (alias) names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class LoginRequest(RequestModel):
    """POST /api/auth/login"""

    username: str
    password: str


class ForgotPasswordRequest(RequestModel):
    """POST /api/auth/forgot-password"""

    email: str


class ResetPasswordRequest(RequestModel):
    """Reset password payload sent with the token from the reset email."""

    token: str
    new_password: str = Field(alias="newPassword")
    confirm_password: str = Field(alias="confirmPassword")


class SignUpRequest(RequestModel):
    """POST /api/auth/signup"""

    username: str
    email: str
    password: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    mobile_number: Optional[str] = Field(default=None, alias="mobileNumber")


__all__ = [
    "RequestModel",
    "LoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "SignUpRequest",
]
