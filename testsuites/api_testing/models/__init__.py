"""
================================================================================
API Models
================================================================================

Request payloads and response bodies for the authentication API.

Author: Automation Team
License: MIT
================================================================================
"""

from .request import (
    ForgotPasswordRequest,
    LoginRequest,
    RequestModel,
    ResetPasswordRequest,
    SignUpRequest,
)
from .response import LoginResponse

__all__ = [
    "RequestModel",
    "LoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "SignUpRequest",
    "LoginResponse",
]
