"""
================================================================================
Auth Service
================================================================================

Endpoint catalogue for /api/auth/*.

Each method is a one-line delegation to BaseService.post_request.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any

import allure
import httpx

from testsuites.api_testing.framework.base_service import BaseService


class AuthService(BaseService):
    """Authentication endpoints."""

    BASE_PATH = "/api/auth/"

    @allure.step("POST login")
    def login(self, payload: Any) -> httpx.Response:
        return self.post_request(payload, self.BASE_PATH + "login")

    @allure.step("POST forgot-password")
    def forgot_password(self, payload: Any) -> httpx.Response:
        return self.post_request(payload, self.BASE_PATH + "forgot-password")

    @allure.step("POST signup")
    def sign_up(self, payload: Any) -> httpx.Response:
        return self.post_request(payload, self.BASE_PATH + "signup")


__all__ = [
    "AuthService",
]
