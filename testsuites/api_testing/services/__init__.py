"""
================================================================================
API Services
================================================================================

Service wrappers: one class per API area, one method per endpoint.

Author: Automation Team
License: MIT
================================================================================
"""

from .auth_service import AuthService

__all__ = [
    "AuthService",
]
