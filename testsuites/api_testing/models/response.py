"""
================================================================================
Response Models
================================================================================

Deserialization targets for authentication responses.

Fields are optional and unknown fields are ignored: the service contract
is not enforced here.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class LoginResponse(BaseModel):
    """Body returned by a successful login."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    token: Optional[str] = None
    type: Optional[str] = None
    id: Optional[Union[int, str]] = None
    email: Optional[str] = None
    username: Optional[str] = None
    roles: Optional[List[str]] = None

    def __str__(self) -> str:
        return (
            f"LoginResponse(token={self.token!r}, type={self.type!r}, "
            f"id={self.id!r}, email={self.email!r}, "
            f"username={self.username!r}, roles={self.roles!r})"
        )


__all__ = [
    "LoginResponse",
]
