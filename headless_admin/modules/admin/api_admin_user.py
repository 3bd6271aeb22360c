"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Admin user model.
"""

from dataclasses import dataclass
from typing import Optional

from headless_admin.endpoint.endpoint import ActiveEndpoint


@dataclass
class ApiAdminUser(ActiveEndpoint):
    """An administration user."""

    endpoint_name = "{{%api-admin-user}}"

    id: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    title: Optional[int] = None
    email: Optional[str] = None
    is_deleted: Optional[bool] = None
    is_api_user: Optional[bool] = None
    api_last_activity: Optional[int] = None
    login_attempt: Optional[int] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.firstname, self.lastname) if part)
