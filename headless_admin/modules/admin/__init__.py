"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Models for the admin module endpoints.
"""

from headless_admin.modules.admin.api_admin_user import ApiAdminUser
from headless_admin.modules.admin.api_storage_file import ApiStorageFile
from headless_admin.modules.admin.api_storage_image import ApiStorageImage

__all__ = ["ApiAdminUser", "ApiStorageFile", "ApiStorageImage"]
