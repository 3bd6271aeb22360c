"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Response record mapping.
"""

from headless_admin.models.base import BaseModel, related

__all__ = ["BaseModel", "related"]
