"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Storage file model.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from headless_admin.endpoint.endpoint import ActiveEndpoint
from headless_admin.exceptions import UnsupportedOperationError
from headless_admin.models.base import related
from headless_admin.modules.admin.api_admin_user import ApiAdminUser
from headless_admin.modules.admin.api_storage_image import ApiStorageImage

if TYPE_CHECKING:
    from headless_admin.client import Client

IMAGE_MIME_TYPES = ("image/gif", "image/jpeg", "image/png", "image/jpg")


@dataclass
class ApiStorageFile(ActiveEndpoint):
    """
    A file in the admin storage.

    The storage API has no list action, so ``find()`` is unsupported; load
    single files with ``view(id)``.
    """

    endpoint_name = "{{%api-admin-storage}}"

    id: Optional[int] = None
    is_hidden: Optional[bool] = None
    folder_id: Optional[int] = None
    name_original: Optional[str] = None
    name_new: Optional[str] = None
    name_new_compound: Optional[str] = None
    mime_type: Optional[str] = None
    extension: Optional[str] = None
    hash_file: Optional[str] = None
    hash_name: Optional[str] = None
    upload_timestamp: Optional[int] = None
    file_size: Optional[int] = None
    upload_user_id: Optional[int] = None
    is_deleted: Optional[bool] = None
    passthrough_file: Optional[bool] = None
    passthrough_file_password: Optional[str] = None
    passthrough_file_stats: Optional[int] = None
    inline_disposition: Optional[bool] = None
    source: Optional[str] = None
    caption: Optional[str] = None
    captions: Dict[str, Any] = field(default_factory=dict)

    # expand
    sizeReadable: Optional[str] = None
    images: List[ApiStorageImage] = related(ApiStorageImage, many=True)
    user: Optional[ApiAdminUser] = related(ApiAdminUser)

    @classmethod
    def find(cls):
        raise UnsupportedOperationError("find() is not supported.")

    @classmethod
    def view(cls, id):
        return (
            super().find()
            .set_endpoint("{endpointName}/file")
            .set_default_expand(["source"])
            .set_args({"id": id})
        )

    @property
    def is_image(self) -> bool:
        """Whether the mime type is one of the web image types."""
        return self.mime_type in IMAGE_MIME_TYPES

    def create_image(self, client: "Client", filter_id: int) -> Optional[ApiStorageImage]:
        """Create an image version of this file; None if the API refused."""
        return ApiStorageImage.create_image(client, self.id, filter_id)
