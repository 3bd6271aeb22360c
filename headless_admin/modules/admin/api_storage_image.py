"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Storage image model.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from headless_admin.endpoint.endpoint import ActiveEndpoint
from headless_admin.logging_config import get_logger

if TYPE_CHECKING:
    from headless_admin.client import Client

logger = get_logger(__name__)


@dataclass
class ApiStorageImage(ActiveEndpoint):
    """An image version of a storage file with a filter applied."""

    endpoint_name = "{{%api-admin-storage}}"

    id: Optional[int] = None
    file_id: Optional[int] = None
    filter_id: Optional[int] = None
    resolution_width: Optional[int] = None
    resolution_height: Optional[int] = None
    source: Optional[str] = None
    file: Optional[Any] = None

    @classmethod
    def view(cls, id):
        return (
            cls.find()
            .set_endpoint("{endpointName}/image")
            .set_default_expand(["source"])
            .set_args({"id": id})
        )

    @classmethod
    def create_image(
        cls, client: "Client", file_id: int, filter_id: int
    ) -> Optional["ApiStorageImage"]:
        """
        Create (or fetch) the image of a file for a given filter.

        Returns:
            The image, or None if the API refused to create it
        """
        response = (
            cls.post()
            .set_endpoint("{endpointName}/image-filter")
            .set_args({"fileId": file_id, "filterId": filter_id})
            .response(client)
        )
        if response.is_error:
            logger.warning(
                f"Unable to create image for file {file_id} with filter {filter_id}: "
                f"status {response.status_code}"
            )
            return None
        content = response.content or {}
        return cls.from_dict(content.get("image", content))
