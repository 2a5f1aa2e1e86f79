"""
Inline image extraction.

Turns an image node into an ``<img>`` reference and records the raw payload
under a deterministic, collision-free filename for delivery next to the HTML.
"""
from __future__ import annotations

from typing import Dict, List

from richdoc_renderer.model.document_model import ImageRecord
from richdoc_renderer.model.elements import InlineImageNode
from richdoc_renderer.model.errors import UnsupportedAssetType
from richdoc_renderer.utils.config import DEFAULT_ASSET_BASE_URL
from richdoc_renderer.utils.filenames import clean_filename
from richdoc_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

IMAGE_EXTENSIONS: Dict[str, str] = {
    "image/png": ".png",
    "image/gif": ".gif",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
}


class ImageExtractor:
    """Extracts images of one document; the image list is passed per call."""

    def __init__(self, document_name: str, asset_base_url: str = DEFAULT_ASSET_BASE_URL) -> None:
        self.document_name = document_name
        self.asset_base_url = asset_base_url

    def extract(self, node: InlineImageNode, images: List[ImageRecord]) -> str:
        """Append the image to ``images`` and return its ``<img>`` tag."""
        extension = self._get_extension(node.content_type)

        alt = node.alt_title or ""
        # Index is the number of images already extracted in this conversion
        file_name = f"{clean_filename(alt or self.document_name)}-{len(images)}{extension}"

        images.append(ImageRecord(filename=file_name, mime_type=node.content_type, data=node.data))
        LOGGER.debug("Extracted image %s (%d bytes)", file_name, len(node.data))
        return f'<img src="{self.asset_base_url}{file_name}" alt="{alt}" />'

    def _get_extension(self, content_type: str) -> str:
        extension = IMAGE_EXTENSIONS.get(content_type.strip().lower())
        if extension is None:
            raise UnsupportedAssetType(content_type)
        return extension
