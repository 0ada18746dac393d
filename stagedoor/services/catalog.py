"""
Performance categories, their variations, and variation media.
"""
import logging
import mimetypes
from pathlib import Path
from typing import List, Union

from stagedoor.schemas import Category, Media, UploadedFile, Variation
from stagedoor.services.base import ResourceService

logger = logging.getLogger("services.catalog")

UPLOAD_PATH = "/api/admin/media/upload"


class CategoryService(ResourceService[Category]):
    model = Category
    read_path = "/api/categories"
    admin_path = "/api/admin/categories"


class VariationService(ResourceService[Variation]):
    model = Variation
    read_path = "/api/variations"
    admin_path = "/api/admin/variations"

    def get_by_category_id(self, category_id: str, use_cache: bool = True) -> List[Variation]:
        return self._parse_list(
            self.client.get(f"/api/categories/{category_id}/variations", use_cache)
        )

    def get_by_slug(self, slug: str, use_cache: bool = True) -> Variation:
        return self._parse(self.client.get(f"{self.read_path}/slug/{slug}", use_cache))


class MediaService(ResourceService[Media]):
    model = Media
    read_path = "/api/media"
    admin_path = "/api/admin/media"

    def get_by_variation_id(self, variation_id: str, use_cache: bool = True) -> List[Media]:
        return self._parse_list(
            self.client.get(f"/api/variations/{variation_id}/media", use_cache)
        )

    def upload_file(self, path: Union[str, Path]) -> UploadedFile:
        """
        Upload an image or video; returns where the server stored it.

        The stored URL is then referenced from a Media record or a settings
        document. Nothing cached is invalidated by the upload itself.
        """
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        with open(path, "rb") as f:
            content = f.read()

        data = self.client.upload(UPLOAD_PATH, path.name, content, content_type)
        uploaded = UploadedFile.model_validate(data)
        logger.info(f"Uploaded {path.name} -> {uploaded.url}")
        return uploaded
