"""
Shared plumbing for resource services.
"""
from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from stagedoor.api_client import ApiClient
from stagedoor.schemas import ApiModel

ModelT = TypeVar("ModelT", bound=ApiModel)

Payload = Union[BaseModel, Dict[str, Any]]


def dump_payload(data: Optional[Payload]) -> Optional[Dict[str, Any]]:
    """Serialize a model (or pass through a partial dict) for the wire."""
    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True, mode="json")
    return data


class BaseService:
    """Holds the injected access layer."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _mutated(self) -> None:
        # Any write may change what earlier GETs returned
        self.client.clear_cache()


class ResourceService(BaseService, Generic[ModelT]):
    """
    CRUD over a collection that is read from ``read_path`` and written
    through ``admin_path``.
    """

    model: ClassVar[Type[ApiModel]]
    read_path: ClassVar[str]
    admin_path: ClassVar[str]
    # Admin-only listings that must always be current
    cache_listing: ClassVar[bool] = True

    def _parse(self, data: Any) -> ModelT:
        return self.model.model_validate(data)

    def _parse_list(self, data: Any) -> List[ModelT]:
        return [self.model.model_validate(item) for item in data or []]

    def get_all(self, use_cache: Optional[bool] = None) -> List[ModelT]:
        if use_cache is None:
            use_cache = self.cache_listing
        return self._parse_list(self.client.get(self.read_path, use_cache))

    def get_by_id(self, resource_id: str, use_cache: bool = True) -> ModelT:
        return self._parse(self.client.get(f"{self.read_path}/{resource_id}", use_cache))

    def create(self, data: Payload) -> ModelT:
        created = self.client.post(self.admin_path, dump_payload(data))
        self._mutated()
        return self._parse(created)

    def update(self, resource_id: str, data: Payload) -> ModelT:
        updated = self.client.put(f"{self.admin_path}/{resource_id}", dump_payload(data))
        self._mutated()
        return self._parse(updated)

    def delete(self, resource_id: str) -> None:
        self.client.delete(f"{self.admin_path}/{resource_id}")
        self._mutated()


class SettingsService(BaseService, Generic[ModelT]):
    """A single settings document (hero, about page, SEO)."""

    model: ClassVar[Type[ApiModel]]
    read_path: ClassVar[str]
    admin_path: ClassVar[str]

    def get_settings(self, use_cache: bool = True) -> ModelT:
        return self.model.model_validate(self.client.get(self.read_path, use_cache))

    def update_settings(self, data: Payload) -> ModelT:
        updated = self.client.put(self.admin_path, dump_payload(data))
        self._mutated()
        return self.model.model_validate(updated)
