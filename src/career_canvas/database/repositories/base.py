"""Generic repository over a single Cosmos DB container."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from career_canvas.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import ContainerProxy, DatabaseProxy

T = TypeVar("T", bound=DocumentBase)


class BaseRepository(Generic[T]):
    """CRUD and query helpers shared by every container repository.

    Reads skip documents that carry a ``deleted_at`` stamp.
    """

    container_name: ClassVar[str]
    model_class: ClassVar[type[DocumentBase]]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container: ContainerProxy = database.get_container_client(self.container_name)

    def _to_model(self, data: dict[str, Any]) -> T:
        return cast("T", self.model_class.model_validate(data))

    async def create(self, item: T) -> T:
        await self._container.create_item(body=item.model_dump(mode="json", exclude_none=True))
        return item

    async def get(self, item_id: str, partition_key: str) -> T | None:
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        if data.get("deleted_at") is not None:
            return None
        return self._to_model(data)

    async def update(self, item: T, partition_key: str) -> T:
        item.updated_at = datetime.now(UTC)
        await self._container.replace_item(
            item=item.id,
            body=item.model_dump(mode="json", exclude_none=True),
        )
        return item
