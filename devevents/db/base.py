from typing import Any, Mapping, Protocol


class Cursor(Protocol):
    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        ...


class DocumentStore(Protocol):
    """The subset of a Motor collection the persistence layer relies on."""

    async def find_one(
        self, filter: Mapping[str, Any], projection: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        ...

    def find(self, filter: Mapping[str, Any], **kwargs: Any) -> Cursor:
        ...

    async def count_documents(self, filter: Mapping[str, Any]) -> int:
        ...

    async def insert_one(self, document: Mapping[str, Any]) -> Any:
        ...

    async def replace_one(self, filter: Mapping[str, Any], replacement: Mapping[str, Any]) -> Any:
        ...
