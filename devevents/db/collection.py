from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Awaitable, Callable, Mapping, Sequence

from devevents.core.errors import MissingReferenceError
from devevents.db.base import DocumentStore
from devevents.db.record import Record

logger = logging.getLogger(__name__)

PreSaveHook = Callable[[Record, "DocumentCollection"], Awaitable[None]]


class DocumentCollection:
    """A MongoDB collection with an explicit chain of pre-save hooks.

    ``save`` awaits every hook in registration order before writing. The first
    hook that raises stops the chain and the write; the exception reaches the
    caller unchanged. Storage errors from the write itself are not caught.
    Saving a loaded record whose document has since been removed raises
    ``MissingReferenceError`` instead of recreating it.
    """

    def __init__(
        self,
        store: DocumentStore,
        name: str,
        hooks: Sequence[PreSaveHook] = (),
    ) -> None:
        self.store = store
        self.name = name
        self.hooks: list[PreSaveHook] = list(hooks)

    def register_hook(self, hook: PreSaveHook) -> None:
        self.hooks.append(hook)

    async def exists(self, filter: Mapping[str, Any]) -> bool:
        found = await self.store.find_one(filter, projection={"_id": 1})
        return found is not None

    async def find_one(self, filter: Mapping[str, Any]) -> Record | None:
        document = await self.store.find_one(filter)
        if document is None:
            return None
        return Record.from_document(document)

    async def count(self, filter: Mapping[str, Any] | None = None) -> int:
        return await self.store.count_documents(dict(filter or {}))

    async def find(
        self,
        filter: Mapping[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int = 0,
    ) -> list[Record]:
        kwargs: dict[str, Any] = {"limit": limit}
        if sort:
            kwargs["sort"] = sort
        cursor = self.store.find(dict(filter or {}), **kwargs)
        documents = await cursor.to_list(length=None)
        return [Record.from_document(document) for document in documents]

    async def save(self, record: Record) -> Record:
        for hook in self.hooks:
            logger.debug("Running %s pre-save hook=%s id=%s", self.name, hook.__name__, record.id)
            await hook(record, self)

        now = datetime.now(tz=timezone.utc)
        record["updatedAt"] = now
        if record.is_new:
            record["createdAt"] = now
            await self.store.insert_one(record.to_document())
        else:
            result = await self.store.replace_one({"_id": record.id}, record.to_document())
            if result.matched_count == 0:
                raise MissingReferenceError(self.name, record.id)

        record.mark_persisted()
        return record
