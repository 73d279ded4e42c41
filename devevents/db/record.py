from __future__ import annotations

import copy
from typing import Any, Mapping

from bson import ObjectId


class Record:
    """An in-flight document plus the state the pre-save hooks need.

    ``is_new`` is true until the record has been written once. Field changes
    are tracked against the values loaded from (or last written to) storage.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        id: ObjectId | None = None,
        persisted: bool = False,
    ) -> None:
        fields = dict(data or {})
        stored_id = fields.pop("_id", None)
        self.id: ObjectId = id or stored_id or ObjectId()
        self.data: dict[str, Any] = fields
        self.is_new = not persisted
        self._original: dict[str, Any] = copy.deepcopy(fields) if persisted else {}

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Record:
        return cls(document, persisted=True)

    def __getitem__(self, field: str) -> Any:
        return self.data[field]

    def __setitem__(self, field: str, value: Any) -> None:
        self.data[field] = value

    def __contains__(self, field: str) -> bool:
        return field in self.data

    def get(self, field: str, default: Any = None) -> Any:
        return self.data.get(field, default)

    def update(self, changes: Mapping[str, Any]) -> None:
        self.data.update(changes)

    def is_modified(self, field: str) -> bool:
        if self.is_new:
            return False
        return self.data.get(field) != self._original.get(field)

    def needs(self, field: str) -> bool:
        return self.is_new or self.is_modified(field)

    def to_document(self) -> dict[str, Any]:
        return {"_id": self.id, **self.data}

    def mark_persisted(self) -> None:
        self.is_new = False
        self._original = copy.deepcopy(self.data)

    def __repr__(self) -> str:
        return f"Record(id={self.id!s}, new={self.is_new})"
