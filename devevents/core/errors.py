from typing import Any


class DevEventsError(Exception):
    """Base class for errors raised by devevents itself.

    Storage failures reported by pymongo are not wrapped; they reach the
    caller as the original ``PyMongoError``.
    """


class ValidationError(DevEventsError):
    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class MissingReferenceError(DevEventsError):
    def __init__(self, collection: str, identifier: Any) -> None:
        super().__init__(f"{collection} with ID {identifier} does not exist")
        self.collection = collection
        self.identifier = identifier


class ConfigurationError(DevEventsError):
    pass
