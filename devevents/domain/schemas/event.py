from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

EventMode = Literal["online", "offline", "hybrid"]

Text = Annotated[str, Field(min_length=1)]
TextList = Annotated[list[str], Field(min_length=1)]


class EventCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Text
    description: Text
    overview: Text
    image: Text
    venue: Text
    location: Text
    date: Text
    time: Text
    mode: EventMode
    audience: Text
    agenda: TextList
    organizer: Text
    tags: TextList


class EventUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Text | None = None
    description: Text | None = None
    overview: Text | None = None
    image: Text | None = None
    venue: Text | None = None
    location: Text | None = None
    date: Text | None = None
    time: Text | None = None
    mode: EventMode | None = None
    audience: Text | None = None
    agenda: TextList | None = None
    organizer: Text | None = None
    tags: TextList | None = None


class EventOut(BaseModel):
    id: str
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: EventMode
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    createdAt: datetime
    updatedAt: datetime
