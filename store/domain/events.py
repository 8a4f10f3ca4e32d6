# store/domain/events.py
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    event_data: Any
    occurred_on: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def name(self) -> str:
        return self.__class__.__name__


class ProductCreatedEvent(Event):
    pass


class CustomerCreatedEvent(Event):
    pass


class CustomerAddressUpdatedEvent(Event):
    pass
