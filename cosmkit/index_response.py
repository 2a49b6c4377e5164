"""Events and indexed data returned by transactions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import StdError


@dataclass
class Attribute:
    """A key/value pair attached to an event."""

    key: str
    value: str


@dataclass
class Event:
    """A typed event with its attributes."""

    type: str
    attributes: list[Attribute] = field(default_factory=list)

    def add_attribute(self, key: str, value: str) -> Event:
        """Append an attribute and return the event, for chaining."""
        self.attributes.append(Attribute(key, value))
        return self


class IndexResponse:
    """Lookups over the ``events`` and ``data`` of a transaction response."""

    events: list[Event]
    data: bytes | None

    def event_attr_value(self, event_type: str, attr_key: str) -> str:
        """Return the first value of ``attr_key`` in an event of ``event_type``."""
        for event in self.events:
            if event.type != event_type:
                continue
            for attr in event.attributes:
                if attr.key == attr_key:
                    return attr.value
        raise StdError(f"missing {attr_key} in {event_type} event")

    def instantiated_contract_address(self) -> str:
        """Return the contract address of an instantiate response."""
        return self.event_attr_value("instantiate", "_contract_address")

    def uploaded_code_id(self) -> int:
        """Return the code id of an upload response."""
        return int(self.event_attr_value("store_code", "code_id"))


@dataclass
class AppResponse(IndexResponse):
    """Response of an in-process transaction."""

    events: list[Event] = field(default_factory=list)
    data: bytes | None = None