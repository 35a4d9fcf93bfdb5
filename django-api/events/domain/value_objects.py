"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4


def normalize_name(name: str) -> str:
    """Return the key under which event names are compared for uniqueness."""
    return name.lower()


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AttendeeCount:
    """Non-negative integer bound on event attendance."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Attendee count cannot be negative")
