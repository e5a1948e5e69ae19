"""Domain base types.

Reference data (locales, attribute definitions, translations) is modelled
as immutable value objects; loaded products are entities keyed by ID.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable domain value, equal to any other with the same fields."""


IdT = TypeVar("IdT", bound=int | str)


@dataclass
class Entity(ABC, Generic[IdT]):
    """Domain object identified by ``id``.

    Two instances of the same entity type describe the same record when
    their IDs match, whatever state each was loaded with.

    Attributes:
        id: Record identifier.
    """

    id: IdT

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
