"""Generic in-memory repositories keyed by integer ID.

The healthcare, warehouse and JSON inventory programs all keep their records
in a Repository. Items are stored in an insertion-ordered dict so listings
come back in the order records were added.

Contract:
    - Adding an ID that is already stored raises DuplicateItemError
    - Looking up, updating or removing a missing ID raises ItemNotFoundError
    - Predicate-based lookups never raise for "no match"
"""

import logging
from typing import Callable, Generic, Iterator, Optional, Protocol, TypeVar

from crud_showcase.domain.ports import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)

logger = logging.getLogger(__name__)


class Identifiable(Protocol):
    """Anything with an integer ``id``."""
    id: int


class Stocked(Identifiable, Protocol):
    """An identifiable item whose ``quantity`` can be changed."""
    name: str
    quantity: int


T = TypeVar('T', bound=Identifiable)
S = TypeVar('S', bound=Stocked)


class Repository(Generic[T]):
    """Dict-backed store of records keyed by their ``id``.

    Example Usage:
        ```python
        patients = Repository[Patient]()
        patients.add(Patient(id=1, name="John Doe", age=45, gender="male"))
        patients.get_by_id(1)
        patients.find(lambda p: p.name == "John Doe")
        patients.remove_where(lambda p: p.age > 40)
        ```
    """

    def __init__(self, item_type: Optional[type] = None):
        """Initialize an empty repository.

        Parameters:
            item_type: Optional record class; when given, ``add`` rejects
                other types and listings are labelled with its name
        """
        self.item_type = item_type
        self._items: dict[int, T] = {}

    @property
    def item_type_name(self) -> str:
        return self.item_type.__name__ if self.item_type is not None else "Item"

    def add(self, item: T) -> None:
        """Add a new item.

        Parameters:
            item: The item to add

        Raises:
            ValueError: If item is None
            TypeError: If ``item_type`` is set and item is not an instance of it
            DuplicateItemError: If an item with the same ID is already stored
        """
        if item is None:
            raise ValueError("item must not be None")

        if self.item_type is not None and not isinstance(item, self.item_type):
            raise TypeError(
                f"Expected {self.item_type.__name__}, got {type(item).__name__}"
            )

        if item.id in self._items:
            logger.warning(f"Rejected duplicate ID {item.id} for {type(item).__name__}")
            raise DuplicateItemError(item.id)

        self._items[item.id] = item
        logger.debug(f"Added {type(item).__name__} with ID {item.id}")

    def get_by_id(self, item_id: int) -> T:
        """Return the item stored under ``item_id``.

        Raises:
            ItemNotFoundError: If no item has that ID
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first item matching ``predicate``, or None."""
        if predicate is None:
            raise ValueError("predicate must not be None")
        return next((item for item in self._items.values() if predicate(item)), None)

    def get_all(self) -> list[T]:
        """Return a new list with every item in insertion order."""
        return list(self._items.values())

    def remove(self, item_id: int) -> bool:
        """Remove the item stored under ``item_id``.

        Returns:
            bool: Always True; a missing ID raises instead

        Raises:
            ItemNotFoundError: If no item has that ID
        """
        if item_id not in self._items:
            logger.warning(f"Cannot remove missing ID {item_id}")
            raise ItemNotFoundError(item_id)

        del self._items[item_id]
        logger.debug(f"Removed item with ID {item_id}")
        return True

    def remove_where(self, predicate: Callable[[T], bool]) -> bool:
        """Remove every item matching ``predicate``.

        Returns:
            bool: True if at least one item was removed
        """
        if predicate is None:
            raise ValueError("predicate must not be None")

        matching = [item_id for item_id, item in self._items.items() if predicate(item)]
        for item_id in matching:
            del self._items[item_id]
        return bool(matching)

    def replace_all(self, items: list[T]) -> None:
        """Swap the whole content for ``items``.

        Raises:
            DuplicateItemError: If ``items`` repeats an ID; the current
                content is left untouched in that case
        """
        staged: dict[int, T] = {}
        for item in items:
            if item.id in staged:
                raise DuplicateItemError(item.id)
            staged[item.id] = item
        self._items = staged

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())


class InventoryRepository(Repository[S]):
    """Repository for stocked items that also supports quantity updates."""

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the quantity of a stored item.

        The quantity is checked before the lookup, so a negative value is
        reported even for an unknown ID.

        Raises:
            InvalidQuantityError: If ``new_quantity`` is negative
            ItemNotFoundError: If no item has that ID
        """
        if new_quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative.")

        item = self.get_by_id(item_id)
        old_quantity = item.quantity
        item.quantity = new_quantity
        logger.info(f"Quantity of ID {item_id} changed from {old_quantity} to {new_quantity}")
