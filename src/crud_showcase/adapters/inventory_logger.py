"""JSON Inventory Logger.

Keeps inventory records in memory and persists them to a JSON file as an
indented list. Serialization is delegated to pydantic; the logger only maps
library and I/O failures onto StorageError.

Architecture:
    - Records live in a Repository, so duplicate IDs are rejected the same
      way the other programs reject them
    - Loading replaces the in-memory content wholesale; a failed load leaves
      it untouched
"""

import logging
from pathlib import Path
from typing import Generic, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from crud_showcase.domain.ports import DuplicateItemError, SourceNotFoundError, StorageError
from crud_showcase.domain.repository import Repository, T

logger = logging.getLogger(__name__)


class InventoryLogger(Generic[T]):
    """Generic inventory log with file persistence.

    Example Usage:
        ```python
        log = InventoryLogger("inventory.json", InventoryItem)
        log.add(InventoryItem(id=1, name="Laptop", quantity=10, date_added=datetime.now()))
        log.save_to_file()

        restored = InventoryLogger("inventory.json", InventoryItem)
        restored.load_from_file()
        ```
    """

    def __init__(self, file_path: Union[str, Path], item_type: type[T]):
        """Initialize the logger.

        Parameters:
            file_path: JSON file the inventory is saved to and loaded from;
                its parent directory is created if missing
            item_type: Record class (a pydantic model with an integer ``id``)
        """
        if not file_path:
            raise ValueError("file_path must not be empty")

        self.file_path = Path(file_path)
        self.item_type = item_type
        self._adapter = TypeAdapter(list[item_type])
        self._log: Repository[T] = Repository(item_type)

        self.file_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def count(self) -> int:
        return len(self._log)

    def add(self, item: T) -> None:
        """Add an item.

        Raises:
            ValueError: If item is None
            DuplicateItemError: If an item with the same ID is already logged
        """
        self._log.add(item)

    def get_all(self) -> tuple[T, ...]:
        """Return every item in insertion order as a read-only tuple."""
        return tuple(self._log.get_all())

    def remove_item(self, item_id: int) -> bool:
        """Remove an item by ID.

        Returns:
            bool: True if the item was found and removed, False otherwise
        """
        return self._log.remove_where(lambda item: item.id == item_id)

    def clear(self) -> None:
        self._log.clear()

    def save_to_file(self) -> None:
        """Write the current inventory to ``file_path``.

        Raises:
            StorageError: If serialization or the write fails
        """
        try:
            payload = self._adapter.dump_json(self._log.get_all(), indent=2, by_alias=True)
        except PydanticSerializationError as e:
            raise StorageError("Failed to serialize inventory data.", source=str(self.file_path)) from e

        try:
            self.file_path.write_bytes(payload)
        except OSError as e:
            raise StorageError(f"Failed to write to file: {self.file_path}", source=str(self.file_path)) from e

        logger.info(
            f"Saved {self.count} items to {self.file_path}",
            extra={"extra_fields": {"operation": "save", "item_count": self.count, "file_path": str(self.file_path)}}
        )

    def load_from_file(self) -> None:
        """Replace the in-memory inventory with the content of ``file_path``.

        Raises:
            SourceNotFoundError: If the file does not exist
            StorageError: If the file cannot be read or does not hold a
                valid list of items
        """
        if not self.file_path.is_file():
            raise SourceNotFoundError("Inventory file not found.", source=str(self.file_path))

        try:
            raw = self.file_path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read from file: {self.file_path}", source=str(self.file_path)) from e

        try:
            items = self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(
                "Failed to deserialize inventory data. The file may be corrupted.",
                source=str(self.file_path)
            ) from e

        try:
            self._log.replace_all(items)
        except DuplicateItemError as e:
            raise StorageError(
                f"Failed to deserialize inventory data. Duplicate ID {e.item_id} in file.",
                source=str(self.file_path)
            ) from e

        logger.info(
            f"Loaded {self.count} items from {self.file_path}",
            extra={"extra_fields": {"operation": "load", "item_count": self.count, "file_path": str(self.file_path)}}
        )
