"""Unit tests for the JSON inventory logger.

Tests cover:
- In-memory add, list, remove and clear
- Saving to and loading from the JSON file
- Missing, corrupted and duplicate-ID files
- Structured fields on persistence log records
"""

import json
import logging
from datetime import datetime

import pytest

from crud_showcase.adapters.inventory_logger import InventoryLogger
from crud_showcase.domain.inventory import InventoryItem
from crud_showcase.domain.ports import DuplicateItemError, SourceNotFoundError, StorageError
from crud_showcase.infrastructure.logging_config import StructuredFormatter


def make_item(item_id: int, name: str = "Laptop", quantity: int = 10) -> InventoryItem:
    return InventoryItem(id=item_id, name=name, quantity=quantity, date_added=datetime(2024, 5, 1, 9, 30, 15))


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "inventory_data.json"


@pytest.fixture
def inventory(data_file):
    return InventoryLogger(data_file, InventoryItem)


class TestInventoryLoggerInMemory:
    """Test the in-memory operations."""

    def test_add_and_get_all(self, inventory):
        """Test items come back in insertion order as a tuple."""
        inventory.add(make_item(2, "Tablet"))
        inventory.add(make_item(1))

        items = inventory.get_all()
        assert isinstance(items, tuple)
        assert [item.id for item in items] == [2, 1]
        assert inventory.count == 2

    def test_add_duplicate_raises(self, inventory):
        """Test a duplicate ID is rejected."""
        inventory.add(make_item(1))
        with pytest.raises(DuplicateItemError):
            inventory.add(make_item(1, "Other"))

    def test_add_none_raises(self, inventory):
        """Test None is rejected."""
        with pytest.raises(ValueError):
            inventory.add(None)

    def test_remove_item(self, inventory):
        """Test removal reports whether the ID was present."""
        inventory.add(make_item(1))
        assert inventory.remove_item(1) is True
        assert inventory.remove_item(1) is False
        assert inventory.count == 0

    def test_empty_path_rejected(self):
        """Test an empty file path is an argument error."""
        with pytest.raises(ValueError):
            InventoryLogger("", InventoryItem)

    def test_creates_parent_directory(self, tmp_path):
        """Test the data directory is created on construction."""
        InventoryLogger(tmp_path / "data" / "inventory.json", InventoryItem)
        assert (tmp_path / "data").is_dir()


class TestInventoryLoggerPersistence:
    """Test saving and loading."""

    def test_save_writes_pascal_case_json(self, inventory, data_file):
        """Test the on-disk layout."""
        inventory.add(make_item(1, quantity=0))
        inventory.save_to_file()

        payload = json.loads(data_file.read_text(encoding="utf-8"))
        assert payload == [{
            "Id": 1,
            "Name": "Laptop",
            "Quantity": 0,
            "DateAdded": "2024-05-01T09:30:15",
            "IsInStock": False,
        }]

    def test_save_then_load_restores_items(self, inventory, data_file):
        """Test a saved inventory loads back identically."""
        inventory.add(make_item(1))
        inventory.add(make_item(2, "Smartphone", 25))
        inventory.save_to_file()

        restored = InventoryLogger(data_file, InventoryItem)
        restored.load_from_file()
        assert restored.get_all() == inventory.get_all()

    def test_load_replaces_current_content(self, inventory, data_file):
        """Test loading discards items that are not in the file."""
        inventory.add(make_item(1))
        inventory.save_to_file()
        inventory.add(make_item(2))

        inventory.load_from_file()
        assert [item.id for item in inventory.get_all()] == [1]

    def test_load_empty_list(self, inventory, data_file):
        """Test an empty JSON list yields an empty inventory."""
        data_file.write_text("[]", encoding="utf-8")
        inventory.add(make_item(1))
        inventory.load_from_file()
        assert inventory.count == 0

    def test_load_missing_file(self, inventory):
        """Test a missing file raises SourceNotFoundError."""
        with pytest.raises(SourceNotFoundError, match="Inventory file not found."):
            inventory.load_from_file()

    def test_load_corrupted_file(self, inventory, data_file):
        """Test invalid JSON is a StorageError and leaves content untouched."""
        inventory.add(make_item(1))
        data_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError) as exc_info:
            inventory.load_from_file()

        assert "may be corrupted" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None
        assert inventory.count == 1

    def test_load_wrong_shape(self, inventory, data_file):
        """Test JSON that is not a list of items is rejected."""
        data_file.write_text(json.dumps([{"Id": 1, "Name": "Laptop"}]), encoding="utf-8")
        with pytest.raises(StorageError):
            inventory.load_from_file()

    def test_load_duplicate_ids(self, inventory, data_file):
        """Test a file repeating an ID is rejected."""
        record = {"Id": 1, "Name": "Laptop", "Quantity": 1, "DateAdded": "2024-05-01T00:00:00"}
        data_file.write_text(json.dumps([record, record]), encoding="utf-8")
        with pytest.raises(StorageError, match="Duplicate ID 1"):
            inventory.load_from_file()

    def test_save_to_unwritable_path(self, tmp_path):
        """Test a failed write is reported as StorageError."""
        target = tmp_path / "taken"
        target.mkdir()
        inventory = InventoryLogger(target, InventoryItem)
        inventory.add(make_item(1))
        with pytest.raises(StorageError):
            inventory.save_to_file()


class TestInventoryLoggerLogging:
    """Test the structured fields attached to persistence log records."""

    def test_save_and_load_log_item_counts(self, inventory, caplog):
        """Test save and load records carry the operation and item count."""
        caplog.set_level(logging.INFO, logger="crud_showcase.adapters.inventory_logger")
        inventory.add(make_item(1))
        inventory.add(make_item(2))

        inventory.save_to_file()
        inventory.load_from_file()

        fields = [record.extra_fields for record in caplog.records if hasattr(record, "extra_fields")]
        assert [f["operation"] for f in fields] == ["save", "load"]
        assert all(f["item_count"] == 2 for f in fields)

    def test_fields_reach_json_logs(self, inventory, data_file, caplog):
        """Test the JSON formatter merges the fields into the payload."""
        caplog.set_level(logging.INFO, logger="crud_showcase.adapters.inventory_logger")
        inventory.add(make_item(1))
        inventory.save_to_file()

        payload = json.loads(StructuredFormatter().format(caplog.records[-1]))
        assert payload["operation"] == "save"
        assert payload["item_count"] == 1
        assert payload["file_path"] == str(data_file)
