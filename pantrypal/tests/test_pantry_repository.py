from datetime import date
import json
import tempfile
import unittest
from pathlib import Path
from pantrypal.domain.PantryItem import PantryItem
from pantrypal.infra.Key_Value_Store import JsonFileStore, MemoryStore
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.utilities.exceptions import PersistenceError


def _items():
    return [
        PantryItem("a1", "Milk", "1 gallon", date(2024, 1, 15), "dairy", date(2024, 1, 1)),
        PantryItem("b2", "Roma Tomato", "4", date(2024, 1, 12), "vegetables", date(2024, 1, 2)),
        PantryItem("c3", "Rice", "2kg", date(2025, 6, 30), "other", date(2024, 1, 3)),
    ]


class TestPantryRepository(unittest.TestCase):

    def test_round_trip_memory_store(self):
        repository = PantryRepository(MemoryStore())
        repository.save(_items())
        self.assertEqual(repository.load(), _items())

    def test_round_trip_json_file_store(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = JsonFileStore(Path(tmp) / 'data')
            repository = PantryRepository(store, key="pantryPalItems")
            repository.save(_items())
            self.assertTrue((Path(tmp) / 'data' / 'pantryPalItems.json').exists())
            self.assertEqual(PantryRepository(JsonFileStore(Path(tmp) / 'data')).load(), _items())
            # no temp files left behind
            self.assertEqual([p.name for p in (Path(tmp) / 'data').iterdir()], ['pantryPalItems.json'])

    def test_stored_layout(self):
        store = MemoryStore()
        PantryRepository(store).save(_items()[:1])
        data = json.loads(store.get("pantryPalItems"))
        self.assertEqual(data, [{
            "id": "a1", "name": "Milk", "quantity": "1 gallon", "expiry": "2024-01-15",
            "category": "dairy", "dateAdded": "2024-01-01",
        }])

    def test_missing_key_loads_empty(self):
        self.assertEqual(PantryRepository(MemoryStore()).load(), [])
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(PantryRepository(JsonFileStore(Path(tmp))).load(), [])

    def test_corrupt_data_loads_empty(self):
        corrupt = [
            "{not json",
            '{"id": "a1"}',
            '[{"id": "a1", "name": "Milk"}]',
            '[{"id": "a1", "name": "Milk", "quantity": "1", "expiry": "15/01/2024", "dateAdded": "2024-01-01"}]',
            '[42]',
            "[" * 200000,
            '',
        ]
        for raw in corrupt:
            with self.subTest(raw=raw):
                store = MemoryStore({"pantryPalItems": raw})
                self.assertEqual(PantryRepository(store).load(), [])

    def test_duplicate_ids_dropped(self):
        store = MemoryStore()
        items = _items()
        items[2].id = "a1"
        PantryRepository(store).save(items)
        loaded = PantryRepository(store).load()
        self.assertEqual([i.name for i in loaded], ["Milk", "Roma Tomato"])

    def test_missing_category_defaults(self):
        raw = '[{"id": "a1", "name": "Milk", "quantity": "1", "expiry": "2024-01-15", "dateAdded": "2024-01-01"}]'
        loaded = PantryRepository(MemoryStore({"pantryPalItems": raw})).load()
        self.assertEqual(loaded[0].category, "other")

    def test_write_failure_raises_persistence_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / 'blocker'
            blocker.write_text('not a directory', encoding='utf-8')
            repository = PantryRepository(JsonFileStore(blocker / 'data'))
            with self.assertRaises(PersistenceError):
                repository.save(_items())

    def test_quota_failure_raises_persistence_error(self):
        repository = PantryRepository(MemoryStore(quota=20))
        with self.assertRaises(PersistenceError):
            repository.save(_items())
        self.assertEqual(repository.load(), [])


if __name__ == '__main__':
    unittest.main()
