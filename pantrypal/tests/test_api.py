from datetime import date
import unittest
from fastapi.testclient import TestClient
from pantrypal.api.api_run import create_app
from pantrypal.domain.Pantry import Pantry
from pantrypal.events.notices import NoticeBoard
from pantrypal.infra.Key_Value_Store import MemoryStore
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.logic.recipes.suggestions import BUILTIN_RECIPES

TODAY = date(2024, 1, 10)


class TestPantryAPI(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.pantry = Pantry(PantryRepository(self.store), today=lambda: TODAY)
        self.app = create_app(pantry=self.pantry, notices=NoticeBoard(ttl=60), catalog=list(BUILTIN_RECIPES))
        self.client = TestClient(self.app)

    def _add(self, name, quantity="1", expiry="2024-01-20", category="vegetables"):
        resp = self.client.post('/api/items', json={
            'name': name, 'quantity': quantity, 'expiry': expiry, 'category': category,
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_add_and_list(self):
        added = self._add("Roma Tomato", "4")
        self.assertEqual(added['name'], "Roma Tomato")
        self.assertEqual(added['dateAdded'], "2024-01-10")
        self.assertEqual(added['expiry_label'], "Expires 1/20/2024")
        self.assertEqual(added['status'], "fresh")
        self.assertEqual(added['category_label'], "Vegetables")
        resp = self.client.get('/api/items')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 1)
        self.assertEqual(data['items'][0]['id'], added['id'])
        notice = self.client.get('/api/notices').json()['notices'][0]
        self.assertEqual(notice['message'], "Roma Tomato added to pantry!")

    def test_add_missing_field_rejected(self):
        resp = self.client.post('/api/items', json={'name': "Milk", 'quantity': "", 'expiry': "2024-01-20"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], "Please fill in all required fields")
        self.assertEqual(len(self.pantry), 0)
        notice = self.client.get('/api/notices').json()['notices'][0]
        self.assertEqual(notice['kind'], "error")

    def test_add_malformed_expiry_rejected(self):
        resp = self.client.post('/api/items', json={'name': "Milk", 'quantity': "1", 'expiry': "not-a-date"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], "Please enter a valid expiry date")
        self.assertIn('expiry', resp.json()['details'])
        self.assertEqual(len(self.pantry), 0)

    def test_search(self):
        self._add("Red Onion")
        self._add("Shallot", category="Onion")
        self._add("Milk", category="dairy")
        data = self.client.get('/api/items', params={'search': 'ONION'}).json()
        self.assertEqual([i['name'] for i in data['items']], ["Red Onion", "Shallot"])
        self.assertEqual(data['total'], 3)

    def test_get_update_delete(self):
        item = self._add("Milk", category="dairy")
        resp = self.client.get(f"/api/items/{item['id']}")
        self.assertEqual(resp.json()['name'], "Milk")
        resp = self.client.put(f"/api/items/{item['id']}", json={
            'name': "Whole Milk", 'quantity': "2", 'expiry': "2024-01-11", 'category': "dairy",
        })
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['expiry_label'], "Expires tomorrow")
        self.assertEqual(resp.json()['id'], item['id'])
        resp = self.client.delete(f"/api/items/{item['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get('/api/items').json()['count'], 0)

    def test_unknown_id(self):
        self.assertEqual(self.client.get('/api/items/nope').status_code, 404)
        self.assertEqual(self.client.delete('/api/items/nope').status_code, 404)
        self.assertEqual(self.client.post('/api/items/nope/used').status_code, 404)
        resp = self.client.put('/api/items/nope', json={'name': "A", 'quantity': "1", 'expiry': "2024-01-20"})
        self.assertEqual(resp.status_code, 404)

    def test_mark_used(self):
        item = self._add("Yogurt", category="dairy")
        resp = self.client.post(f"/api/items/{item['id']}/used")
        self.assertEqual(resp.json(), {'status': 'used', 'id': item['id'], 'name': "Yogurt"})
        self.assertEqual(len(self.pantry), 0)
        notice = self.client.get('/api/notices').json()['notices'][0]
        self.assertEqual(notice['message'], "Item marked as used!")

    def test_stats_and_expiring(self):
        self._add("A", expiry="2024-01-09")
        self._add("B", expiry="2024-01-10")
        self._add("C", expiry="2024-01-20")
        self.assertEqual(self.client.get('/api/stats').json(), {'total': 3, 'expiring_soon': 1, 'expired': 1})
        expiring = self.client.get('/api/expiring').json()
        self.assertEqual([i['name'] for i in expiring['items']], ["A", "B"])

    def test_receipt_import(self):
        resp = self.client.post('/api/receipt', json={'text': "milk\n\neggs\n  bread  \n"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'added': 3, 'total': 3})
        items = self.client.get('/api/items').json()['items']
        self.assertEqual({i['expiry'] for i in items}, {"2024-01-17"})
        notice = self.client.get('/api/notices').json()['notices'][0]
        self.assertEqual(notice['message'], "3 items added from receipt!")

    def test_empty_receipt(self):
        resp = self.client.post('/api/receipt', json={'text': "   "})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], "Please enter some items from your receipt")
        self.assertEqual(len(self.pantry), 0)

    def test_recipe_suggestions(self):
        self.assertEqual(self.client.get('/api/recipes/suggestions').json(), {'recipes': [], 'count': 0})
        self._add("Roma Tomato")
        names = [r['name'] for r in self.client.get('/api/recipes/suggestions').json()['recipes']]
        self.assertEqual(names, ["Pasta with Vegetables", "Salad Bowl"])

    def test_defaults(self):
        data = self.client.get('/api/defaults').json()
        self.assertEqual(data['expiry'], "2024-01-17")
        self.assertIn('other', data['categories'])

    def test_notices_cursor(self):
        self._add("Milk")
        cursor = self.client.get('/api/notices').json()['next_cursor']
        self.assertEqual(self.client.get('/api/notices', params={'since': cursor}).json()['notices'], [])


if __name__ == '__main__':
    unittest.main()
