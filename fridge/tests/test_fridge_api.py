from datetime import date, timedelta
import unittest
from fastapi.testclient import TestClient
from fridge.api.api_run import create_app
from fridge.api.services import AppServices
from fridge.domain.FridgeItem import FridgeCategory, FridgeItem


def _payload(name, category, days, quantity=1, **extra):
    data = {
        "name": name,
        "category": category,
        "expiration_date": (date.today() + timedelta(days=days)).isoformat(),
        "quantity": quantity,
    }
    data.update(extra)
    return data


class TestFridgeAPI(unittest.TestCase):

    def setUp(self):
        self.services = AppServices(demo_recipes=[])
        self.client = TestClient(create_app(self.services))

    def _add(self, *args, **kwargs):
        resp = self.client.post('/api/fridge/items', json=_payload(*args, **kwargs))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_add_and_get_item(self):
        item = self._add("  Milk ", "dairy", 5, quantity=2)
        self.assertEqual(item["name"], "Milk")
        self.assertEqual(item["days_until_expiry"], 5)
        self.assertEqual(item["status"], "good")
        resp = self.client.get(f"/api/fridge/items/{item['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["quantity"], 2)

    def test_invalid_input(self):
        self.assertEqual(self.client.post('/api/fridge/items', json=_payload("Bread", "bakery", 3)).status_code, 422)
        self.assertEqual(self.client.post('/api/fridge/items', json=_payload("Milk", "dairy", 3, quantity=0)).status_code, 422)
        self.assertEqual(self.client.post('/api/fridge/items', json=_payload("   ", "dairy", 3)).status_code, 422)

    def test_duplicate_id_rejected(self):
        self._add("Milk", "dairy", 5, id="milk-1")
        resp = self.client.post('/api/fridge/items', json=_payload("Milk", "dairy", 5, id="milk-1"))
        self.assertEqual(resp.status_code, 400)

    def test_list_sorted_and_filtered(self):
        self._add("Yogurt", "dairy", 7)
        self._add("Beef", "meat", 2)
        self._add("Butter", "dairy", 20)
        names = [i["name"] for i in self.client.get('/api/fridge/items').json()]
        self.assertEqual(names, ["Beef", "Yogurt", "Butter"])
        resp = self.client.get('/api/fridge/items', params={"category": "dairy", "sort": "name_desc"})
        self.assertEqual([i["name"] for i in resp.json()], ["Yogurt", "Butter"])
        self.assertEqual(self.client.get('/api/fridge/items', params={"sort": "bogus"}).status_code, 422)

    def test_update_and_delete(self):
        item = self._add("Milk", "dairy", 5)
        resp = self.client.put(f"/api/fridge/items/{item['id']}", json=_payload("Oat Milk", "dairy", 9, quantity=3))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.services.fridge.get(item['id']).name, "Oat Milk")
        self.assertEqual(self.client.delete(f"/api/fridge/items/{item['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/fridge/items/{item['id']}").status_code, 404)
        self.assertEqual(self.client.put("/api/fridge/items/missing", json=_payload("X", "dairy", 1)).status_code, 404)
        self.assertEqual(self.client.get("/api/fridge/items/missing").status_code, 404)

    def test_remove_expired(self):
        self._add("Strawberries", "fruits", -1)
        self._add("Apples", "fruits", 10)
        data = self.client.post('/api/fridge/remove-expired').json()
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["removed"][0]["name"], "Strawberries")
        self.assertEqual(len(self.services.fridge), 1)

    def test_waste_and_summary(self):
        milk = self._add("Milk", "dairy", 5)
        self._add("Chicken", "meat", -2)
        self._add("Carrots", "vegetables", 1)
        self.assertEqual(self.client.post(f"/api/fridge/items/{milk['id']}/waste").status_code, 200)
        self.assertEqual(self.client.post("/api/fridge/items/missing/waste").status_code, 404)
        self.assertEqual(self.client.post('/api/fridge/waste-expired').json()["count"], 1)
        summary = self.client.get('/api/fridge/summary').json()
        self.assertEqual(summary["total"], 1)
        self.assertEqual(summary["categories"]["vegetables"], {"count": 1, "expiring": 1})
        self.assertEqual(summary["statuses"]["critical"], 1)
        self.assertEqual(summary["next_expiry"]["name"], "Carrots")
        self.assertEqual(summary["waste"], {"dairy": 1, "meat": 1})

    def test_attention(self):
        self._add("Strawberries", "fruits", -1)
        self._add("Beef", "meat", 3)
        self._add("Carrots", "vegetables", 14)
        names = [i["name"] for i in self.client.get('/api/fridge/attention').json()]
        self.assertEqual(names, ["Beef"])
        wide = self.client.get('/api/fridge/attention', params={"window": 30}).json()
        self.assertEqual(len(wide), 2)

    def test_hide_expired_preference(self):
        self._add("Strawberries", "fruits", -1)
        self._add("Apples", "fruits", 10)
        self.client.put('/api/profile/preferences', json={"hide_expired_items": True})
        names = [i["name"] for i in self.client.get('/api/fridge/items').json()]
        self.assertEqual(names, ["Apples"])


class TestEventsAPI(unittest.TestCase):

    def setUp(self):
        self.services = AppServices(demo_recipes=[])
        self.client = TestClient(create_app(self.services))

    def test_event_feed_with_cursor(self):
        self.client.post('/api/fridge/items', json=_payload("Chicken", "meat", 1))
        feed = self.client.get('/api/events').json()
        types = [e["type"] for e in feed["events"]]
        self.assertEqual(types, ["fridge.item_added", "fridge.near_expiry"])
        newer = self.client.get('/api/events', params={"since": feed["next_cursor"]}).json()
        self.assertEqual(newer["events"], [])

    def test_empty_feed_is_seeded_with_near_expiry(self):
        self.services.fridge.items.append(
            FridgeItem("Bananas", FridgeCategory.FRUITS, date.today() + timedelta(days=1)))
        feed = self.client.get('/api/events').json()
        self.assertEqual([e["type"] for e in feed["events"]], ["fridge.near_expiry"])


if __name__ == '__main__':
    unittest.main()
