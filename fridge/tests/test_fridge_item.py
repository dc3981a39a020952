from datetime import date, timedelta
import unittest
from fridge.domain.FridgeItem import ExpiryStatus, FridgeCategory, FridgeItem, classify_days_left


class TestFridgeItem(unittest.TestCase):

    def setUp(self):
        self.today = date(2025, 3, 10)

    def _item(self, days):
        return FridgeItem("Milk", FridgeCategory.DAIRY, self.today + timedelta(days=days))

    def test_days_until_expiry(self):
        self.assertEqual(self._item(5).days_until_expiry(self.today), 5)
        self.assertEqual(self._item(-2).days_until_expiry(self.today), -2)

    def test_status_buckets(self):
        expected = {
            -1: ExpiryStatus.EXPIRED,
            0: ExpiryStatus.CRITICAL,
            1: ExpiryStatus.CRITICAL,
            2: ExpiryStatus.WARNING,
            3: ExpiryStatus.WARNING,
            4: ExpiryStatus.GOOD,
        }
        for days, status in expected.items():
            self.assertEqual(classify_days_left(days), status)
            self.assertEqual(self._item(days).expiry_status(self.today), status)

    def test_is_expired(self):
        self.assertTrue(self._item(-1).is_expired(self.today))
        self.assertFalse(self._item(0).is_expired(self.today))

    def test_quantity_must_be_positive(self):
        with self.assertRaises(ValueError):
            FridgeItem("Milk", FridgeCategory.DAIRY, self.today, quantity=0)

    def test_category_from_string(self):
        item = FridgeItem("Apple", "fruits", self.today)
        self.assertEqual(item.category, FridgeCategory.FRUITS)
        self.assertEqual(item.category.display_name, "Fruits")

    def test_dict_conversion(self):
        item = FridgeItem("Beef", FridgeCategory.MEAT, self.today + timedelta(days=2), quantity=3)
        data = item.to_dict(self.today)
        self.assertEqual(data["expiration_date"], "2025-03-12")
        self.assertEqual(data["days_until_expiry"], 2)
        self.assertEqual(data["status"], "warning")
        self.assertEqual(FridgeItem.from_dict(data), item)


if __name__ == '__main__':
    unittest.main()
