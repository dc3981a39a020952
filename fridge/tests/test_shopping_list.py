import unittest
from fridge.domain.Recipe import Recipe
from fridge.domain.ShoppingList import ShoppingList


class TestShoppingList(unittest.TestCase):

    def setUp(self):
        self.shopping_list = ShoppingList()

    def test_add_and_contains(self):
        item = self.shopping_list.add("Milk", 2, "semi-skimmed")
        self.assertIn(item, self.shopping_list.get_items())
        self.assertTrue(self.shopping_list.contains("milk"))
        self.assertFalse(self.shopping_list.contains("bread"))

    def test_add_missing_from_recipe_skips_existing(self):
        self.shopping_list.add("milk")
        recipe = Recipe(name="Pancakes", used_ingredients=["2 eggs"],
                        missed_ingredients=["2 cups flour, sifted", "Milk"])
        added = self.shopping_list.add_missing_from_recipe(recipe)
        self.assertEqual([(i.name, i.quantity) for i in added], [("flour", 2)])
        self.assertEqual(len(self.shopping_list.get_items()), 2)
        self.assertEqual(self.shopping_list.add_missing_from_recipe(recipe), [])

    def test_toggle_and_clear_completed(self):
        bread = self.shopping_list.add("Bread")
        self.shopping_list.add("Butter")
        self.assertTrue(self.shopping_list.toggle(bread.id).is_completed)
        self.assertIsNone(self.shopping_list.toggle("missing"))
        self.assertEqual(self.shopping_list.clear_completed(), 1)
        self.assertEqual([i.name for i in self.shopping_list.get_items()], ["Butter"])

    def test_remove(self):
        item = self.shopping_list.add("Bread")
        self.assertTrue(self.shopping_list.remove(item.id))
        self.assertFalse(self.shopping_list.remove(item.id))


if __name__ == '__main__':
    unittest.main()
