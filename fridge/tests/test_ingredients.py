import unittest
from fridge.logic.recipes.ingredients import (
    clean_ingredient_for_display, difficulty_label, extract_ingredient_info, extract_quantity,
    parse_for_shopping_list
)


class TestIngredientParsing(unittest.TestCase):

    def test_clean_for_display(self):
        self.assertEqual(clean_ingredient_for_display("2 cups flour, sifted"), "flour")
        self.assertEqual(clean_ingredient_for_display("1/2 cup sugar"), "sugar")
        self.assertEqual(clean_ingredient_for_display("3 eggs"), "eggs")
        self.assertEqual(clean_ingredient_for_display("1 tbsp olive oil"), "olive oil")
        self.assertEqual(clean_ingredient_for_display("salt"), "salt")

    def test_extract_quantity(self):
        self.assertEqual(extract_quantity("3"), 3)
        self.assertEqual(extract_quantity("2.5"), 3)
        self.assertEqual(extract_quantity("1/2"), 1)
        self.assertEqual(extract_quantity("two"), 2)
        self.assertIsNone(extract_quantity("six"))
        self.assertIsNone(extract_quantity("flour"))
        self.assertIsNone(extract_quantity("1/0"))

    def test_extract_ingredient_info(self):
        self.assertEqual(extract_ingredient_info("2 tablespoons butter"), ("butter", 2.0, "tbsp"))
        self.assertEqual(extract_ingredient_info("1/2 cup sugar"), ("sugar", 0.5, "cup"))
        self.assertEqual(extract_ingredient_info("salt"), ("salt", 1.0, ""))

    def test_parse_for_shopping_list(self):
        self.assertEqual(parse_for_shopping_list("3 large eggs, beaten"), ("large eggs", 3))
        self.assertEqual(parse_for_shopping_list("1/2 cup of milk"), ("milk", 1))
        self.assertEqual(parse_for_shopping_list("2 onions diced"), ("onions", 2))
        self.assertEqual(parse_for_shopping_list("Salt, to taste"), ("Salt", 1))

    def test_difficulty_label(self):
        self.assertEqual(difficulty_label(15), "Quick & Easy")
        self.assertEqual(difficulty_label(16), "Easy")
        self.assertEqual(difficulty_label(30), "Easy")
        self.assertEqual(difficulty_label(45), "Moderate")
        self.assertEqual(difficulty_label(61), "Advanced")


if __name__ == '__main__':
    unittest.main()
