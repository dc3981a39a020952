import unittest
from fridge.domain.Recipe import Recipe
from fridge.domain.UserProfile import AllergySeverity, UserProfile


class TestUserProfile(unittest.TestCase):

    def setUp(self):
        self.profile = UserProfile("Sam", "sam@example.com")
        self.pasta = Recipe(name="Simple Pasta")
        self.salad = Recipe(name="Simple Salad")

    def test_favorite_and_liked_stay_in_sync(self):
        self.assertTrue(self.profile.toggle_favorite(self.pasta))
        self.assertIn(self.pasta, self.profile.liked_recipes)
        self.assertFalse(self.profile.toggle_favorite(self.pasta))
        self.assertEqual(self.profile.favorites, [])
        self.assertEqual(self.profile.liked_recipes, [])

        self.assertTrue(self.profile.toggle_liked(self.salad))
        self.assertTrue(self.profile.is_favorite(self.salad))
        self.assertFalse(self.profile.toggle_liked(self.salad))
        self.assertFalse(self.profile.is_favorite(self.salad))

    def test_remind_about_uncooked_favorites(self):
        self.profile.toggle_favorite(self.pasta)
        self.profile.toggle_favorite(self.salad)
        self.profile.mark_recipe_completed(self.pasta)
        self.profile.mark_recipe_completed(self.pasta)
        self.assertEqual(self.profile.completed_recipes, [self.pasta])
        self.assertEqual(self.profile.remind_about_favorites(), [self.salad])

    def test_allergies(self):
        allergy = self.profile.add_allergy("Peanuts", AllergySeverity.SEVERE)
        self.assertEqual(allergy.to_dict(), {"name": "Peanuts", "severity": "severe"})
        self.profile.remove_allergy(0)
        self.assertEqual(self.profile.allergies, [])
        with self.assertRaises(IndexError):
            self.profile.remove_allergy(0)
        self.profile.add_allergy("Milk")
        with self.assertRaises(IndexError):
            self.profile.remove_allergy(-1)
        self.assertEqual([a.name for a in self.profile.allergies], ["Milk"])

    def test_folders(self):
        self.assertEqual(len(self.profile.folders), 4)
        self.profile.create_folder("Weekend")
        index = len(self.profile.folders) - 1
        self.assertTrue(self.profile.add_recipe_to_folder(self.pasta, index))
        self.assertFalse(self.profile.add_recipe_to_folder(self.pasta, index))
        self.assertFalse(self.profile.add_recipe_to_folder(self.pasta, 99))
        self.profile.remove_recipe_from_folder(self.pasta.id, index)
        self.assertEqual(self.profile.folders[index].recipes, [])
        self.profile.delete_folder(index)
        self.assertEqual(len(self.profile.folders), 4)

    def test_update_and_to_dict(self):
        self.profile.update("Alex", "alex@example.com", None)
        data = self.profile.to_dict()
        self.assertEqual(data["name"], "Alex")
        self.assertIsNone(data["birth_date"])
        self.assertEqual(data["preferences"]["expiry_notification_days"], 3)


if __name__ == '__main__':
    unittest.main()
