from datetime import date, timedelta
import unittest
from fridge.domain.MealPlan import MealPlan
from fridge.domain.Recipe import Recipe
from fridge.domain.UserProfile import UserProfile


class TestMealPlan(unittest.TestCase):

    def setUp(self):
        self.today = date(2025, 5, 20)
        self.profile = UserProfile()
        self.plan = MealPlan(self.profile)
        self.pasta = Recipe(name="Simple Pasta")
        self.salad = Recipe(name="Simple Salad")

    def test_entries_kept_in_date_order(self):
        later = self.plan.add(self.pasta, self.today + timedelta(days=2))
        sooner = self.plan.add(self.salad, self.today)
        self.assertEqual(self.plan.entries, [sooner, later])

    def test_upcoming_includes_today_and_skips_prepared(self):
        past = self.plan.add(self.pasta, self.today - timedelta(days=1))
        today_entry = self.plan.add(self.salad, self.today)
        tomorrow = self.plan.add(self.pasta, self.today + timedelta(days=1))
        self.plan.mark_completed(tomorrow.id)
        self.assertEqual(self.plan.upcoming(self.today), [today_entry])
        self.assertNotIn(past, self.plan.upcoming(self.today))

    def test_mark_completed_records_on_profile(self):
        entry = self.plan.add(self.pasta, self.today)
        self.assertTrue(self.plan.mark_completed(entry.id).is_prepared)
        self.assertEqual(self.profile.completed_recipes, [self.pasta])
        self.assertIsNone(self.plan.mark_completed("missing"))

    def test_completed_newest_first(self):
        first = self.plan.add(self.pasta, self.today - timedelta(days=3))
        second = self.plan.add(self.salad, self.today - timedelta(days=1))
        self.plan.mark_completed(first.id)
        self.plan.mark_completed(second.id)
        self.assertEqual(self.plan.completed(), [second, first])

    def test_for_date_and_remove(self):
        entry = self.plan.add(self.pasta, self.today)
        self.plan.add(self.salad, self.today + timedelta(days=1))
        self.assertEqual(self.plan.for_date(self.today), [entry])
        self.assertTrue(self.plan.remove(entry.id))
        self.assertFalse(self.plan.remove(entry.id))
        self.assertEqual(self.plan.for_date(self.today), [])


if __name__ == '__main__':
    unittest.main()
