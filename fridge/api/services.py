"""Per-application state shared by the routers.

One AppServices instance is built by create_app() and stored on
app.state; routes receive it through the get_services dependency.
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import Request

from fridge.domain.Budget import Budget
from fridge.domain.Fridge import Fridge
from fridge.domain.MealPlan import MealPlan
from fridge.domain.Recipe import Recipe
from fridge.domain.ShoppingList import ShoppingList
from fridge.domain.UserProfile import UserProfile
from fridge.events.Event_Bus import EventBus
from fridge.events.web_observers import EventLog
from fridge.infra.Demo_Repository import load_demo_items, load_demo_recipes
from fridge.infra.spoonacular import RecipeService, SpoonacularClient
from fridge.logic.recipes.filtering import filter_recipes
from fridge.logic.scanning.barcode import BarcodeCatalog, RandomFallback
from fridge.utilities.config import EXPIRY_NOTIFICATION_DAYS, RECIPE_INGREDIENT_LIMIT

logger = logging.getLogger(__name__)


class AppServices:
    def __init__(self, event_bus: Optional[EventBus] = None, fridge: Optional[Fridge] = None,
                 catalog: Optional[BarcodeCatalog] = None, recipe_service: Optional[RecipeService] = None,
                 profile: Optional[UserProfile] = None, demo_recipes: Optional[List[Recipe]] = None,
                 load_demo: bool = False):
        self.event_bus = event_bus or EventBus()
        self.event_log = EventLog().attach(self.event_bus)
        self.profile = profile or UserProfile(expiry_notification_days=EXPIRY_NOTIFICATION_DAYS)
        notification_days = self.profile.preferences.expiry_notification_days
        if fridge is None:
            fridge = Fridge(self.event_bus, notification_days=notification_days)
        else:
            fridge.set_event_bus(self.event_bus)
        self.fridge = fridge
        self.catalog = catalog or BarcodeCatalog(fallback=RandomFallback())
        self.recipe_service = recipe_service or RecipeService(SpoonacularClient())
        self.demo_recipes = load_demo_recipes() if demo_recipes is None else demo_recipes
        self.suggested_recipes: List[Recipe] = []
        self.shopping_list = ShoppingList()
        self.meal_plan = MealPlan(self.profile)
        self.budget = Budget()
        if load_demo:
            for item in load_demo_items():
                self.fridge.add(item)
            logger.info("Loaded %d demo items", len(self.fridge))

    async def refresh_suggestions(self, today: Optional[date] = None) -> List[Recipe]:
        """Fetch recipes for what is in the fridge and keep them as the current suggestions.

        With nothing usable in the fridge the suggestions are cleared. When the
        recipe service fails and nothing was suggested before, the demo recipes
        are used instead.
        """
        names = self.fridge.valid_ingredient_names(today)[:RECIPE_INGREDIENT_LIMIT]
        if not names:
            logger.info("No valid ingredients in fridge, clearing suggestions")
            self.suggested_recipes = []
            return self.suggested_recipes

        personalization = self.profile.preferences.recipe_personalization
        recipes = await self.recipe_service.fetch_recipes(
            names, personalization.dietary_preference, personalization.max_cooking_time
        )
        if recipes is not None:
            filtered = filter_recipes(recipes, self.profile)
            if len(filtered) < len(recipes):
                logger.info("Filtered out %d recipes by profile preferences", len(recipes) - len(filtered))
            self.suggested_recipes = filtered
        elif not self.suggested_recipes:
            logger.warning("Recipe service unavailable, showing demo recipes")
            self.suggested_recipes = list(self.demo_recipes)
        return self.suggested_recipes

    def known_recipes(self) -> List[Recipe]:
        """Every recipe the app currently holds, without duplicates."""
        seen = set()
        result = []
        pools = [self.suggested_recipes, self.profile.favorites, self.profile.liked_recipes,
                 self.profile.completed_recipes, [e.recipe for e in self.meal_plan.entries],
                 self.demo_recipes]
        pools.extend(f.recipes for f in self.profile.folders)
        for pool in pools:
            for recipe in pool:
                if recipe.id not in seen:
                    seen.add(recipe.id)
                    result.append(recipe)
        return result

    def find_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self.known_recipes() if r.id == recipe_id), None)

    async def aclose(self):
        await self.recipe_service.client.aclose()


def get_services(request: Request) -> AppServices:
    return request.app.state.services
