"""Spoonacular recipe API client and the recipe service built on it.

Only two endpoints are used:
  GET {base}/findByIngredients  -> JSON array of {id, title, image, usedIngredients, missedIngredients}
  GET {base}/{id}/information   -> JSON object with readyInMinutes and analyzedInstructions
"""
from __future__ import annotations
import asyncio
import logging
import random
from typing import Any, Dict, List, Optional, Sequence

import httpx

from fridge.domain.Recipe import Recipe, RecipeIngredient
from fridge.domain.UserProfile import DietaryPreference
from fridge.logic.recipes.ingredients import (
    clean_ingredient_for_display, difficulty_label, extract_ingredient_info
)
from fridge.utilities.config import RECIPE_REQUEST_TIMEOUT, SPOONACULAR_API_KEY, SPOONACULAR_BASE_URL
from fridge.utilities.constants import DEFAULT_COOKING_MINUTES, MAX_RECIPES_PER_FETCH

logger = logging.getLogger(__name__)

__all__ = ["RecipeServiceError", "SpoonacularClient", "RecipeService", "diet_params"]

PLACEHOLDER_INSTRUCTIONS = [
    "No detailed instructions available",
    "Use the ingredients listed to prepare this recipe",
]


class RecipeServiceError(Exception):
    """Network, HTTP status or payload problem talking to Spoonacular."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def diet_params(preference: DietaryPreference) -> Dict[str, str]:
    """Query parameters expressing a dietary preference."""
    preference = DietaryPreference(preference)
    if preference == DietaryPreference.DAIRY_FREE:
        return {"intolerances": "dairy"}
    diet = {
        DietaryPreference.VEGETARIAN: "vegetarian",
        DietaryPreference.VEGAN: "vegan",
        DietaryPreference.GLUTEN_FREE: "gluten-free",
        DietaryPreference.KETO: "ketogenic",
        DietaryPreference.PALEO: "paleo",
        DietaryPreference.PESCATARIAN: "pescetarian",
    }.get(preference)
    return {"diet": diet} if diet else {}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text[:200]


class SpoonacularClient:
    def __init__(self, api_key: str = SPOONACULAR_API_KEY, base_url: str = SPOONACULAR_BASE_URL,
                 http_client: Optional[httpx.AsyncClient] = None, timeout: float = RECIPE_REQUEST_TIMEOUT):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self):
        await self._http.aclose()

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        query = dict(params, apiKey=self.api_key)
        response = await self._http.get(f"{self.base_url}{path}", params=query)
        if response.status_code != 200:
            raise RecipeServiceError(
                f"Spoonacular {path} returned HTTP {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise RecipeServiceError(f"Spoonacular {path} returned invalid JSON") from e

    async def find_by_ingredients(self, ingredients: Sequence[str], number: int = 10, ranking: int = 1,
                                  offset: int = 0, diet: Optional[str] = None,
                                  intolerances: Optional[str] = None,
                                  max_ready_time: Optional[int] = None) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {
            "ingredients": ",".join(ingredients),
            "number": number,
            "ranking": ranking,
            "offset": offset,
        }
        if diet:
            params["diet"] = diet
        if intolerances:
            params["intolerances"] = intolerances
        if max_ready_time is not None:
            params["maxReadyTime"] = max_ready_time

        data = await self._get_json("/findByIngredients", params)
        if isinstance(data, dict):
            raise RecipeServiceError(f"Expected a list of recipes, got an object: {data.get('message', data)}")
        if not isinstance(data, list):
            raise RecipeServiceError("Expected a list of recipes")
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry or "title" not in entry:
                raise RecipeServiceError(f"Malformed recipe entry: {entry!r}")
        return data

    async def get_information(self, recipe_id: int) -> Dict[str, Any]:
        data = await self._get_json(f"/{recipe_id}/information", {})
        if not isinstance(data, dict):
            raise RecipeServiceError("Expected a recipe information object")
        if "message" in data and "readyInMinutes" not in data:
            raise RecipeServiceError(f"Spoonacular error: {data['message']}")
        return data


def _original_names(entries: Any) -> List[str]:
    names = []
    for entry in entries or []:
        if isinstance(entry, dict):
            text = entry.get("original") or entry.get("name")
            if text:
                names.append(str(text))
    return names


def _instructions(details: Optional[Dict[str, Any]]) -> List[str]:
    if not details:
        return PLACEHOLDER_INSTRUCTIONS[:]
    blocks = details.get("analyzedInstructions") or []
    if not blocks:
        return PLACEHOLDER_INSTRUCTIONS[:]
    steps = [s.get("step", "") for s in blocks[0].get("steps", []) if s.get("step")]
    return steps or PLACEHOLDER_INSTRUCTIONS[:]


class RecipeService:
    def __init__(self, client: SpoonacularClient, rng: Optional[random.Random] = None,
                 max_recipes: int = MAX_RECIPES_PER_FETCH):
        self.client = client
        self._rng = rng or random.Random()
        self.max_recipes = max_recipes

    async def fetch_recipes(self, ingredients: Sequence[str],
                            dietary_preference: DietaryPreference = DietaryPreference.NONE,
                            max_cooking_time: Optional[int] = None) -> Optional[List[Recipe]]:
        """Search by ingredients and enrich each hit with its details.

        Results are varied between calls (random page size, ranking and offset,
        then a shuffle). Returns None when the search itself fails.
        """
        query = {
            "number": self._rng.randint(15, 25),
            "ranking": self._rng.choice((1, 2)),
            "offset": self._rng.randint(0, 50),
            "max_ready_time": max_cooking_time,
        }
        query.update(diet_params(dietary_preference))
        logger.info("Searching recipes with ingredients: %s", ", ".join(ingredients))
        try:
            results = await self.client.find_by_ingredients(ingredients, **query)
        except (RecipeServiceError, httpx.HTTPError) as e:
            logger.warning("Recipe search failed: %s", e)
            return None

        chosen = list(results)
        self._rng.shuffle(chosen)
        chosen = chosen[: self.max_recipes]
        details = await asyncio.gather(*(self._details_or_none(r["id"]) for r in chosen))
        recipes = [self._to_recipe(r, d) for r, d in zip(chosen, details)]
        logger.info("Fetched %d recipes", len(recipes))
        return recipes

    async def _details_or_none(self, recipe_id: int) -> Optional[Dict[str, Any]]:
        try:
            return await self.client.get_information(recipe_id)
        except (RecipeServiceError, httpx.HTTPError) as e:
            logger.warning("Details fetch for recipe %s failed: %s", recipe_id, e)
            return None

    @staticmethod
    def _to_recipe(result: Dict[str, Any], details: Optional[Dict[str, Any]]) -> Recipe:
        used = _original_names(result.get("usedIngredients"))
        missed = _original_names(result.get("missedIngredients"))
        ingredients = [RecipeIngredient(*extract_ingredient_info(text)) for text in used + missed]
        minutes = DEFAULT_COOKING_MINUTES
        if details and isinstance(details.get("readyInMinutes"), int):
            minutes = details["readyInMinutes"]
        return Recipe(
            name=result.get("title", ""),
            image_url=result.get("image", ""),
            used_ingredients=used,
            missed_ingredients=missed,
            used_ingredients_display=[clean_ingredient_for_display(i) for i in used],
            missed_ingredients_display=[clean_ingredient_for_display(i) for i in missed],
            ingredients=ingredients,
            cooking_time=minutes,
            difficulty=difficulty_label(minutes),
            instructions=_instructions(details),
            spoonacular_id=result.get("id"),
        )
