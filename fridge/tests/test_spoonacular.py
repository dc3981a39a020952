import asyncio
import json
import random
import unittest

import httpx

from fridge.domain.UserProfile import DietaryPreference
from fridge.infra.spoonacular import (
    PLACEHOLDER_INSTRUCTIONS, RecipeService, RecipeServiceError, SpoonacularClient, diet_params
)

BASE_URL = "https://api.test/recipes"

SEARCH_RESULTS = [
    {
        "id": 1, "title": "Egg Fried Rice", "image": "https://img.test/1.jpg",
        "usedIngredients": [{"original": "2 eggs"}],
        "missedIngredients": [{"original": "1 cup rice"}],
    },
    {
        "id": 2, "title": "Chicken Soup", "image": "https://img.test/2.jpg",
        "usedIngredients": [{"original": "1 lb chicken"}],
        "missedIngredients": [{"original": "2 carrots, diced"}],
    },
]


def _client(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SpoonacularClient(api_key="test-key", base_url=BASE_URL, http_client=http)


class TestSpoonacularClient(unittest.TestCase):

    def test_find_by_ingredients_query(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=SEARCH_RESULTS)

        client = _client(handler)
        data = asyncio.run(client.find_by_ingredients(["milk", "eggs"], number=15, diet="vegan"))
        self.assertEqual(len(data), 2)
        params = seen[0].url.params
        self.assertEqual(seen[0].url.path, "/recipes/findByIngredients")
        self.assertEqual(params["ingredients"], "milk,eggs")
        self.assertEqual(params["apiKey"], "test-key")
        self.assertEqual(params["number"], "15")
        self.assertEqual(params["diet"], "vegan")
        self.assertNotIn("intolerances", params)

    def test_http_error_status(self):
        client = _client(lambda request: httpx.Response(401, json={"message": "Invalid API key"}))
        with self.assertRaises(RecipeServiceError) as ctx:
            asyncio.run(client.find_by_ingredients(["milk"]))
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertIn("Invalid API key", str(ctx.exception))

    def test_object_instead_of_list(self):
        client = _client(lambda request: httpx.Response(200, json={"status": "failure", "message": "quota"}))
        with self.assertRaises(RecipeServiceError):
            asyncio.run(client.find_by_ingredients(["milk"]))

    def test_invalid_json(self):
        client = _client(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        with self.assertRaises(RecipeServiceError):
            asyncio.run(client.find_by_ingredients(["milk"]))

    def test_get_information(self):
        client = _client(lambda request: httpx.Response(200, json={"id": 5, "readyInMinutes": 25}))
        self.assertEqual(asyncio.run(client.get_information(5))["readyInMinutes"], 25)

    def test_diet_params(self):
        self.assertEqual(diet_params(DietaryPreference.DAIRY_FREE), {"intolerances": "dairy"})
        self.assertEqual(diet_params(DietaryPreference.GLUTEN_FREE), {"diet": "gluten-free"})
        self.assertEqual(diet_params(DietaryPreference.KETO), {"diet": "ketogenic"})
        self.assertEqual(diet_params(DietaryPreference.PESCATARIAN), {"diet": "pescetarian"})
        self.assertEqual(diet_params(DietaryPreference.NONE), {})


class TestRecipeService(unittest.TestCase):

    def test_fetch_recipes_maps_results_and_details(self):
        searches = []

        def handler(request):
            path = request.url.path
            if path.endswith("/findByIngredients"):
                searches.append(request)
                return httpx.Response(200, json=SEARCH_RESULTS)
            if path.endswith("/1/information"):
                return httpx.Response(200, json={
                    "readyInMinutes": 10,
                    "analyzedInstructions": [{"steps": [{"step": "Scramble eggs."}, {"step": "Add rice."}]}],
                })
            return httpx.Response(500, text="server error")

        service = RecipeService(_client(handler), rng=random.Random(3))
        recipes = asyncio.run(service.fetch_recipes(["eggs", "chicken"], DietaryPreference.DAIRY_FREE, 45))

        params = searches[0].url.params
        self.assertTrue(15 <= int(params["number"]) <= 25)
        self.assertIn(params["ranking"], ("1", "2"))
        self.assertTrue(0 <= int(params["offset"]) <= 50)
        self.assertEqual(params["intolerances"], "dairy")
        self.assertEqual(params["maxReadyTime"], "45")

        by_id = {r.spoonacular_id: r for r in recipes}
        self.assertEqual(set(by_id), {1, 2})
        rice = by_id[1]
        self.assertEqual(rice.name, "Egg Fried Rice")
        self.assertEqual(rice.cooking_time, 10)
        self.assertEqual(rice.difficulty, "Quick & Easy")
        self.assertEqual(rice.instructions, ["Scramble eggs.", "Add rice."])
        self.assertEqual(rice.used_ingredients, ["2 eggs"])
        self.assertEqual(rice.used_ingredients_display, ["eggs"])
        self.assertEqual(rice.ingredients[0].quantity, 2.0)

        soup = by_id[2]
        self.assertEqual(soup.cooking_time, 30)
        self.assertEqual(soup.instructions, PLACEHOLDER_INSTRUCTIONS)
        self.assertEqual(soup.missed_ingredients_display, ["carrots"])

    def test_at_most_ten_recipes(self):
        many = [dict(SEARCH_RESULTS[0], id=n, title=f"Recipe {n}") for n in range(20)]

        def handler(request):
            if request.url.path.endswith("/findByIngredients"):
                return httpx.Response(200, content=json.dumps(many).encode())
            return httpx.Response(200, json={"readyInMinutes": 40})

        recipes = asyncio.run(RecipeService(_client(handler)).fetch_recipes(["eggs"]))
        self.assertEqual(len(recipes), 10)
        self.assertTrue(all(r.difficulty == "Moderate" for r in recipes))

    def test_search_failure_returns_none(self):
        service = RecipeService(_client(lambda request: httpx.Response(402, json={"message": "quota"})))
        with self.assertLogs("fridge.infra.spoonacular", level="WARNING"):
            self.assertIsNone(asyncio.run(service.fetch_recipes(["eggs"])))

    def test_network_failure_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = RecipeService(_client(handler))
        self.assertIsNone(asyncio.run(service.fetch_recipes(["eggs"])))


if __name__ == '__main__':
    unittest.main()
