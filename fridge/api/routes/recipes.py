"""Recipe suggestion, search and favourite endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from fridge.api.services import AppServices, get_services
from fridge.domain.Recipe import Recipe
from fridge.logic.recipes.filtering import find_recipes_with_ingredient, sort_by_availability
from fridge.logic.voice.commands import recipe_speech_text

router = APIRouter(prefix="/api/recipes")
logger = logging.getLogger(__name__)


def _recipe_or_404(services: AppServices, recipe_id: str) -> Recipe:
    recipe = services.find_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


def _with_flags(services: AppServices, recipe: Recipe):
    data = recipe.to_dict()
    data['is_favorite'] = services.profile.is_favorite(recipe)
    return data


@router.get('/suggested')
def suggested(services: AppServices = Depends(get_services)):
    names = services.fridge.valid_ingredient_names()
    return [_with_flags(services, r) for r in sort_by_availability(services.suggested_recipes, names)]


@router.post('/refresh')
async def refresh(services: AppServices = Depends(get_services)):
    recipes = await services.refresh_suggestions()
    logger.info("Suggestions refreshed: %d recipes", len(recipes))
    return [_with_flags(services, r) for r in recipes]


@router.get('/search')
def search(ingredient: str = Query(..., min_length=1), services: AppServices = Depends(get_services)):
    ingredient = ingredient.strip()
    if not ingredient:
        raise HTTPException(status_code=422, detail="Ingredient cannot be blank")
    found = find_recipes_with_ingredient(services.known_recipes(), ingredient)
    return [_with_flags(services, r) for r in found]


@router.get('/favorites')
def favorites(services: AppServices = Depends(get_services)):
    return [r.to_dict() for r in services.profile.favorites]


@router.get('/reminders')
def reminders(services: AppServices = Depends(get_services)):
    """Favourite recipes that have not been cooked yet."""
    return [r.to_dict() for r in services.profile.remind_about_favorites()]


@router.get('/{recipe_id}')
def get_recipe(recipe_id: str, services: AppServices = Depends(get_services)):
    return _with_flags(services, _recipe_or_404(services, recipe_id))


@router.get('/{recipe_id}/speech')
def speech(recipe_id: str, services: AppServices = Depends(get_services)):
    return {"text": recipe_speech_text(_recipe_or_404(services, recipe_id))}


@router.post('/{recipe_id}/favorite')
def toggle_favorite(recipe_id: str, services: AppServices = Depends(get_services)):
    recipe = _recipe_or_404(services, recipe_id)
    return {"id": recipe.id, "is_favorite": services.profile.toggle_favorite(recipe)}


@router.post('/{recipe_id}/like')
def toggle_like(recipe_id: str, services: AppServices = Depends(get_services)):
    recipe = _recipe_or_404(services, recipe_id)
    return {"id": recipe.id, "is_liked": services.profile.toggle_liked(recipe)}
