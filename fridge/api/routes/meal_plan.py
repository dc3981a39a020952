from typing import Optional
from datetime import date as _date

from fastapi import APIRouter, Depends, HTTPException, Query

from fridge.api.services import AppServices, get_services
from fridge.utilities.validators import MealPlanInput

router = APIRouter(prefix="/api/meal-plan")


@router.get('')
def list_entries(on: Optional[_date] = Query(default=None, alias="date"),
                 services: AppServices = Depends(get_services)):
    plan = services.meal_plan
    entries = plan.for_date(on) if on is not None else plan.entries
    return [e.to_dict() for e in entries]


@router.post('', status_code=201)
def add_entry(data: MealPlanInput, services: AppServices = Depends(get_services)):
    recipe = services.find_recipe(data.recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return services.meal_plan.add(recipe, data.date).to_dict()


@router.get('/upcoming')
def upcoming(services: AppServices = Depends(get_services)):
    return [e.to_dict() for e in services.meal_plan.upcoming()]


@router.get('/completed')
def completed(services: AppServices = Depends(get_services)):
    return [e.to_dict() for e in services.meal_plan.completed()]


@router.post('/{entry_id}/complete')
def complete(entry_id: str, services: AppServices = Depends(get_services)):
    entry = services.meal_plan.mark_completed(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    return entry.to_dict()


@router.delete('/{entry_id}')
def delete_entry(entry_id: str, services: AppServices = Depends(get_services)):
    if not services.meal_plan.remove(entry_id):
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    return {"status": "deleted", "id": entry_id}
