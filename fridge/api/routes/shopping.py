from fastapi import APIRouter, Depends, HTTPException

from fridge.api.services import AppServices, get_services
from fridge.utilities.validators import ShoppingItemInput

router = APIRouter(prefix="/api/shopping-list")


@router.get('')
def list_items(services: AppServices = Depends(get_services)):
    return services.shopping_list.to_dict()


@router.post('', status_code=201)
def add_item(data: ShoppingItemInput, services: AppServices = Depends(get_services)):
    return services.shopping_list.add(data.name, data.quantity, data.note).to_dict()


@router.post('/clear-completed')
def clear_completed(services: AppServices = Depends(get_services)):
    return {"removed": services.shopping_list.clear_completed()}


@router.post('/from-recipe/{recipe_id}')
def add_from_recipe(recipe_id: str, services: AppServices = Depends(get_services)):
    """Put the recipe's missing ingredients on the list, skipping ones already there."""
    recipe = services.find_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    added = services.shopping_list.add_missing_from_recipe(recipe)
    return {"added": [i.to_dict() for i in added], "count": len(added)}


@router.post('/{item_id}/toggle')
def toggle_item(item_id: str, services: AppServices = Depends(get_services)):
    item = services.shopping_list.toggle(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item.to_dict()


@router.delete('/{item_id}')
def delete_item(item_id: str, services: AppServices = Depends(get_services)):
    if not services.shopping_list.remove(item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    return {"status": "deleted", "id": item_id}
