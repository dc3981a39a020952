"""User profile, preferences, allergies and recipe folders."""
from fastapi import APIRouter, Depends, HTTPException

from fridge.api.services import AppServices, get_services
from fridge.utilities.validators import AllergyInput, FolderInput, PreferencesInput, ProfileInput

router = APIRouter(prefix="/api/profile")

_PERSONALIZATION_FIELDS = ('dietary_preference', 'cuisine_preferences', 'difficulty_preference',
                           'max_cooking_time', 'exclude_allergies')


@router.get('')
def get_profile(services: AppServices = Depends(get_services)):
    return services.profile.to_dict()


@router.put('')
def update_profile(data: ProfileInput, services: AppServices = Depends(get_services)):
    services.profile.update(data.name, data.email, data.birth_date)
    return services.profile.to_dict()


@router.put('/preferences')
def update_preferences(data: PreferencesInput, services: AppServices = Depends(get_services)):
    preferences = services.profile.preferences
    personalization = preferences.recipe_personalization
    changes = data.model_dump(exclude_none=True, exclude={'clear_max_cooking_time'})
    for field, value in changes.items():
        target = personalization if field in _PERSONALIZATION_FIELDS else preferences
        setattr(target, field, value)
    if data.clear_max_cooking_time:
        personalization.max_cooking_time = None
    services.fridge.notification_days = preferences.expiry_notification_days
    return preferences.to_dict()


@router.post('/allergies', status_code=201)
def add_allergy(data: AllergyInput, services: AppServices = Depends(get_services)):
    return services.profile.add_allergy(data.name, data.severity).to_dict()


@router.delete('/allergies/{index}')
def remove_allergy(index: int, services: AppServices = Depends(get_services)):
    try:
        services.profile.remove_allergy(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Allergy not found")
    return [a.to_dict() for a in services.profile.allergies]


@router.get('/folders')
def list_folders(services: AppServices = Depends(get_services)):
    return [f.to_dict() for f in services.profile.folders]


@router.post('/folders', status_code=201)
def create_folder(data: FolderInput, services: AppServices = Depends(get_services)):
    return services.profile.create_folder(data.name.strip()).to_dict()


def _check_folder(services: AppServices, index: int):
    if not 0 <= index < len(services.profile.folders):
        raise HTTPException(status_code=404, detail="Folder not found")


@router.delete('/folders/{index}')
def delete_folder(index: int, services: AppServices = Depends(get_services)):
    _check_folder(services, index)
    services.profile.delete_folder(index)
    return [f.to_dict() for f in services.profile.folders]


@router.post('/folders/{index}/recipes/{recipe_id}')
def add_recipe_to_folder(index: int, recipe_id: str, services: AppServices = Depends(get_services)):
    _check_folder(services, index)
    recipe = services.find_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    added = services.profile.add_recipe_to_folder(recipe, index)
    return {"added": added, "folder": services.profile.folders[index].to_dict()}


@router.delete('/folders/{index}/recipes/{recipe_id}')
def remove_recipe_from_folder(index: int, recipe_id: str, services: AppServices = Depends(get_services)):
    _check_folder(services, index)
    services.profile.remove_recipe_from_folder(recipe_id, index)
    return services.profile.folders[index].to_dict()
