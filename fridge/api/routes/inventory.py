"""Fridge inventory endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fridge.api.services import AppServices, get_services
from fridge.domain.Fridge import SortOption
from fridge.domain.FridgeItem import FridgeCategory, FridgeItem
from fridge.logic.inventory.analysis import compute_expiring_soon, compute_fridge_summary
from fridge.utilities.validators import FridgeItemInput

router = APIRouter(prefix="/api/fridge")
logger = logging.getLogger(__name__)


def _item_or_404(services: AppServices, item_id: str) -> FridgeItem:
    item = services.fridge.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.get('/items')
def list_items(category: Optional[FridgeCategory] = Query(default=None),
               sort: Optional[SortOption] = Query(default=None),
               services: AppServices = Depends(get_services)):
    fridge = services.fridge
    if category is not None:
        items = fridge.items_in(category, sort)
    elif sort is not None:
        items = fridge.sorted_items(sort)
    elif services.profile.preferences.auto_sort_by_expiry:
        items = fridge.sorted_items(SortOption.EXPIRY_ASC)
    else:
        items = fridge.get_items()
    if services.profile.preferences.hide_expired_items:
        items = [i for i in items if not i.is_expired()]
    return [i.to_dict() for i in items]


@router.post('/items', status_code=201)
def add_item(data: FridgeItemInput, services: AppServices = Depends(get_services)):
    if data.id and services.fridge.get(data.id) is not None:
        raise HTTPException(status_code=400, detail="Item with this id already exists")
    item = FridgeItem(data.name, data.category, data.expiration_date, data.quantity, id=data.id)
    services.fridge.add(item)
    logger.info("Added %s (%s) expiring %s", item.name, item.category.value, item.expiration_date)
    return item.to_dict()


@router.get('/items/{item_id}')
def get_item(item_id: str, services: AppServices = Depends(get_services)):
    return _item_or_404(services, item_id).to_dict()


@router.put('/items/{item_id}')
def update_item(item_id: str, data: FridgeItemInput, services: AppServices = Depends(get_services)):
    _item_or_404(services, item_id)
    item = FridgeItem(data.name, data.category, data.expiration_date, data.quantity, id=item_id)
    services.fridge.update(item)
    return item.to_dict()


@router.delete('/items/{item_id}')
def delete_item(item_id: str, services: AppServices = Depends(get_services)):
    item = services.fridge.remove(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"status": "deleted", "id": item_id}


@router.post('/items/{item_id}/waste')
def waste_item(item_id: str, services: AppServices = Depends(get_services)):
    item = services.fridge.mark_item_as_wasted(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"status": "wasted", "item": item.to_dict()}


@router.post('/remove-expired')
def remove_expired(services: AppServices = Depends(get_services)):
    removed = services.fridge.remove_expired()
    return {"removed": [i.to_dict() for i in removed], "count": len(removed)}


@router.post('/waste-expired')
def waste_expired(services: AppServices = Depends(get_services)):
    wasted = services.fridge.mark_expired_as_wasted()
    return {"wasted": [i.to_dict() for i in wasted], "count": len(wasted)}


@router.get('/summary')
def summary(services: AppServices = Depends(get_services)):
    data = compute_fridge_summary(services.fridge)
    data['waste'] = {c.value: n for c, n in services.fridge.waste_statistics().items()}
    return data


@router.get('/attention')
def attention(window: Optional[int] = Query(default=None, ge=0),
              services: AppServices = Depends(get_services)):
    """Items not yet expired that expire within the window (profile notification days by default)."""
    if window is None:
        window = services.profile.preferences.expiry_notification_days
    return compute_expiring_soon(services.fridge, window=window)
