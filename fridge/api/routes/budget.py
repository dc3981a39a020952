from fastapi import APIRouter, Depends, HTTPException

from fridge.api.services import AppServices, get_services
from fridge.utilities.validators import BudgetEntryInput, MonthlyBudgetInput

router = APIRouter(prefix="/api/budget")


@router.get('')
def get_budget(services: AppServices = Depends(get_services)):
    return services.budget.summary()


@router.post('/entries', status_code=201)
def add_entry(data: BudgetEntryInput, services: AppServices = Depends(get_services)):
    entry = services.budget.add_entry(data.amount, data.category, data.note, data.date)
    return entry.to_dict()


@router.delete('/entries/{entry_id}')
def delete_entry(entry_id: str, services: AppServices = Depends(get_services)):
    if not services.budget.remove_entry(entry_id):
        raise HTTPException(status_code=404, detail="Budget entry not found")
    return {"status": "deleted", "id": entry_id}


@router.put('/monthly')
def set_monthly(data: MonthlyBudgetInput, services: AppServices = Depends(get_services)):
    services.budget.set_monthly_budget(data.amount)
    return services.budget.summary()
