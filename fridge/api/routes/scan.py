"""Label text and barcode scanning endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from fridge.api.services import AppServices, get_services
from fridge.logic.scanning.expiry_date import first_expiration_date, guess_product_name, token_to_date
from fridge.utilities.validators import ScanTextInput

router = APIRouter(prefix="/api/scan")


@router.post('/text')
def scan_text(data: ScanTextInput):
    token = first_expiration_date(data.lines)
    return {
        "expiration_token": token,
        "expiration_date": token_to_date(token).isoformat() if token else None,
        "product_name": guess_product_name(data.lines),
    }


@router.get('/barcode/{code}')
def scan_barcode(code: str, services: AppServices = Depends(get_services)):
    guess = services.catalog.lookup(code)
    if guess is None:
        raise HTTPException(status_code=404, detail="No product guess for this barcode")
    return dict(guess.to_dict(), barcode=code)
