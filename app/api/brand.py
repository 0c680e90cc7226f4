from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from api.deps import get_db, raise_for_result
from core.errors import NoBrandError
from schemas.brand import BrandOut
from schemas.results import ActionResult
from services import actions
from services.brand_service import get_current_brand

router = APIRouter(prefix="/brand", tags=["Brand"])


@router.get("", response_model=BrandOut)
def read_brand(db: Session = Depends(get_db)):
    brand = get_current_brand(db)
    if not brand:
        raise HTTPException(status_code=404, detail=NoBrandError.default_message)
    return brand


@router.post("", response_model=ActionResult, response_model_exclude_none=True, status_code=201)
def setup(name: str = Body("", embed=True), db: Session = Depends(get_db)):
    return raise_for_result(actions.setup_brand(db, name))


@router.patch("", response_model=ActionResult, response_model_exclude_none=True)
def rename(name: str = Body("", embed=True), db: Session = Depends(get_db)):
    return raise_for_result(actions.update_brand_name(db, name))
