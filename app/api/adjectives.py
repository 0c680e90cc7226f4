from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from api.deps import get_db, raise_for_result
from schemas.adjectives import AdjectivesOut
from schemas.results import ActionResult
from services import actions
from services.adjective_service import list_adjectives
from services.brand_service import get_current_brand_id

router = APIRouter(prefix="/adjectives", tags=["Adjectives"])


@router.get("", response_model=AdjectivesOut)
def read_adjectives(db: Session = Depends(get_db)):
    brand_id = get_current_brand_id(db)
    return AdjectivesOut(adjectives=list_adjectives(db, brand_id) if brand_id else [])


@router.put("", response_model=ActionResult, response_model_exclude_none=True)
def save(adjectives: List[Any] = Body([], embed=True), db: Session = Depends(get_db)):
    return raise_for_result(actions.update_adjectives(db, adjectives))
