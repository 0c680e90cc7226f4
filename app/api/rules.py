from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from api.deps import get_db, raise_for_result
from core.errors import NotFoundError
from schemas.results import ActionResult
from schemas.rules import RuleOut, RulesOut
from services import actions
from services.brand_service import get_current_brand_id
from services.rule_service import get_rule, list_rules

router = APIRouter(prefix="/rules", tags=["Rules"])


@router.get("", response_model=RulesOut)
def read_rules(db: Session = Depends(get_db)):
    brand_id = get_current_brand_id(db)
    return RulesOut(rules=list_rules(db, brand_id) if brand_id else [])


@router.get("/{rule_id}", response_model=RuleOut)
def read_rule(rule_id: int, db: Session = Depends(get_db)):
    brand_id = get_current_brand_id(db)
    rule = get_rule(db, brand_id, rule_id) if brand_id else None
    if not rule:
        raise HTTPException(status_code=404, detail=NotFoundError.default_message)
    return rule


@router.post("", response_model=ActionResult, response_model_exclude_none=True, status_code=201)
def create(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    return raise_for_result(actions.create_rule(db, payload))


@router.patch("/{rule_id}", response_model=ActionResult, response_model_exclude_none=True)
def update(rule_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    return raise_for_result(actions.update_rule(db, rule_id, payload))


@router.post("/{rule_id}/toggle", response_model=ActionResult, response_model_exclude_none=True)
def toggle(rule_id: int, is_active: bool = Body(..., embed=True), db: Session = Depends(get_db)):
    return raise_for_result(actions.toggle_rule(db, rule_id, is_active))


@router.delete("/{rule_id}", status_code=204)
def remove(rule_id: int, db: Session = Depends(get_db)):
    raise_for_result(actions.delete_rule(db, rule_id))
    return None
