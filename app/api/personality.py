from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from api.deps import get_db, raise_for_result
from schemas.personality import PersonalityOut, PersonalityQuestionsOut
from schemas.results import ActionResult
from services import actions
from services.brand_service import get_current_brand_id
from services.personality_service import list_personality, map_personality_with_questions

router = APIRouter(prefix="/personality", tags=["Personality"])


@router.get("", response_model=PersonalityOut)
def read_personality(db: Session = Depends(get_db)):
    brand_id = get_current_brand_id(db)
    answers = list_personality(db, brand_id) if brand_id else []
    return PersonalityOut(answers=answers)


@router.get("/questions", response_model=PersonalityQuestionsOut)
def read_questions(db: Session = Depends(get_db)):
    brand_id = get_current_brand_id(db)
    answers = list_personality(db, brand_id) if brand_id else []
    return PersonalityQuestionsOut(questions=map_personality_with_questions(answers))


@router.put("", response_model=ActionResult, response_model_exclude_none=True)
def save(answers: List[Any] = Body([], embed=True), db: Session = Depends(get_db)):
    return raise_for_result(actions.update_personality(db, answers))
