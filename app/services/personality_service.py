import logging

from sqlalchemy.orm import Session

from core.constants import PERSONALITY_QUESTIONS
from db.session import unit_of_work
from models.orm_personality import PersonalityEntity
from schemas.personality import PersonalityIn, PersonalityQuestionOut

logger = logging.getLogger(__name__)


def list_personality(db: Session, brand_id: int) -> list[PersonalityEntity]:
    return (
        db.query(PersonalityEntity)
        .filter(PersonalityEntity.brand_id == brand_id)
        .order_by(PersonalityEntity.question_index.asc())
        .all()
    )


def replace_personality(db: Session, brand_id: int, data: PersonalityIn) -> list[PersonalityEntity]:
    """Swap the brand's answers for the submitted set in one transaction."""
    rows = [
        PersonalityEntity(brand_id=brand_id, question_index=a.question_index, answer=a.answer)
        for a in data.answers
    ]

    with unit_of_work(db):
        (
            db.query(PersonalityEntity)
            .filter(PersonalityEntity.brand_id == brand_id)
            .delete(synchronize_session=False)
        )
        db.add_all(rows)

    logger.info("Replaced personality answers for brand %s (%d rows)", brand_id, len(rows))
    return rows


def map_personality_with_questions(answers: list[PersonalityEntity]) -> list[PersonalityQuestionOut]:
    by_index = {a.question_index: a.answer for a in answers}

    out: list[PersonalityQuestionOut] = []
    for idx, question in enumerate(PERSONALITY_QUESTIONS):
        answer = by_index.get(idx) or ""
        out.append(
            PersonalityQuestionOut(
                question_index=idx,
                question=question,
                answer=answer,
                is_answered=bool(answer),
            )
        )
    return out
