from datetime import datetime
from typing import List

from pydantic import BaseModel, StrictInt, field_validator
from pydantic_core import PydanticCustomError

from core.constants import QUESTIONS_COUNT
from schemas.common import check_text


class PersonalityAnswerIn(BaseModel):
    question_index: StrictInt
    answer: str

    class Config:
        str_strip_whitespace = True

    @field_validator("question_index")
    @classmethod
    def _index_in_range(cls, v: int) -> int:
        if v < 0 or v >= QUESTIONS_COUNT:
            raise PydanticCustomError(
                "question_index_range",
                f"Question index must be between 0 and {QUESTIONS_COUNT - 1}",
            )
        return v

    @field_validator("answer")
    @classmethod
    def _answer(cls, v: str) -> str:
        return check_text(v, min_msg="Answer is required")


class PersonalityIn(BaseModel):
    answers: List[PersonalityAnswerIn]

    @field_validator("answers")
    @classmethod
    def _complete_set(cls, answers: List[PersonalityAnswerIn]) -> List[PersonalityAnswerIn]:
        if len(answers) != QUESTIONS_COUNT:
            raise PydanticCustomError("answers_count", f"Must have exactly {QUESTIONS_COUNT} answers")

        indexes = {a.question_index for a in answers}
        if indexes != set(range(QUESTIONS_COUNT)):
            raise PydanticCustomError(
                "answers_indexes",
                f"Must have answers for all {QUESTIONS_COUNT} questions (indexes 0-{QUESTIONS_COUNT - 1})",
            )
        return sorted(answers, key=lambda a: a.question_index)


class PersonalityAnswerOut(BaseModel):
    id: int
    question_index: int
    answer: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PersonalityQuestionOut(BaseModel):
    question_index: int
    question: str
    answer: str
    is_answered: bool


class PersonalityQuestionsOut(BaseModel):
    questions: List[PersonalityQuestionOut]


class PersonalityOut(BaseModel):
    answers: List[PersonalityAnswerOut]
