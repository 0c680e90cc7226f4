from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from core.constants import ADJECTIVES_COUNT
from schemas.common import check_text


class AdjectiveIn(BaseModel):
    name: str
    description: str
    subtle_example: str
    obvious_example: str
    intense_example: str

    class Config:
        str_strip_whitespace = True

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return check_text(
            v,
            max_len=50,
            min_msg="Adjective is required",
            max_msg="Adjective must be at most 50 characters",
        )

    @field_validator("description")
    @classmethod
    def _description(cls, v: str) -> str:
        return check_text(
            v,
            max_len=255,
            min_msg="Description is required",
            max_msg="Description must be at most 255 characters",
        )

    @field_validator("subtle_example", "obvious_example", "intense_example")
    @classmethod
    def _example(cls, v: str, info) -> str:
        label = info.field_name.split("_", 1)[0].capitalize()
        return check_text(
            v,
            max_len=255,
            min_msg=f"{label} example is required",
            max_msg=f"{label} example must be at most 255 characters",
        )


class AdjectivesIn(BaseModel):
    adjectives: List[AdjectiveIn]

    @field_validator("adjectives")
    @classmethod
    def _exact_count(cls, v: List[AdjectiveIn]) -> List[AdjectiveIn]:
        if len(v) != ADJECTIVES_COUNT:
            raise PydanticCustomError("adjectives_count", f"Must have exactly {ADJECTIVES_COUNT} adjectives")
        return v


class AdjectiveOut(BaseModel):
    id: int
    name: str
    description: str
    subtle_example: str
    obvious_example: str
    intense_example: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AdjectivesOut(BaseModel):
    adjectives: List[AdjectiveOut]
