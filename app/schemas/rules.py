from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator
from pydantic_core import PydanticCustomError

from schemas.common import check_text


def _title(v: str) -> str:
    return check_text(
        v,
        max_len=100,
        min_msg="Rule title is required",
        max_msg="Title must be at most 100 characters",
    )


def _description(v: str) -> str:
    return check_text(
        v,
        min_len=10,
        max_len=500,
        min_msg="Description must be at least 10 characters",
        max_msg="Description must be at most 500 characters",
    )


def _example(v: str, label: str) -> str:
    return check_text(
        v,
        min_len=5,
        max_len=255,
        min_msg=f"{label} example must be at least 5 characters",
        max_msg=f"{label} example must be at most 255 characters",
    )


class RuleIn(BaseModel):
    title: str
    description: str
    do_example: str
    dont_example: str

    class Config:
        str_strip_whitespace = True

    @field_validator("title")
    @classmethod
    def _check_title(cls, v: str) -> str:
        return _title(v)

    @field_validator("description")
    @classmethod
    def _check_description(cls, v: str) -> str:
        return _description(v)

    @field_validator("do_example")
    @classmethod
    def _check_do(cls, v: str) -> str:
        return _example(v, "Do")

    @field_validator("dont_example")
    @classmethod
    def _check_dont(cls, v: str) -> str:
        return _example(v, "Don't")


class RuleUpdateIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    do_example: Optional[str] = None
    dont_example: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("title")
    @classmethod
    def _check_title(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _title(v)

    @field_validator("description")
    @classmethod
    def _check_description(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _description(v)

    @field_validator("do_example")
    @classmethod
    def _check_do(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _example(v, "Do")

    @field_validator("dont_example")
    @classmethod
    def _check_dont(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _example(v, "Don't")

    @model_validator(mode="after")
    def _not_empty(self) -> "RuleUpdateIn":
        if not self.changes():
            raise PydanticCustomError("empty_update", "Nothing to update")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class RuleToggleIn(BaseModel):
    is_active: bool


class RuleOut(BaseModel):
    id: int
    title: str
    description: str
    do_example: str
    dont_example: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RulesOut(BaseModel):
    rules: List[RuleOut]
