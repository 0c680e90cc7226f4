from datetime import datetime

from pydantic import BaseModel, field_validator

from schemas.common import check_text


class BrandIn(BaseModel):
    name: str

    class Config:
        str_strip_whitespace = True

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return check_text(
            v,
            max_len=100,
            min_msg="Brand name is required",
            max_msg="Brand name must be at most 100 characters",
        )


class BrandOut(BaseModel):
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True
