from typing import Optional

from pydantic import BaseModel

from schemas.brand import BrandOut
from schemas.rules import RuleOut


class ActionResult(BaseModel):
    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None

    brand: Optional[BrandOut] = None
    rule: Optional[RuleOut] = None

    @classmethod
    def ok(cls, **payload) -> "ActionResult":
        return cls(success=True, **payload)

    @classmethod
    def fail(cls, error: str, code: str) -> "ActionResult":
        return cls(success=False, error=error, error_code=code)
