from fastapi import HTTPException

from db.session import SessionLocal
from schemas.results import ActionResult

ERROR_STATUS = {
    "validation": 422,
    "no_brand": 409,
    "already_exists": 409,
    "not_found": 404,
    "storage": 500,
}


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def raise_for_result(result: ActionResult) -> ActionResult:
    if result.success:
        return result
    raise HTTPException(status_code=ERROR_STATUS.get(result.error_code or "", 500), detail=result.error)
