from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def check_text(
    value: str,
    *,
    min_msg: str,
    max_len: int | None = None,
    max_msg: str | None = None,
    min_len: int = 1,
) -> str:
    # value is already stripped by str_strip_whitespace
    if len(value) < min_len:
        raise PydanticCustomError("text_too_short", min_msg)
    if max_len is not None and len(value) > max_len:
        raise PydanticCustomError("text_too_long", max_msg)
    return value


def first_error_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"

    err = errors[0]
    if err.get("type") == "missing":
        field = next((str(p) for p in reversed(err.get("loc", ())) if isinstance(p, str)), "value")
        return f"{field} is required"
    return err.get("msg") or "Invalid input"


def validate_input(model: type[M], data: Any) -> M:
    """Validate raw input, reporting only the first failing rule."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e)) from e
