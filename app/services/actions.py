"""
Entry points used by the API layer.

Every mutation resolves the brand, validates its input and then calls the
data-access services. Failures never escape as exceptions: they come back as
an ActionResult carrying one human-readable message.
"""
import logging
from functools import wraps
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.errors import BrandServiceError, StorageUnavailableError
from schemas.adjectives import AdjectivesIn
from schemas.brand import BrandIn, BrandOut
from schemas.common import validate_input
from schemas.personality import PersonalityIn
from schemas.results import ActionResult
from schemas.rules import RuleIn, RuleOut, RuleToggleIn, RuleUpdateIn
from services import adjective_service, brand_service, personality_service, rule_service
from services.dashboard_service import get_brand_dashboard_data  # noqa: F401  re-exported entry point

logger = logging.getLogger(__name__)


def action(failure_message: str) -> Callable:
    def decorator(fn: Callable[..., ActionResult]) -> Callable[..., ActionResult]:
        @wraps(fn)
        def wrapper(db: Session, *args: Any, **kwargs: Any) -> ActionResult:
            try:
                return fn(db, *args, **kwargs)
            except StorageUnavailableError:
                logger.exception("%s: storage unavailable", fn.__name__)
                db.rollback()
                return ActionResult.fail(failure_message, StorageUnavailableError.code)
            except BrandServiceError as e:
                logger.info("%s rejected: %s", fn.__name__, e.message)
                return ActionResult.fail(e.message, e.code)
            except Exception:
                logger.exception("%s failed", fn.__name__)
                db.rollback()
                return ActionResult.fail(failure_message, StorageUnavailableError.code)

        return wrapper

    return decorator


@action("An unexpected error occurred. Please try again.")
def setup_brand(db: Session, name: str) -> ActionResult:
    brand_service.require_no_brand(db)
    data = validate_input(BrandIn, {"name": name})
    brand = brand_service.create_brand(db, data)
    return ActionResult.ok(brand=BrandOut.model_validate(brand))


@action("Failed to update brand name. Please try again.")
def update_brand_name(db: Session, name: str) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(BrandIn, {"name": name})
    brand = brand_service.update_brand_name(db, brand_id, data)
    return ActionResult.ok(brand=BrandOut.model_validate(brand))


@action("Failed to update personality. Please try again.")
def update_personality(db: Session, answers: list) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(PersonalityIn, {"answers": answers})
    personality_service.replace_personality(db, brand_id, data)
    return ActionResult.ok()


@action("Failed to update adjectives. Please try again.")
def update_adjectives(db: Session, adjectives: list) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(AdjectivesIn, {"adjectives": adjectives})
    adjective_service.replace_adjectives(db, brand_id, data)
    return ActionResult.ok()


@action("Failed to create rule. Please try again.")
def create_rule(db: Session, rule: dict) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(RuleIn, rule)
    created = rule_service.create_rule(db, brand_id, data)
    return ActionResult.ok(rule=RuleOut.model_validate(created))


@action("Failed to update rule status. Please try again.")
def toggle_rule(db: Session, rule_id: int, is_active: bool) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(RuleToggleIn, {"is_active": is_active})
    updated = rule_service.toggle_rule(db, brand_id, rule_id, data.is_active)
    return ActionResult.ok(rule=RuleOut.model_validate(updated))


@action("Failed to update rule. Please try again.")
def update_rule(db: Session, rule_id: int, fields: dict) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    data = validate_input(RuleUpdateIn, fields)
    updated = rule_service.update_rule(db, brand_id, rule_id, data)
    return ActionResult.ok(rule=RuleOut.model_validate(updated))


@action("Failed to delete rule. Please try again.")
def delete_rule(db: Session, rule_id: int) -> ActionResult:
    brand_id = brand_service.require_brand_id(db)
    rule_service.delete_rule(db, brand_id, rule_id)
    return ActionResult.ok()
