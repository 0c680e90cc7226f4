import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from core.errors import NotFoundError
from db.session import unit_of_work
from models.orm_rule import RuleEntity
from schemas.rules import RuleIn, RuleUpdateIn

logger = logging.getLogger(__name__)


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def list_rules(db: Session, brand_id: int) -> list[RuleEntity]:
    return (
        db.query(RuleEntity)
        .filter(RuleEntity.brand_id == brand_id)
        .order_by(RuleEntity.created_at.desc(), RuleEntity.id.desc())
        .all()
    )


def get_rule(db: Session, brand_id: int, rule_id: int) -> RuleEntity | None:
    return (
        db.query(RuleEntity)
        .filter(RuleEntity.brand_id == brand_id, RuleEntity.id == rule_id)
        .first()
    )


def _owned_rule(db: Session, brand_id: int, rule_id: int) -> RuleEntity:
    rule = get_rule(db, brand_id, rule_id)
    if not rule:
        raise NotFoundError()
    return rule


def create_rule(db: Session, brand_id: int, data: RuleIn) -> RuleEntity:
    rule = RuleEntity(
        brand_id=brand_id,
        title=data.title,
        description=data.description,
        do_example=data.do_example,
        dont_example=data.dont_example,
        is_active=True,
    )
    with unit_of_work(db):
        db.add(rule)
    db.refresh(rule)
    logger.info("Rule %s created for brand %s", rule.id, brand_id)
    return rule


def toggle_rule(db: Session, brand_id: int, rule_id: int, is_active: bool) -> RuleEntity:
    rule = _owned_rule(db, brand_id, rule_id)
    with unit_of_work(db):
        rule.is_active = bool(is_active)
        rule.updated_at = _now_utc()
    db.refresh(rule)
    return rule


def update_rule(db: Session, brand_id: int, rule_id: int, data: RuleUpdateIn) -> RuleEntity:
    rule = _owned_rule(db, brand_id, rule_id)
    with unit_of_work(db):
        for field, value in data.changes().items():
            setattr(rule, field, value)
        rule.updated_at = _now_utc()
    db.refresh(rule)
    return rule


def delete_rule(db: Session, brand_id: int, rule_id: int) -> None:
    rule = _owned_rule(db, brand_id, rule_id)
    with unit_of_work(db):
        db.delete(rule)
    logger.info("Rule %s deleted for brand %s", rule_id, brand_id)
