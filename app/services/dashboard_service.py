import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.constants import ADJECTIVES_COUNT, QUESTIONS_COUNT
from models.orm_adjective import AdjectiveEntity
from models.orm_personality import PersonalityEntity
from models.orm_rule import RuleEntity
from schemas.adjectives import AdjectiveOut
from schemas.brand import BrandOut
from schemas.dashboard import DashboardOut, DashboardStats
from schemas.personality import PersonalityAnswerOut
from schemas.rules import RuleOut
from services.adjective_service import list_adjectives
from services.brand_service import get_current_brand
from services.personality_service import list_personality
from services.rule_service import list_rules

logger = logging.getLogger(__name__)


def compute_stats(
    personality: list[PersonalityEntity],
    adjectives: list[AdjectiveEntity],
    rules: list[RuleEntity],
) -> DashboardStats:
    personality_completion = len(personality)
    adjectives_completion = len(adjectives)
    return DashboardStats(
        personality_completion=personality_completion,
        adjectives_completion=adjectives_completion,
        total_rules=len(rules),
        active_rules_count=sum(1 for r in rules if r.is_active),
        is_personality_complete=personality_completion == QUESTIONS_COUNT,
        are_adjectives_complete=adjectives_completion == ADJECTIVES_COUNT,
    )


def get_brand_dashboard_data(db: Session) -> DashboardOut | None:
    """
    Brand, personality, adjectives and rules in one view, plus completion stats.

    Returns None without touching the three collections when no brand is set up.
    The collection reads share the request's session and run one after another.
    """
    try:
        brand = get_current_brand(db)
        if not brand:
            return None

        personality = list_personality(db, brand.id)
        adjectives = list_adjectives(db, brand.id)
        rules = list_rules(db, brand.id)

        return DashboardOut(
            brand=BrandOut.model_validate(brand),
            personality=[PersonalityAnswerOut.model_validate(p) for p in personality],
            adjectives=[AdjectiveOut.model_validate(a) for a in adjectives],
            rules=[RuleOut.model_validate(r) for r in rules],
            stats=compute_stats(personality, adjectives, rules),
        )
    except SQLAlchemyError:
        logger.exception("Failed to fetch dashboard data")
        return None


def is_brand_setup_complete(db: Session) -> bool:
    data = get_brand_dashboard_data(db)
    if not data:
        return False
    return data.stats.is_personality_complete and data.stats.are_adjectives_complete
