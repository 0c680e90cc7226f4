from typing import List

from pydantic import BaseModel

from schemas.adjectives import AdjectiveOut
from schemas.brand import BrandOut
from schemas.personality import PersonalityAnswerOut
from schemas.rules import RuleOut


class DashboardStats(BaseModel):
    personality_completion: int
    adjectives_completion: int
    total_rules: int
    active_rules_count: int
    is_personality_complete: bool
    are_adjectives_complete: bool


class DashboardOut(BaseModel):
    brand: BrandOut
    personality: List[PersonalityAnswerOut]
    adjectives: List[AdjectiveOut]
    rules: List[RuleOut]
    stats: DashboardStats


class SetupStatusOut(BaseModel):
    complete: bool
