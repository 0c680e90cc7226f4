from models.orm_brand import BrandEntity
from models.orm_personality import PersonalityEntity
from models.orm_adjective import AdjectiveEntity
from models.orm_rule import RuleEntity

__all__ = [
    "BrandEntity",
    "PersonalityEntity",
    "AdjectiveEntity",
    "RuleEntity",
]
