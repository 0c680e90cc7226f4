from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from db.base import Base
from core.base_classes import BaseEntity


class BrandEntity(Base, BaseEntity):
    __tablename__ = "brand"

    name = Column(String(100), nullable=False)

    personality = relationship(
        "PersonalityEntity",
        back_populates="brand",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    adjectives = relationship(
        "AdjectiveEntity",
        back_populates="brand",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    rules = relationship(
        "RuleEntity",
        back_populates="brand",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
