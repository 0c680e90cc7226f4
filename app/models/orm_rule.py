from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from db.base import Base
from core.base_classes import TimestampedEntity


class RuleEntity(Base, TimestampedEntity):
    __tablename__ = "rules"

    brand_id = Column(
        Integer,
        ForeignKey("brand.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    do_example = Column(String(255), nullable=False)
    dont_example = Column(String(255), nullable=False)

    is_active = Column(Boolean, default=True, nullable=False)

    brand = relationship("BrandEntity", back_populates="rules")
