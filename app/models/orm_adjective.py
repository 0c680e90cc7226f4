from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from db.base import Base
from core.base_classes import TimestampedEntity


class AdjectiveEntity(Base, TimestampedEntity):
    __tablename__ = "adjectives"

    brand_id = Column(
        Integer,
        ForeignKey("brand.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(50), nullable=False)
    description = Column(String(255), nullable=False)
    subtle_example = Column(String(255), nullable=False)
    obvious_example = Column(String(255), nullable=False)
    intense_example = Column(String(255), nullable=False)

    brand = relationship("BrandEntity", back_populates="adjectives")
