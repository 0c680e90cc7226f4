from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from db.base import Base
from core.base_classes import TimestampedEntity


class PersonalityEntity(Base, TimestampedEntity):
    __tablename__ = "personality"

    brand_id = Column(
        Integer,
        ForeignKey("brand.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    question_index = Column(Integer, nullable=False)
    answer = Column(Text, nullable=False)

    brand = relationship("BrandEntity", back_populates="personality")

    __table_args__ = (
        UniqueConstraint("brand_id", "question_index", name="uq_personality_brand_question"),
        CheckConstraint("question_index >= 0 AND question_index <= 8", name="ck_personality_question_index"),
    )
