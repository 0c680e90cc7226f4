import logging

from sqlalchemy.orm import Session

from db.session import unit_of_work
from models.orm_adjective import AdjectiveEntity
from schemas.adjectives import AdjectivesIn

logger = logging.getLogger(__name__)


def list_adjectives(db: Session, brand_id: int) -> list[AdjectiveEntity]:
    return (
        db.query(AdjectiveEntity)
        .filter(AdjectiveEntity.brand_id == brand_id)
        .order_by(AdjectiveEntity.created_at.asc(), AdjectiveEntity.id.asc())
        .all()
    )


def replace_adjectives(db: Session, brand_id: int, data: AdjectivesIn) -> list[AdjectiveEntity]:
    rows = [
        AdjectiveEntity(
            brand_id=brand_id,
            name=adj.name,
            description=adj.description,
            subtle_example=adj.subtle_example,
            obvious_example=adj.obvious_example,
            intense_example=adj.intense_example,
        )
        for adj in data.adjectives
    ]

    with unit_of_work(db):
        (
            db.query(AdjectiveEntity)
            .filter(AdjectiveEntity.brand_id == brand_id)
            .delete(synchronize_session=False)
        )
        db.add_all(rows)

    logger.info("Replaced adjectives for brand %s", brand_id)
    return rows
