import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import AlreadyExistsError, NoBrandError, StorageUnavailableError
from db.session import unit_of_work
from models.orm_brand import BrandEntity
from schemas.brand import BrandIn

logger = logging.getLogger(__name__)


def _first_brand(db: Session) -> BrandEntity | None:
    return db.query(BrandEntity).order_by(BrandEntity.id.asc()).first()


def get_current_brand(db: Session) -> BrandEntity | None:
    """
    The single brand of this deployment, or None.

    A storage failure is reported as "no brand": callers of the soft lookup
    cannot tell the two apart. Use require_brand_id() where that matters.
    """
    try:
        return _first_brand(db)
    except SQLAlchemyError:
        logger.error("Failed to get current brand", exc_info=True)
        db.rollback()
        return None


def get_current_brand_id(db: Session) -> int | None:
    brand = get_current_brand(db)
    return brand.id if brand else None


def has_brand(db: Session) -> bool:
    return get_current_brand(db) is not None


def get_brand_name(db: Session) -> str | None:
    brand = get_current_brand(db)
    return brand.name if brand else None


def require_brand_id(db: Session) -> int:
    try:
        brand = _first_brand(db)
    except SQLAlchemyError as e:
        raise StorageUnavailableError() from e

    if not brand:
        raise NoBrandError()
    return brand.id


def require_no_brand(db: Session) -> None:
    try:
        brand = _first_brand(db)
    except SQLAlchemyError as e:
        raise StorageUnavailableError() from e

    if brand:
        raise AlreadyExistsError()


def create_brand(db: Session, data: BrandIn) -> BrandEntity:
    require_no_brand(db)

    brand = BrandEntity(name=data.name)
    with unit_of_work(db):
        db.add(brand)
    db.refresh(brand)
    logger.info("Brand %s created", brand.id)
    return brand


def update_brand_name(db: Session, brand_id: int, data: BrandIn) -> BrandEntity:
    brand = db.query(BrandEntity).filter(BrandEntity.id == brand_id).first()
    if not brand:
        raise NoBrandError()

    with unit_of_work(db):
        brand.name = data.name
    db.refresh(brand)
    return brand
