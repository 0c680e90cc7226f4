from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.deps import get_db
from core.errors import NoBrandError
from schemas.dashboard import DashboardOut, SetupStatusOut
from services.dashboard_service import get_brand_dashboard_data, is_brand_setup_complete

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db)):
    data = get_brand_dashboard_data(db)
    if not data:
        raise HTTPException(status_code=404, detail=NoBrandError.default_message)
    return data


@router.get("/setup-status", response_model=SetupStatusOut)
def setup_status(db: Session = Depends(get_db)):
    return SetupStatusOut(complete=is_brand_setup_complete(db))
