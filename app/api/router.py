from fastapi import APIRouter

from api.brand import router as brand_router
from api.personality import router as personality_router
from api.adjectives import router as adjectives_router
from api.rules import router as rules_router
from api.dashboard import router as dashboard_router

api_router = APIRouter()
api_router.include_router(brand_router)
api_router.include_router(personality_router)
api_router.include_router(adjectives_router)
api_router.include_router(rules_router)
api_router.include_router(dashboard_router)
