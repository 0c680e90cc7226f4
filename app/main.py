import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.router import api_router
from core.logging_conf import configure_logging
from core.settings import settings
from db.session import init_db

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.auto_create_tables:
        init_db()
    logger.info("%s started (env=%s)", settings.app_title, settings.app_env)
    yield


app = FastAPI(title=settings.app_title, debug=settings.app_debug, lifespan=lifespan)

app.include_router(api_router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}
