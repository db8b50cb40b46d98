import logging

from fastapi import FastAPI

from chemquiz.api.v1.routers import access, questions, user_access, users
from chemquiz.core.config import settings

logger = logging.getLogger(__name__)


def bootstrap_app(app: FastAPI):
    prefix = settings.API_V1_STR

    app.include_router(users.router, prefix=prefix, tags=["Users"])
    app.include_router(access.router, prefix=prefix, tags=["Access"])
    app.include_router(user_access.router, prefix=prefix, tags=["User access"])
    app.include_router(questions.category_router, prefix=prefix, tags=["Question categories"])
    app.include_router(questions.router, prefix=prefix, tags=["Questions"])
    logger.debug("Routers mounted under %s", prefix)
