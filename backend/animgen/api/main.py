from fastapi import APIRouter

from animgen.api.routes import animations, utils

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(animations.router)
