from fastapi import APIRouter

from app.api.v1 import emojis, interpret

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(interpret.router)
api_router.include_router(emojis.router)
