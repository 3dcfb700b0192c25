from fastapi import APIRouter

from app.api.routes import rookie_draft

api_router = APIRouter()
api_router.include_router(rookie_draft.router)
