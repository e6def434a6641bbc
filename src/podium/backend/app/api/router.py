from fastapi import APIRouter

from podium.backend.app.api.files import router as files_router
from podium.backend.app.api.session import router as session_router

api_router = APIRouter()
api_router.include_router(session_router.router)
api_router.include_router(files_router.router)
