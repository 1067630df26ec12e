from fastapi import APIRouter

from content_analyzer.api import analyze, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(analyze.router)
