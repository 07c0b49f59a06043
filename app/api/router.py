"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from app.api.endpoints import auth, community, health, preferences, trophies, weapons

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(weapons.router, prefix="/weapons", tags=["weapons"])
api_router.include_router(trophies.router, prefix="/trophies", tags=["trophies"])
api_router.include_router(preferences.router, tags=["preferences"])
api_router.include_router(community.router, tags=["community"])
