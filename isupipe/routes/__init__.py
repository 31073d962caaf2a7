"""API routes."""

from fastapi import APIRouter

from isupipe.routes import auth, livestreams, tags, users

api_router = APIRouter()

# Session
api_router.include_router(auth.router, prefix="/api", tags=["auth"])

# Tag cache and tag search
api_router.include_router(tags.router, prefix="/api", tags=["tags"])

# Streamer theme and statistics
api_router.include_router(users.router, prefix="/api", tags=["users"])

# Reactions and livestream statistics
api_router.include_router(livestreams.router, prefix="/api", tags=["livestreams"])
