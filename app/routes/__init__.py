"""API routes."""

from fastapi import APIRouter

from app.routes import posts

api_router = APIRouter()

# Posts, comment threads and likes
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
