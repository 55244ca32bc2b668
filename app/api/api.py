from fastapi import APIRouter

from app.api.routers import auth, posts

router = APIRouter(prefix="/api")
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(auth.router, tags=["auth"])
