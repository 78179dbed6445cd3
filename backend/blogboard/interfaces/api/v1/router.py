from fastapi import APIRouter

from blogboard.config import settings
from blogboard.interfaces.api.v1.routes.auth import router as auth_router
from blogboard.interfaces.api.v1.routes.comments import post_comments_router
from blogboard.interfaces.api.v1.routes.comments import router as comments_router
from blogboard.interfaces.api.v1.routes.ping import router as ping_router
from blogboard.interfaces.api.v1.routes.posts import router as posts_router
from blogboard.interfaces.api.v1.routes.users import router as users_router

api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(auth_router)
api_router.include_router(comments_router)
api_router.include_router(ping_router)
api_router.include_router(post_comments_router)
api_router.include_router(posts_router)
api_router.include_router(users_router)
