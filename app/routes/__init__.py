from app.routes.auth import router as auth_router
from app.routes.blogs import router as blog_router
from app.routes.types import router as type_router
from app.routes.users import router as user_router

__all__ = ["auth_router", "blog_router", "type_router", "user_router"]
