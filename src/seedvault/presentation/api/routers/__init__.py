from seedvault.presentation.api.routers.auth import router as auth_router
from seedvault.presentation.api.routers.secrets import router as secrets_router
from seedvault.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "secrets_router",
    "users_router",
]
