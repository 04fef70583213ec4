from dockeriq.presentation.api.routers.auth import router as auth_router
from dockeriq.presentation.api.routers.shipments import router as shipments_router
from dockeriq.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "shipments_router",
    "users_router",
]
