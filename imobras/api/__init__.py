from .auth import router as auth_router
from .contracts import router as contracts_router
from .revenues import router as revenues_router
from .expenses import router as expenses_router
from .dashboard import router as dashboard_router
from .users import router as users_router, roles_router as user_roles_router

__all__ = [
    "auth_router",
    "contracts_router",
    "revenues_router",
    "expenses_router",
    "dashboard_router",
    "users_router",
    "user_roles_router"
]
