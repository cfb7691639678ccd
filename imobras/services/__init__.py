from .auth import sign_up, authenticate, resolve_principal, sign_out
from .roles import resolve_roles, is_admin, RoleAssignmentService
from .users import UserService
from .contracts import ContractService
from .revenues import RevenueService
from .expenses import ExpenseService
from .dashboard import DashboardService, summarize_month, summarize_year

__all__ = [
    "sign_up",
    "authenticate",
    "resolve_principal",
    "sign_out",
    "resolve_roles",
    "is_admin",
    "RoleAssignmentService",
    "UserService",
    "ContractService",
    "RevenueService",
    "ExpenseService",
    "DashboardService",
    "summarize_month",
    "summarize_year"
]
