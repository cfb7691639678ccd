from .profile import Profile
from .user_role import UserRole
from .revoked_token import RevokedToken
from .contract import Contract
from .revenue import Revenue, RevenueType, REMOVED_CONTRACT_LABEL
from .expense import Expense, ExpenseStatus

__all__ = [
    "Profile",
    "UserRole",
    "RevokedToken",
    "Contract",
    "Revenue",
    "RevenueType",
    "REMOVED_CONTRACT_LABEL",
    "Expense",
    "ExpenseStatus"
]
