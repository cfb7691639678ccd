from .auth import LoginRequest, LoginResponse, SignUpRequest, ProfileUpdate, ProfileResponse
from .user import InviteRequest, RoleAssignmentCreate, RoleAssignmentResponse, UserResponse
from .contract import ContractCreate, ContractUpdate, ContractResponse
from .revenue import RevenueCreate, RevenueResponse
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .dashboard import MonthlySummary, MonthBreakdown, YearlySummary

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "SignUpRequest",
    "ProfileUpdate",
    "ProfileResponse",
    "InviteRequest",
    "RoleAssignmentCreate",
    "RoleAssignmentResponse",
    "UserResponse",
    "ContractCreate",
    "ContractUpdate",
    "ContractResponse",
    "RevenueCreate",
    "RevenueResponse",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "MonthlySummary",
    "MonthBreakdown",
    "YearlySummary"
]
