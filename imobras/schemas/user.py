"""
Imobras - User Management Schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List

from imobras.core.policy import Role


class InviteRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    full_name: str = Field(..., min_length=2, max_length=100)
    role: Role = Role.USER

    class Config:
        use_enum_values = True


class RoleAssignmentCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    role: Role

    class Config:
        use_enum_values = True


class RoleAssignmentResponse(BaseModel):
    id: str
    user_id: str
    role: str
    created_at: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None
    created_at: Optional[str] = None
    last_login_at: Optional[str] = None
    roles: List[RoleAssignmentResponse] = []
    is_admin: bool = False
