"""Pydantic models for registration, login and session tokens."""

from pydantic import BaseModel, EmailStr, Field

from orgboard.models.enums import Role


# ── Request models ─────────────────────────────────────────────────────────────

class OrgRegistration(BaseModel):
    org_name: str = Field(min_length=1, max_length=200)
    user_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


# ── Response models ────────────────────────────────────────────────────────────

class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    org_id: str

    model_config = {"from_attributes": True}


class OrganizationResponse(BaseModel):
    id: str
    name: str

    model_config = {"from_attributes": True}


class RegistrationResponse(BaseModel):
    message: str = "Organization and Admin registered successfully"
    token: str
    user: UserResponse
    organization: OrganizationResponse


class LoginResponse(BaseModel):
    token: str
    user: UserResponse
