"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field, EmailStr

PASSWORD_MIN_LENGTH = 8


class TokenClaims(BaseModel):
    """
    Decoded JWT claims.

    ``email`` is copied in at issuance and never re-checked against the
    current user record.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email at issuance time")
    iat: int = Field(..., description="Issued at (epoch seconds)")
    exp: int = Field(..., description="Expiration (epoch seconds)")

    @property
    def issued_at(self) -> datetime:
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class UserRecord(BaseModel):
    """A row of the users table, including the password hash."""

    id: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> "PublicUser":
        return PublicUser(
            id=self.id,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class PublicUser(BaseModel):
    """User fields that are safe to return to clients."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class SignupRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        description="Plain text password",
    )


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Plain text password")


class AuthResponse(BaseModel):
    """Token plus the public user it was issued for."""

    token: str = Field(..., description="Signed bearer token")
    user: PublicUser
