"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Identity resolved from a verified bearer token.

    Populated by the authorization gate from the token claims only, so the
    email is the one denormalized at issuance time. Lives for a single
    request.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email carried by the token")

    model_config = {"frozen": True}
