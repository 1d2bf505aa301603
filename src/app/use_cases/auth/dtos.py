"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RegisterResponse(BaseModel):
    """Response for register use case (never carries the hash)"""

    id: int
    email: str


class LoginResponse(BaseModel):
    """Response for login use case"""

    token: str


class ForgotPasswordResponse(BaseModel):
    """
    Response for forgot password use case

    token and hint are only set in testing mode (no front-end URL).
    """

    message: str
    token: Optional[str] = None
    hint: Optional[str] = None


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    message: str
