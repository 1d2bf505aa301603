"""
Domain Entities

Each entity in its own file.
"""

from .user import User
from .password_reset_token import PasswordResetToken
from .listing import Listing

__all__ = [
    "User",
    "PasswordResetToken",
    "Listing",
]
