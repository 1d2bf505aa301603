"""
Use Cases

Organized into domain folders:
- auth/: Authentication flows
- listings/: Listing (iklan) management
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .listings import (
    ListListingsUseCase,
    GetListingUseCase,
    CreateListingUseCase,
    UpdateListingUseCase,
    DeleteListingUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Listings
    "ListListingsUseCase",
    "GetListingUseCase",
    "CreateListingUseCase",
    "UpdateListingUseCase",
    "DeleteListingUseCase",
]
