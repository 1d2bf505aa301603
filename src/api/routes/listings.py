from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.error import ClientError, ServerError
from src.app.repositories.listing_repository import ListingFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.listings import (
    ListListingsUseCase,
    GetListingUseCase,
    CreateListingUseCase,
    UpdateListingUseCase,
    DeleteListingUseCase,
    ListingInput,
    ListingPatch,
    ListingSummary,
    ListingDetail,
    ListingRecord,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.base import AuthContext

router = APIRouter(prefix="/iklan", tags=["Iklan"])


def _raise_for(error):
    if error.code == "NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ListingSummary])
async def list_listings(
    city: Optional[str] = Query(default=None),
    min_price: Optional[int] = Query(default=None, alias="minPrice"),
    max_price: Optional[int] = Query(default=None, alias="maxPrice"),
    q: Optional[str] = Query(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List published ads, newest first"""
    criteria = ListingFilter(city=city, min_price=min_price, max_price=max_price, q=q)
    result = await ListListingsUseCase(uow).execute(criteria)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{listing_id}", status_code=status.HTTP_200_OK, response_model=ListingDetail)
async def get_listing(listing_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get ad detail (published only)

    Raises:
        - 404 Not Found: Missing or unpublished
    """
    result = await GetListingUseCase(uow).execute(listing_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ListingRecord)
async def create_listing(
    request: ListingInput,
    current_user: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create ad (protected)

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Missing or invalid token
    """
    result = await CreateListingUseCase(uow).execute(current_user, request)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.put("/{listing_id}", status_code=status.HTTP_200_OK, response_model=ListingRecord)
async def update_listing(
    listing_id: int,
    request: ListingPatch,
    current_user: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update own ad (protected)

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: Missing or owned by someone else
    """
    result = await UpdateListingUseCase(uow).execute(current_user, listing_id, request)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(
    listing_id: int,
    current_user: AuthContext = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete own ad (protected)

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: Missing or owned by someone else
    """
    result = await DeleteListingUseCase(uow).execute(current_user, listing_id)
    if result.is_err():
        _raise_for(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
