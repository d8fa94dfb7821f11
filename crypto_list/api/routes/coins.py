"""Coin listing API endpoints."""
from typing import List
from fastapi import APIRouter, Depends, Request

from crypto_list.models.listing import CryptoFilter
from crypto_list.presentation.alerts import alert_for_view_model
from crypto_list.schemas.listing import (
    AlertResponse,
    FilterOption,
    FiltersRequest,
    SearchRequest,
    ViewStateResponse,
)
from crypto_list.services.listing_view_model import CryptoListingViewModel

router = APIRouter(prefix="/coins", tags=["coins"])


def get_view_model(request: Request) -> CryptoListingViewModel:
    """Get the application's listing view model."""
    return request.app.state.view_model


def current_state(view_model: CryptoListingViewModel) -> ViewStateResponse:
    """Build the response for the most recently published state."""
    state = view_model.state_publisher.latest
    alert = alert_for_view_model(view_model, state) if state is not None else None
    return ViewStateResponse.from_state(
        state,
        view_model.active_filters,
        view_model.search_text,
        AlertResponse(kind=alert.kind, title=alert.title, action=alert.action) if alert else None
    )


@router.get("/state", response_model=ViewStateResponse)
async def get_state(view_model: CryptoListingViewModel = Depends(get_view_model)):
    """Get the current listing state."""
    return current_state(view_model)


@router.post("/load", response_model=ViewStateResponse)
async def load_coins(view_model: CryptoListingViewModel = Depends(get_view_model)):
    """Fetch the coin list and return the resulting state."""
    await view_model.load()
    return current_state(view_model)


@router.put("/search", response_model=ViewStateResponse)
async def search_coins(
    body: SearchRequest,
    view_model: CryptoListingViewModel = Depends(get_view_model)
):
    """Set the search text.

    Args:
        body: Search text (case-sensitive, matched against name and symbol)
        view_model: Listing view model
    """
    view_model.search(body.text)
    return current_state(view_model)


@router.get("/filters", response_model=List[FilterOption])
async def get_filters(view_model: CryptoListingViewModel = Depends(get_view_model)):
    """Get the filter menu with the current selection."""
    return [
        FilterOption(filter=f, label=f.label, selected=f in view_model.active_filters)
        for f in CryptoFilter
    ]


@router.post("/filters/{crypto_filter}/toggle", response_model=ViewStateResponse)
async def toggle_filter(
    crypto_filter: CryptoFilter,
    view_model: CryptoListingViewModel = Depends(get_view_model)
):
    """Apply the filter if it is off, remove it if it is on."""
    view_model.toggle_filter(crypto_filter)
    return current_state(view_model)


@router.put("/filters", response_model=ViewStateResponse)
async def set_filters(
    body: FiltersRequest,
    view_model: CryptoListingViewModel = Depends(get_view_model)
):
    """Replace the applied filters."""
    view_model.set_filters(body.filters)
    return current_state(view_model)


@router.delete("/filters", response_model=ViewStateResponse)
async def clear_filters(view_model: CryptoListingViewModel = Depends(get_view_model)):
    """Remove every filter."""
    view_model.clear_filters()
    return current_state(view_model)
