"""Pydantic schemas for the listing API."""
from typing import AbstractSet, List, Optional
from pydantic import BaseModel, Field

from crypto_list.models.listing import (
    CryptoFilter,
    FailedState,
    LoadedState,
    LoadingState,
    ViewState,
)
from crypto_list.schemas.coin import CoinResponse


class ErrorResponse(BaseModel):
    """Schema for a failed fetch."""
    kind: str
    message: str


class AlertResponse(BaseModel):
    """Schema for an alert the client should present."""
    kind: str
    title: str
    action: str


class ViewStateResponse(BaseModel):
    """Schema for the current listing state."""
    status: str = Field(..., description="idle, loading, loaded or error")
    coins: Optional[List[CoinResponse]] = None
    count: Optional[int] = None
    error: Optional[ErrorResponse] = None
    active_filters: List[CryptoFilter] = []
    search_text: str = ""
    alert: Optional[AlertResponse] = None

    @classmethod
    def from_state(
        cls,
        state: Optional[ViewState],
        active_filters: AbstractSet[CryptoFilter],
        search_text: str,
        alert: Optional[AlertResponse] = None
    ) -> "ViewStateResponse":
        """Build the response for a view state (None before the first load)."""
        filters = [f for f in CryptoFilter if f in active_filters]
        common = dict(active_filters=filters, search_text=search_text, alert=alert)

        if state is None:
            return cls(status="idle", **common)
        if isinstance(state, LoadingState):
            return cls(status="loading", **common)
        if isinstance(state, LoadedState):
            return cls(
                status="loaded",
                coins=[CoinResponse.from_coin(coin) for coin in state.coins],
                count=len(state.coins),
                **common
            )
        if isinstance(state, FailedState):
            return cls(
                status="error",
                error=ErrorResponse(kind=type(state.error).__name__, message=state.error.message),
                **common
            )
        raise TypeError(f"Unknown view state: {state!r}")


class SearchRequest(BaseModel):
    """Schema for updating the search text."""
    text: str = ""


class FiltersRequest(BaseModel):
    """Schema for replacing the applied filters."""
    filters: List[CryptoFilter] = Field(default_factory=list, description="Filters (e.g., active, coin)")


class FilterOption(BaseModel):
    """Schema for one entry of the filter menu."""
    filter: CryptoFilter
    label: str
    selected: bool
