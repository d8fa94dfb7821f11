"""Mapping of listing states to user-facing alerts."""
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional

from crypto_list.core.exceptions import EmptyDataWithFilteredAppliedError, NetworkError
from crypto_list.models.listing import (
    CryptoFilter,
    FailedState,
    LoadedState,
    LoadingState,
    ViewState,
)
from crypto_list.schemas.coin import CryptoCoin
from crypto_list.services.listing_view_model import CryptoListingViewModel, filter_coins

DISMISS = "dismiss"
CLEAR_FILTERS = "clear_filters"


@dataclass(frozen=True)
class Alert:
    """An alert with a single acknowledgement action."""
    error: NetworkError
    action: str = DISMISS

    @property
    def title(self) -> str:
        return self.error.message

    @property
    def kind(self) -> str:
        return type(self.error).__name__


def alert_for_state(
    state: ViewState,
    active_filters: AbstractSet[CryptoFilter],
    all_coins: Iterable[CryptoCoin] = (),
    search_text: str = ""
) -> Optional[Alert]:
    """Return the alert to show for ``state``, if any.

    A failed fetch is shown and dismissed. An empty list offers to clear the
    filters only when filters are applied and the search alone still matches
    some of ``all_coins``.
    """
    if isinstance(state, LoadingState):
        return None
    if isinstance(state, LoadedState):
        if not state.coins and active_filters and filter_coins(all_coins, (), search_text):
            return Alert(error=EmptyDataWithFilteredAppliedError(), action=CLEAR_FILTERS)
        return None
    if isinstance(state, FailedState):
        return Alert(error=state.error)
    raise TypeError(f"Unknown view state: {state!r}")


def alert_for_view_model(view_model: CryptoListingViewModel, state: ViewState) -> Optional[Alert]:
    """Return the alert for ``state`` given the view model's current session."""
    return alert_for_state(
        state,
        view_model.active_filters,
        view_model.all_coins,
        view_model.search_text
    )
