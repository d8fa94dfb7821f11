"""Listing filters and view states."""
import enum
from dataclasses import dataclass
from typing import Tuple, Union

from crypto_list.core.exceptions import NetworkError
from crypto_list.schemas.coin import CryptoCoin


class CryptoFilter(str, enum.Enum):
    """Filters that can be applied to the coin list, in menu order."""
    ACTIVE = "active"
    NEW = "new"
    COIN = "coin"
    INACTIVE = "inActive"
    TOKEN = "token"

    @property
    def label(self) -> str:
        return FILTER_LABELS[self]


FILTER_LABELS = {
    CryptoFilter.ACTIVE: "Active Coins",
    CryptoFilter.NEW: "New Coins",
    CryptoFilter.COIN: "Only Coin",
    CryptoFilter.INACTIVE: "InActive Coins",
    CryptoFilter.TOKEN: "Only Token",
}


@dataclass(frozen=True)
class LoadingState:
    """A fetch is in progress."""


@dataclass(frozen=True)
class LoadedState:
    """The visible coins, in feed order."""
    coins: Tuple[CryptoCoin, ...]


@dataclass(frozen=True)
class FailedState:
    """The last fetch failed."""
    error: NetworkError


ViewState = Union[LoadingState, LoadedState, FailedState]
