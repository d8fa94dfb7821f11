"""View model that owns the coin list, filters and search text."""
import asyncio
import logging
from typing import FrozenSet, Iterable, Optional, Tuple

from crypto_list.core.exceptions import NetworkError
from crypto_list.core.publisher import StatePublisher
from crypto_list.models.listing import (
    CryptoFilter,
    FailedState,
    LoadedState,
    LoadingState,
    ViewState,
)
from crypto_list.schemas.coin import CryptoCoin, CryptoType
from crypto_list.services.crypto_list_service import CryptoCoinFetchable

logger = logging.getLogger(__name__)


def matches_filter(coin: CryptoCoin, crypto_filter: CryptoFilter) -> bool:
    """Check a single filter against a coin."""
    if crypto_filter == CryptoFilter.ACTIVE:
        return coin.is_active
    if crypto_filter == CryptoFilter.INACTIVE:
        return not coin.is_active
    if crypto_filter == CryptoFilter.NEW:
        return coin.is_new
    if crypto_filter == CryptoFilter.COIN:
        return coin.kind == CryptoType.COIN
    if crypto_filter == CryptoFilter.TOKEN:
        return coin.kind == CryptoType.TOKEN
    raise ValueError(f"Unknown filter: {crypto_filter!r}")


def filter_coins(
    coins: Iterable[CryptoCoin],
    filters: Iterable[CryptoFilter],
    search_text: str = ""
) -> Tuple[CryptoCoin, ...]:
    """Return the coins that pass every filter and match the search text.

    Filters are combined with AND; an empty filter set keeps everything.
    The search is a case-sensitive substring match on name or symbol.
    Feed order is preserved.

    Args:
        coins: Coins in feed order
        filters: Active filters
        search_text: Search text, empty to match everything

    Returns:
        Tuple of matching coins
    """
    filters = tuple(filters)
    return tuple(
        coin for coin in coins
        if all(matches_filter(coin, f) for f in filters)
        and (not search_text or search_text in coin.name or search_text in coin.symbol)
    )


class CryptoListingViewModel:
    """Holds the listing session and publishes a state after every change.

    All methods must be called from a single event loop. ``load`` is the
    only one that suspends; if several loads overlap, only the most recent
    one is applied.
    """

    def __init__(self, service: CryptoCoinFetchable, publisher: Optional[StatePublisher] = None):
        self.service = service
        self.state_publisher: StatePublisher[ViewState] = publisher or StatePublisher()

        self._coins: Tuple[CryptoCoin, ...] = ()
        self._active_filters: FrozenSet[CryptoFilter] = frozenset()
        self._search_text = ""
        self._load_generation = 0

    @property
    def all_coins(self) -> Tuple[CryptoCoin, ...]:
        return self._coins

    @property
    def active_filters(self) -> FrozenSet[CryptoFilter]:
        return self._active_filters

    @property
    def search_text(self) -> str:
        return self._search_text

    # Fetching

    async def load(self):
        """Fetch the coin list and publish the result.

        Publishes ``LoadingState`` before the fetch starts. On failure the
        previously loaded coins are kept.
        """
        self._load_generation += 1
        generation = self._load_generation
        self.state_publisher.send(LoadingState())

        try:
            coins = await asyncio.to_thread(self.service.fetch_crypto_coins)
        except NetworkError as e:
            if generation != self._load_generation:
                logger.debug(f"Discarding failure of superseded load #{generation}: {e!r}")
                return
            logger.warning(f"Failed to load coins: {e!r}")
            self.state_publisher.send(FailedState(error=e))
            return

        if generation != self._load_generation:
            logger.debug(f"Discarding result of superseded load #{generation}")
            return

        self._coins = tuple(coins)
        logger.info(f"Loaded {len(self._coins)} coins")
        self._publish_filtered()

    # Searching

    def search(self, text: str):
        """Update the search text and publish the filtered list."""
        self._search_text = text
        self._publish_filtered()

    # Filtering

    def toggle_filter(self, crypto_filter: CryptoFilter):
        """Add the filter if it is not applied, otherwise remove it."""
        if crypto_filter in self._active_filters:
            self._active_filters = self._active_filters - {crypto_filter}
        else:
            self._active_filters = self._active_filters | {crypto_filter}
        self._publish_filtered()

    def clear_filters(self):
        """Remove every filter and publish the list."""
        self._active_filters = frozenset()
        self._publish_filtered()

    def set_filters(self, filters: Iterable[CryptoFilter]):
        """Replace the applied filters."""
        self._active_filters = frozenset(filters)
        self._publish_filtered()

    def _publish_filtered(self):
        visible = filter_coins(self._coins, self._active_filters, self._search_text)
        self.state_publisher.send(LoadedState(coins=visible))
