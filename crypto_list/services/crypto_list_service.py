"""Coin feed service."""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from crypto_list.core.config import get_settings
from crypto_list.schemas.coin import CryptoCoin, coin_list_adapter
from crypto_list.services.network import NetworkManager

logger = logging.getLogger(__name__)


class CryptoCoinFetchable(ABC):
    """Anything that can fetch the coin list."""

    @abstractmethod
    def fetch_crypto_coins(self) -> List[CryptoCoin]:
        """Fetch the coin list.

        Raises:
            NetworkError: If the coins could not be fetched
        """


class CryptoListService(CryptoCoinFetchable):
    """Fetches the coin list from the configured endpoint."""

    def __init__(self, network: NetworkManager, url: Optional[str] = None):
        self.network = network
        self.url = url or get_settings().crypto_list_url

    def fetch_crypto_coins(self) -> List[CryptoCoin]:
        coins = self.network.request(self.url, coin_list_adapter)
        logger.info(f"Fetched {len(coins)} coins")
        return coins


def create_crypto_list_service() -> CryptoListService:
    """Build the service with a network manager from settings."""
    settings = get_settings()
    network = NetworkManager(timeout=settings.request_timeout)
    return CryptoListService(network, settings.crypto_list_url)
