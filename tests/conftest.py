"""
Shared fixtures for the coin listing tests.

All fixtures are explicit; no network access.
"""

import pytest

from crypto_list.core.exceptions import NetworkError
from crypto_list.schemas.coin import CryptoCoin, CryptoType
from crypto_list.services.crypto_list_service import CryptoCoinFetchable
from crypto_list.services.listing_view_model import CryptoListingViewModel


def make_coin(name, symbol, kind=CryptoType.COIN, is_active=True, is_new=False):
    return CryptoCoin(name=name, symbol=symbol, kind=kind, is_active=is_active, is_new=is_new)


BITCOIN = make_coin("Bitcoin", "BTC")
ETHEREUM = make_coin("Ethereum", "ETH", is_new=True)
RIPPLE = make_coin("Ripple", "XRP", is_active=False)


class FakeCoinService(CryptoCoinFetchable):
    """Returns a fixed coin list or raises a fixed error."""

    def __init__(self, coins=None, error: NetworkError = None):
        self.coins = list(coins or [])
        self.error = error
        self.calls = 0

    def fetch_crypto_coins(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.coins)


class StateRecorder:
    """Collects every published state."""

    def __init__(self, publisher):
        self.states = []
        self.subscription = publisher.subscribe(self.states.append)

    @property
    def loaded_counts(self):
        return [len(s.coins) for s in self.states if hasattr(s, "coins")]


@pytest.fixture
def three_coins():
    return [BITCOIN, ETHEREUM, RIPPLE]


@pytest.fixture
def service(three_coins):
    return FakeCoinService(three_coins)


@pytest.fixture
def view_model(service):
    return CryptoListingViewModel(service)


@pytest.fixture
def recorder(view_model):
    return StateRecorder(view_model.state_publisher)
