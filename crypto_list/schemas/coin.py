"""Pydantic schemas for the coin feed and the listing API."""
from enum import Enum
from typing import Any, List
from pydantic import BaseModel, Field, TypeAdapter, field_validator


class CryptoType(str, Enum):
    """Kind of a listed asset."""
    COIN = "coin"
    TOKEN = "token"
    INACTIVE = "inActive"


class CryptoCoin(BaseModel):
    """One cryptocurrency entry from the coin feed.

    The feed uses snake_case keys; ``type`` is exposed as ``kind``.
    """
    name: str
    symbol: str
    kind: CryptoType = Field(..., alias="type")
    is_active: bool
    is_new: bool

    @field_validator("kind", mode="before")
    @classmethod
    def default_unknown_kind(cls, value: Any) -> CryptoType:
        """Map any unrecognized or non-string kind to ``inActive``."""
        if isinstance(value, CryptoType):
            return value
        try:
            return CryptoType(value)
        except (ValueError, TypeError):
            return CryptoType.INACTIVE

    class Config:
        frozen = True
        populate_by_name = True


coin_list_adapter = TypeAdapter(List[CryptoCoin])


class CoinResponse(BaseModel):
    """Schema for a coin in API responses."""
    name: str
    symbol: str
    type: CryptoType
    is_active: bool
    is_new: bool

    @classmethod
    def from_coin(cls, coin: CryptoCoin) -> "CoinResponse":
        return cls(
            name=coin.name,
            symbol=coin.symbol,
            type=coin.kind,
            is_active=coin.is_active,
            is_new=coin.is_new
        )
