"""
Type definitions for Gemini client.

Uses Pydantic for response validation and dataclasses for credential
records. DECIMAL PRECISION: prices and amounts are parsed as Decimal.
"""

from enum import Enum
from typing import Optional, Any
from dataclasses import dataclass, field
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import HEADER_API_KEY, HEADER_PAYLOAD, HEADER_SIGNATURE


class Role(str, Enum):
    """API key role assigned on key creation."""
    TRADER = "trader"
    FUND_MANAGER = "fundmanager"


class Side(str, Enum):
    """Order side."""
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Order type. Only limit orders are supported through the API."""
    EXCHANGE_LIMIT = "exchange limit"


@dataclass(frozen=True)
class Session:
    """
    Registered credential set.

    SECURITY: The secret is hidden from repr to prevent credential leakage in logs.
    """
    session_id: int
    api_key: str
    api_secret: str = field(repr=False)  # SECURITY: Hide from logs
    role: Role = Role.TRADER
    requires_heartbeat: bool = False


@dataclass(frozen=True)
class SignedHeaders:
    """Authentication headers for one signed request."""
    api_key: str
    payload_base64: str
    signature_hex: str
    envelope: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def nonce(self) -> Optional[int]:
        """Nonce embedded in the signed envelope."""
        return self.envelope.get("nonce")

    def as_headers(self) -> dict[str, str]:
        """HTTP header mapping expected by the venue."""
        return {
            HEADER_API_KEY: self.api_key,
            HEADER_PAYLOAD: self.payload_base64,
            HEADER_SIGNATURE: self.signature_hex,
        }


class GeminiModel(BaseModel):
    """Base for venue payloads; unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ErrorCapture(GeminiModel):
    """Error envelope shared by all endpoints."""
    model_config = ConfigDict(extra="ignore", strict=True)

    result: str = ""
    reason: str = ""
    message: str = ""

    @field_validator("result", "reason", "message", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """JSON null reads as an unset field."""
        return "" if v is None else v

    @property
    def is_error(self) -> bool:
        """True if any field is set and result is not "ok"."""
        if not (self.result or self.reason or self.message):
            return False
        return self.result != "ok"


# Public market data
class TickerVolume(GeminiModel):
    """24h volume for the ticker symbol."""
    base: Optional[Decimal] = None
    quote: Optional[Decimal] = None
    timestamp: Optional[int] = None


class Ticker(GeminiModel):
    """Recent trading activity for a symbol."""
    bid: Decimal
    ask: Decimal
    last: Decimal
    volume: dict[str, Any] = Field(default_factory=dict)

    def parse_volume(self, symbol: str) -> TickerVolume:
        """
        Split the raw volume mapping into base/quote amounts.

        The venue keys volume by currency code ("BTC", "USD") so the
        codes are derived from the symbol.
        """
        symbol = symbol.upper()
        base_code, quote_code = symbol[:3], symbol[3:]
        return TickerVolume(
            base=self.volume.get(base_code),
            quote=self.volume.get(quote_code),
            timestamp=self.volume.get("timestamp"),
        )


class OrderbookEntry(GeminiModel):
    """Single price level."""
    price: Decimal
    amount: Decimal
    timestamp: Optional[int] = None


class Orderbook(GeminiModel):
    """Current order book as bids and asks."""
    bids: list[OrderbookEntry] = Field(default_factory=list)
    asks: list[OrderbookEntry] = Field(default_factory=list)

    @property
    def best_bid(self) -> Optional[Decimal]:
        return self.bids[0].price if self.bids else None

    @property
    def best_ask(self) -> Optional[Decimal]:
        return self.asks[0].price if self.asks else None


class Trade(GeminiModel):
    """Executed public trade."""
    timestamp: int
    timestampms: Optional[int] = None
    tid: int
    price: Decimal
    amount: Decimal
    exchange: Optional[str] = None
    type: str
    broken: Optional[bool] = None


class Auction(GeminiModel):
    """Current auction state."""
    closed_until_ms: Optional[int] = None
    last_auction_eid: Optional[int] = None
    last_auction_price: Optional[Decimal] = None
    last_auction_quantity: Optional[Decimal] = None
    last_highest_bid_price: Optional[Decimal] = None
    last_lowest_ask_price: Optional[Decimal] = None
    next_auction_ms: Optional[int] = None
    next_update_ms: Optional[int] = None
    most_recent_indicative_price: Optional[Decimal] = None
    most_recent_indicative_quantity: Optional[Decimal] = None


class AuctionHistory(GeminiModel):
    """Auction event."""
    auction_id: Optional[int] = None
    auction_price: Optional[Decimal] = None
    auction_quantity: Optional[Decimal] = None
    eid: Optional[int] = None
    highest_bid_price: Optional[Decimal] = None
    lowest_ask_price: Optional[Decimal] = None
    auction_result: Optional[str] = None
    timestamp: Optional[int] = None
    timestampms: Optional[int] = None
    event_type: Optional[str] = None


# Private account data
class Order(GeminiModel):
    """Order status as reported by the venue."""
    order_id: int
    client_order_id: Optional[str] = None
    id: Optional[int] = None
    symbol: Optional[str] = None
    exchange: Optional[str] = None
    price: Optional[Decimal] = None
    avg_execution_price: Optional[Decimal] = None
    side: Optional[str] = None
    type: Optional[str] = None
    timestamp: Optional[int] = None
    timestampms: Optional[int] = None
    is_live: Optional[bool] = None
    is_cancelled: Optional[bool] = None
    was_forced: Optional[bool] = None
    executed_amount: Optional[Decimal] = None
    remaining_amount: Optional[Decimal] = None
    original_amount: Optional[Decimal] = None


class CancelDetails(GeminiModel):
    cancelled_orders: list[int] = Field(default_factory=list, alias="cancelledOrders")
    cancel_rejects: list[int] = Field(default_factory=list, alias="cancelRejects")


class OrderResult(GeminiModel):
    """Result of a bulk cancel."""
    result: str
    details: CancelDetails = Field(default_factory=CancelDetails)


class Balance(GeminiModel):
    """Balance in one currency."""
    currency: str
    amount: Decimal
    available: Decimal
    available_for_withdrawal: Optional[Decimal] = Field(None, alias="availableForWithdrawal")
    type: Optional[str] = None


class TradeHistory(GeminiModel):
    """Own trade."""
    price: Decimal
    amount: Decimal
    timestamp: int
    timestampms: Optional[int] = None
    type: str
    aggressor: Optional[bool] = None
    fee_currency: Optional[str] = None
    fee_amount: Optional[Decimal] = None
    tid: int
    order_id: Optional[int] = None
    exchange: Optional[str] = None
    is_auction_fill: Optional[bool] = None
    client_order_id: Optional[str] = None


class TradeVolume(GeminiModel):
    """Trading volume for one symbol and day."""
    account_id: Optional[int] = None
    symbol: str
    base_currency: Optional[str] = None
    notional_currency: Optional[str] = None
    data_date: Optional[str] = None
    total_volume_base: Optional[Decimal] = None
    maker_buy_sell_ratio: Optional[Decimal] = None
    buy_maker_base: Optional[Decimal] = None
    buy_maker_notional: Optional[Decimal] = None
    buy_maker_count: Optional[int] = None
    sell_maker_base: Optional[Decimal] = None
    sell_maker_notional: Optional[Decimal] = None
    sell_maker_count: Optional[int] = None
    buy_taker_base: Optional[Decimal] = None
    buy_taker_notional: Optional[Decimal] = None
    buy_taker_count: Optional[int] = None
    sell_taker_base: Optional[Decimal] = None
    sell_taker_notional: Optional[Decimal] = None
    sell_taker_count: Optional[int] = None


class DepositAddress(GeminiModel):
    """Newly generated deposit address."""
    currency: Optional[str] = None
    address: str
    label: Optional[str] = None


class WithdrawalAddress(GeminiModel):
    """Withdrawal confirmation."""
    destination: Optional[str] = None
    address: Optional[str] = None
    amount: Optional[Decimal] = None
    tx_hash: Optional[str] = Field(None, alias="txHash")
    withdrawal_id: Optional[str] = Field(None, alias="withdrawalId")


class HeartbeatResponse(GeminiModel):
    result: str
