"""
Public market data endpoints (no authentication required).

Rate limits (advisory, not enforced here): 120 req/min, 1 req/s.
"""

from typing import Optional, List, Any, Dict
import logging

from .base import Transport, build_url
from .classifier import ResponseClassifier
from ..config import GeminiSettings
from ..models import Ticker, Orderbook, Trade, Auction, AuctionHistory

logger = logging.getLogger(__name__)

SYMBOLS = "symbols"
TICKER = "pubticker"
AUCTION = "auction"
AUCTION_HISTORY = "history"
ORDERBOOK = "book"
TRADES = "trades"


class PublicAPI:
    """
    Public REST client for market data.

    Usage:
        >>> public = PublicAPI(settings, transport)
        >>> book = public.get_orderbook("btcusd", limit_bids=10)
        >>> book.best_bid
    """

    def __init__(
        self,
        settings: GeminiSettings,
        transport: Transport,
        classifier: Optional[ResponseClassifier] = None
    ):
        self.settings = settings
        self.transport = transport
        self.classifier = classifier or ResponseClassifier()

    def _get(self, path: str, result_type: Any, params: Optional[Dict[str, Any]] = None) -> Any:
        url = build_url(self.settings.base_url, self.settings.api_version, path, params)
        raw = self.transport.get(url)
        return self.classifier.classify(raw, result_type)

    def get_symbols(self) -> List[str]:
        """Return all available symbols for trading."""
        return self._get(SYMBOLS, List[str])

    def get_ticker(self, symbol: str) -> Ticker:
        """
        Return recent trading activity for the symbol.

        Args:
            symbol: Trading pair (e.g. "btcusd")
        """
        return self._get(f"{TICKER}/{symbol}", Ticker)

    def get_orderbook(
        self,
        symbol: str,
        limit_bids: Optional[int] = None,
        limit_asks: Optional[int] = None
    ) -> Orderbook:
        """
        Return the current order book as bids and asks.

        Args:
            symbol: Trading pair
            limit_bids: Max bid levels (venue default 50, 0 returns all)
            limit_asks: Max ask levels (venue default 50, 0 returns all)
        """
        params = {"limit_bids": limit_bids, "limit_asks": limit_asks}
        return self._get(f"{ORDERBOOK}/{symbol}", Orderbook, params)

    def get_trades(
        self,
        symbol: str,
        since: Optional[int] = None,
        limit_trades: Optional[int] = None,
        include_breaks: Optional[bool] = None
    ) -> List[Trade]:
        """
        Return trades executed since the given timestamp.

        Args:
            symbol: Trading pair
            since: Seconds or milliseconds since epoch
            limit_trades: Max trades to return
            include_breaks: Include broken trades
        """
        params = {
            "since": since,
            "limit_trades": limit_trades,
            "include_breaks": None if include_breaks is None else str(include_breaks).lower(),
        }
        return self._get(f"{TRADES}/{symbol}", List[Trade], params)

    def get_auction(self, symbol: str) -> Auction:
        """Return current auction information."""
        return self._get(f"{AUCTION}/{symbol}", Auction)

    def get_auction_history(
        self,
        symbol: str,
        since: Optional[int] = None,
        limit_auction_results: Optional[int] = None,
        include_indicative: Optional[bool] = None
    ) -> List[AuctionHistory]:
        """
        Return auction events since the given timestamp.

        Args:
            symbol: Trading pair
            since: Only events after this timestamp
            limit_auction_results: Max events to return
            include_indicative: Include indicative price publications
        """
        params = {
            "since": since,
            "limit_auction_results": limit_auction_results,
            "include_indicative": None if include_indicative is None else str(include_indicative).lower(),
        }
        return self._get(f"{AUCTION}/{symbol}/{AUCTION_HISTORY}", List[AuctionHistory], params)
