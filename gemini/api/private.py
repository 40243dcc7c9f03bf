"""
Private account and trading endpoints.

All calls are signed POSTs through AuthenticatedCall.
Rate limits (advisory, not enforced here): 600 req/min, 5 req/s.
"""

from typing import Optional, List, Any, Union
from decimal import Decimal
import logging

from .authenticated import AuthenticatedCall
from ..auth.account import Account
from ..models import (
    Role,
    Side,
    OrderType,
    Order,
    OrderResult,
    Balance,
    TradeHistory,
    TradeVolume,
    DepositAddress,
    WithdrawalAddress,
    HeartbeatResponse,
)
from ..utils.numeric import format_decimal

logger = logging.getLogger(__name__)

ORDERS = "orders"
ORDER_NEW = "order/new"
ORDER_CANCEL = "order/cancel"
ORDER_CANCEL_SESSION = "order/cancel/session"
ORDER_CANCEL_ALL = "order/cancel/all"
ORDER_STATUS = "order/status"
MY_TRADES = "mytrades"
BALANCES = "balances"
TRADE_VOLUME = "tradevolume"
DEPOSIT = "deposit"
NEW_ADDRESS = "newAddress"
WITHDRAW = "withdraw"
HEARTBEAT = "heartbeat"

Number = Union[Decimal, float, int, str]


class PrivateAPI:
    """
    Typed wrappers for authenticated endpoints.

    Order placement requires the Trader role; deposits and withdrawals
    require the FundManager role.

    Usage:
        >>> account = registry.bind(7)
        >>> order_id = private.new_order(account, "btcusd", "1.0", "100.0", Side.BUY)
    """

    def __init__(self, call: AuthenticatedCall):
        self.call = call

    def new_order(
        self,
        account: Account,
        symbol: str,
        amount: Number,
        price: Number,
        side: Union[Side, str],
        order_type: Union[OrderType, str] = OrderType.EXCHANGE_LIMIT
    ) -> int:
        """
        Place a limit order.

        Args:
            account: Trader account
            symbol: Trading pair (e.g. "btcusd")
            amount: Quantity
            price: Limit price
            side: "buy" or "sell"
            order_type: Order type (only "exchange limit" is supported)

        Returns:
            Order ID
        """
        params = {
            "symbol": symbol,
            "amount": format_decimal(amount),
            "price": format_decimal(price),
            "side": Side(side).value,
            "type": OrderType(order_type).value,
        }
        order = self.call.execute(
            account, "POST", ORDER_NEW, params, Order, required_role=Role.TRADER
        )
        logger.info(f"Placed order {order.order_id} {params['side']} {params['amount']} {symbol}")
        return order.order_id

    def cancel_order(self, account: Account, order_id: int) -> Order:
        """
        Cancel an order.

        Succeeds with no effect if the order is already cancelled.
        """
        return self.call.execute(account, "POST", ORDER_CANCEL, {"order_id": order_id}, Order)

    def cancel_orders(self, account: Account, by_session: bool = False) -> OrderResult:
        """
        Cancel outstanding orders.

        Args:
            account: Account to act as
            by_session: Only cancel orders placed by this API key's session;
                otherwise cancel all orders for the account, including UI orders
        """
        path = ORDER_CANCEL_SESSION if by_session else ORDER_CANCEL_ALL
        return self.call.execute(account, "POST", path, None, OrderResult)

    def get_order_status(self, account: Account, order_id: int) -> Order:
        """Return the status for an order."""
        return self.call.execute(account, "POST", ORDER_STATUS, {"order_id": order_id}, Order)

    def get_orders(self, account: Account) -> List[Order]:
        """Return active orders."""
        return self.call.execute(account, "POST", ORDERS, None, List[Order])

    def get_trade_history(
        self,
        account: Account,
        symbol: str,
        timestamp: Optional[int] = None
    ) -> List[TradeHistory]:
        """
        Return own trades for a symbol.

        Args:
            account: Account to act as
            symbol: Trading pair
            timestamp: Only trades on or after this timestamp
        """
        params: dict[str, Any] = {"symbol": symbol}
        if timestamp:
            params["timestamp"] = timestamp
        return self.call.execute(account, "POST", MY_TRADES, params, List[TradeHistory])

    def get_trade_volume(self, account: Account) -> List[List[TradeVolume]]:
        return self.call.execute(account, "POST", TRADE_VOLUME, None, List[List[TradeVolume]])

    def get_balances(self, account: Account) -> List[Balance]:
        """Return available balances in the supported currencies."""
        return self.call.execute(account, "POST", BALANCES, None, List[Balance])

    def get_deposit_address(
        self,
        account: Account,
        currency: str,
        label: Optional[str] = None
    ) -> DepositAddress:
        """
        Generate a new deposit address.

        Args:
            account: FundManager account
            currency: Currency code (e.g. "btc")
            label: Optional address label
        """
        params = {"label": label} if label else None
        return self.call.execute(
            account, "POST", f"{DEPOSIT}/{currency}/{NEW_ADDRESS}", params,
            DepositAddress, required_role=Role.FUND_MANAGER
        )

    def withdraw_crypto(
        self,
        account: Account,
        address: str,
        currency: str,
        amount: Number
    ) -> WithdrawalAddress:
        """
        Withdraw crypto currency to a whitelisted address.

        Args:
            account: FundManager account
            address: Whitelisted destination address
            currency: Currency code
            amount: Amount to withdraw
        """
        params = {"address": address, "amount": format_decimal(amount)}
        result = self.call.execute(
            account, "POST", f"{WITHDRAW}/{currency}", params,
            WithdrawalAddress, required_role=Role.FUND_MANAGER
        )
        logger.info(f"Withdrew {params['amount']} {currency}")
        return result

    def post_heartbeat(self, account: Account) -> str:
        """
        Send a heartbeat for a heartbeat-maintained session.

        Returns:
            Result string ("ok")
        """
        response = self.call.execute(account, "POST", HEARTBEAT, None, HeartbeatResponse)
        return response.result
