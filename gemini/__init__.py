"""
Gemini Client Library

Thread-safe client for the Gemini REST API.
Supports multiple API key sessions with segregated roles in one process.
"""

from .client import GeminiClient
from .config import (
    GeminiSettings,
    get_settings,
    get_rate_limit,
    RATE_LIMITS,
    PRODUCTION_API_URL,
    SANDBOX_API_URL,
)
from .models import (
    Role,
    Side,
    OrderType,
    Session,
    SignedHeaders,
    ErrorCapture,
    Ticker,
    Orderbook,
    Trade,
    Auction,
    AuctionHistory,
    Order,
    OrderResult,
    Balance,
    TradeHistory,
    TradeVolume,
    DepositAddress,
    WithdrawalAddress,
)
from .auth import (
    Account,
    NonceGenerator,
    RoleGuard,
    SessionRegistry,
    get_default_registry,
    RequestSigner,
)
from .api import Transport, ResponseClassifier, AuthenticatedCall, PublicAPI, PrivateAPI
from .exceptions import (
    GeminiError,
    SessionError,
    DuplicateSessionError,
    UnknownSessionError,
    CredentialsMissingError,
    RolePermissionError,
    NoSessionEstablishedError,
    RoleMismatchError,
    EncodingError,
    TransportError,
    ApplicationError,
    DecodeError,
)

__version__ = "1.0.0"

__all__ = [
    # Main client
    "GeminiClient",

    # Config
    "GeminiSettings",
    "get_settings",
    "get_rate_limit",
    "RATE_LIMITS",
    "PRODUCTION_API_URL",
    "SANDBOX_API_URL",

    # Types
    "Role",
    "Side",
    "OrderType",
    "Session",
    "SignedHeaders",
    "ErrorCapture",
    "Ticker",
    "Orderbook",
    "Trade",
    "Auction",
    "AuctionHistory",
    "Order",
    "OrderResult",
    "Balance",
    "TradeHistory",
    "TradeVolume",
    "DepositAddress",
    "WithdrawalAddress",

    # Auth pipeline
    "Account",
    "NonceGenerator",
    "RoleGuard",
    "SessionRegistry",
    "get_default_registry",
    "RequestSigner",
    "Transport",
    "ResponseClassifier",
    "AuthenticatedCall",
    "PublicAPI",
    "PrivateAPI",

    # Exceptions
    "GeminiError",
    "SessionError",
    "DuplicateSessionError",
    "UnknownSessionError",
    "CredentialsMissingError",
    "RolePermissionError",
    "NoSessionEstablishedError",
    "RoleMismatchError",
    "EncodingError",
    "TransportError",
    "ApplicationError",
    "DecodeError",
]
