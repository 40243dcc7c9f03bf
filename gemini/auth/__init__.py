"""Authentication modules for Gemini client."""

from .account import Account
from .nonce import NonceGenerator
from .role_guard import RoleGuard
from .session_registry import SessionRegistry, get_default_registry
from .signer import RequestSigner

__all__ = [
    "Account",
    "NonceGenerator",
    "RoleGuard",
    "SessionRegistry",
    "get_default_registry",
    "RequestSigner",
]
