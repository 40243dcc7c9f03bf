"""
Acting identity bound to outgoing authenticated calls.
"""

from typing import Optional

from .nonce import NonceGenerator
from ..config import PRODUCTION_API_URL, SANDBOX_API_URL


class Account:
    """
    One API key/secret pair plus its base URL and nonce counter.

    Create one instance per concurrent identity. Instances bound to different
    sessions never share a nonce counter; calls sharing one instance draw
    nonces atomically.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_secret: Optional[str],
        api_url: str = PRODUCTION_API_URL,
        session_id: Optional[int] = None,
        authenticated_api_support: bool = True,
        nonce: Optional[NonceGenerator] = None
    ):
        """
        Initialize account.

        Args:
            api_key: API key (None disables authenticated calls)
            api_secret: API secret (None disables authenticated calls)
            api_url: REST base URL
            session_id: Registered session this account was bound from
            authenticated_api_support: Allow authenticated calls at all
            nonce: Nonce generator (fresh, unseeded if None)
        """
        self.api_key = api_key
        self._api_secret = api_secret
        self.api_url = api_url
        self.session_id = session_id
        self.authenticated_api_support = authenticated_api_support
        self.nonce = nonce or NonceGenerator()

    @property
    def api_secret(self) -> Optional[str]:
        return self._api_secret

    @property
    def has_credentials(self) -> bool:
        """True if authenticated calls are enabled and both key and secret are set."""
        return bool(self.authenticated_api_support and self.api_key and self._api_secret)

    @property
    def is_sandbox(self) -> bool:
        return self.api_url == SANDBOX_API_URL

    def use_sandbox(self, sandbox_url: str = SANDBOX_API_URL) -> "Account":
        """
        Divert this account to the sandbox API.

        Only the base URL changes; the session registry is untouched.

        Returns:
            This account, for chaining
        """
        self.api_url = sandbox_url
        return self

    def __repr__(self) -> str:
        """Safe repr without the secret."""
        return (
            f"Account(api_key={self.api_key}, api_url={self.api_url}, "
            f"session_id={self.session_id})"
        )
