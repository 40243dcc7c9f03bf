"""
Main Gemini client.

Unified interface for session management, public market data and
authenticated account operations. Thread-safe, multi-session.
"""

from typing import Optional, Dict, Union
import threading
import logging

from .config import get_settings, GeminiSettings
from .models import Role
from .auth.account import Account
from .auth.session_registry import SessionRegistry, get_default_registry
from .auth.role_guard import RoleGuard
from .auth.signer import RequestSigner
from .api.base import Transport
from .api.classifier import ResponseClassifier
from .api.authenticated import AuthenticatedCall
from .api.public import PublicAPI
from .api.private import PrivateAPI
from .exceptions import GeminiError
from .metrics import Metrics
from .utils.structured_logging import get_logger

logger = logging.getLogger(__name__)
events = get_logger(__name__)


class GeminiClient:
    """
    Main client for Gemini operations.

    Features:
    - Multiple sessions (API key + role) per process
    - Per-account atomic nonces
    - HMAC-SHA384 signed private calls
    - Typed exceptions

    Usage:
        client = GeminiClient()
        client.add_session(7, api_key, api_secret, Role.TRADER)
        account = client.session(7)
        order_id = client.private.new_order(account, "btcusd", "1", "100", "buy")
    """

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        registry: Optional[SessionRegistry] = None,
        transport: Optional[Transport] = None,
        metrics: Optional[Metrics] = None
    ):
        """
        Initialize Gemini client.

        Args:
            settings: Optional settings (loads from env if not provided)
            registry: Session registry (process-wide registry if not provided)
            transport: HTTP transport (pooled requests session if not provided)
            metrics: Metrics collector (built from settings if not provided)
        """
        self.settings = settings or get_settings()
        self.registry = registry or get_default_registry()
        self.transport = transport or Transport(self.settings)
        self.metrics = metrics or Metrics(
            enabled=self.settings.enable_metrics,
            port=self.settings.metrics_port
        )

        self.signer = RequestSigner(api_version=self.settings.api_version)
        self.classifier = ResponseClassifier()
        self.role_guard = RoleGuard(self.registry)

        self.call = AuthenticatedCall(
            settings=self.settings,
            transport=self.transport,
            signer=self.signer,
            role_guard=self.role_guard,
            classifier=self.classifier,
            metrics=self.metrics
        )
        self.public = PublicAPI(self.settings, self.transport, self.classifier)
        self.private = PrivateAPI(self.call)

        # Accounts bound per session ID
        self._accounts: Dict[int, Account] = {}
        self._accounts_lock = threading.Lock()

        logger.info(f"Gemini client initialized ({self.settings!r})")

    # ========== Session Management ==========

    def add_session(
        self,
        session_id: int,
        api_key: str,
        api_secret: str,
        role: Union[Role, str],
        requires_heartbeat: bool = False
    ) -> None:
        """
        Register a session.

        Raises:
            DuplicateSessionError: If session ID is already in use
        """
        session = self.registry.add_session(
            session_id, api_key, api_secret, role, requires_heartbeat
        )
        self.metrics.track_session(session.role.value)
        events.info("session_added", session_id=session_id, role=session.role.value)

    def session(self, session_id: int) -> Account:
        """
        Get the account bound to a session.

        The account is bound on first use and returned on every later call,
        including heartbeats, so nonces for the session's key never go
        backwards. Uses the sandbox URL if settings.use_sandbox is set.

        Raises:
            UnknownSessionError: If session not found
        """
        with self._accounts_lock:
            account = self._accounts.get(session_id)
            if account is None:
                account = self.registry.bind(session_id, api_url=self.settings.api_url)
                if self.settings.use_sandbox:
                    account.use_sandbox(self.settings.sandbox_api_url)
                self._accounts[session_id] = account
            return account

    def account_from_settings(self) -> Account:
        """
        Build an account from the default credentials in settings.

        The account is not bound to a session, so role-gated calls fail
        with NoSessionEstablishedError.
        """
        return Account(
            api_key=self.settings.api_key,
            api_secret=self.settings.api_secret,
            api_url=self.settings.base_url,
            authenticated_api_support=self.settings.authenticated_api_support
        )

    def send_heartbeats(self) -> Dict[int, Union[str, GeminiError]]:
        """
        Send one heartbeat for every session that requires it.

        Failures are collected per session rather than raised so one bad
        session does not starve the others.

        Returns:
            Mapping of session ID to result string or the raised error
        """
        results: Dict[int, Union[str, GeminiError]] = {}
        for session_id in self.registry.heartbeat_sessions():
            try:
                results[session_id] = self.private.post_heartbeat(self.session(session_id))
            except GeminiError as e:
                events.warning("heartbeat_failed", str(e), session_id=session_id)
                results[session_id] = e
        return results

    def close(self) -> None:
        """Close transport."""
        self.transport.close()
