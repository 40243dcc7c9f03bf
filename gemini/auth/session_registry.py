"""
Multi-session credential registry.

Thread-safe store mapping caller-chosen session IDs to API credentials and
roles, so one process can act for several API keys at once.
"""

import threading
from typing import Optional, Union
import logging

from .account import Account
from ..config import PRODUCTION_API_URL
from ..models import Session, Role
from ..exceptions import DuplicateSessionError, UnknownSessionError

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Thread-safe session registry.

    Sessions are added once and never mutated or removed. Registration and
    lookup share a single lock so the uniqueness check and the insert are
    one atomic step.
    """

    def __init__(self):
        """Initialize registry. The backing store is created on first registration."""
        self._sessions: Optional[dict[int, Session]] = None
        self._lock = threading.Lock()

    @property
    def is_established(self) -> bool:
        """True once any session has been registered."""
        with self._lock:
            return self._sessions is not None

    def add_session(
        self,
        session_id: int,
        api_key: str,
        api_secret: str,
        role: Union[Role, str],
        requires_heartbeat: bool = False
    ) -> Session:
        """
        Register a credential set under a session ID.

        Args:
            session_id: Unique session identifier
            api_key: API key
            api_secret: API secret
            role: Role assigned to the API key
            requires_heartbeat: Session must send periodic heartbeats

        Returns:
            The registered session

        Raises:
            DuplicateSessionError: If session ID is already in use
            ValueError: If role is not a known role
        """
        role = Role(role)

        with self._lock:
            if self._sessions is None:
                self._sessions = {}

            if session_id in self._sessions:
                raise DuplicateSessionError(
                    f"Session {session_id} already being used",
                    session_id=session_id
                )

            session = Session(
                session_id=session_id,
                api_key=api_key,
                api_secret=api_secret,
                role=role,
                requires_heartbeat=requires_heartbeat
            )
            self._sessions[session_id] = session

        logger.info(
            f"Added session {session_id} with role {role.value}"
            f"{' (heartbeat)' if requires_heartbeat else ''}"
        )
        return session

    def get_session(self, session_id: int) -> Session:
        """
        Get a registered session.

        Raises:
            UnknownSessionError: If session not found
        """
        with self._lock:
            if not self._sessions or session_id not in self._sessions:
                raise UnknownSessionError(
                    f"Session {session_id} not found",
                    session_id=session_id
                )
            return self._sessions[session_id]

    def has_session(self, session_id: int) -> bool:
        with self._lock:
            return bool(self._sessions) and session_id in self._sessions

    def bind(self, session_id: int, api_url: str = PRODUCTION_API_URL) -> Account:
        """
        Bind a new account to a registered session.

        Each call returns a fresh account with its own nonce counter.

        Args:
            session_id: Session identifier
            api_url: Base URL (production by default)

        Returns:
            Account carrying the session's credentials

        Raises:
            UnknownSessionError: If session not found
        """
        session = self.get_session(session_id)
        return Account(
            api_key=session.api_key,
            api_secret=session.api_secret,
            api_url=api_url,
            session_id=session.session_id
        )

    def list_sessions(self) -> list[int]:
        """
        List all session IDs.

        Returns:
            Session IDs in registration order
        """
        with self._lock:
            return list(self._sessions or {})

    def heartbeat_sessions(self) -> list[int]:
        """Session IDs that require heartbeats."""
        with self._lock:
            return [
                session_id
                for session_id, session in (self._sessions or {}).items()
                if session.requires_heartbeat
            ]


# Process-wide registry
_default_registry: Optional[SessionRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> SessionRegistry:
    """Get or create the process-wide registry."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = SessionRegistry()
        return _default_registry
