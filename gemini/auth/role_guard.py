"""
Role checks for privileged operations.
"""

import logging
from typing import Union

from .account import Account
from .session_registry import SessionRegistry
from ..models import Role
from ..exceptions import NoSessionEstablishedError, RoleMismatchError, UnknownSessionError

logger = logging.getLogger(__name__)


class RoleGuard:
    """
    Validates the bound session's role before a privileged call is signed.

    Roles are looked up by the account's session ID.
    """

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    def require_role(self, account: Account, required_role: Union[Role, str]) -> None:
        """
        Check that the account's session holds the required role.

        Args:
            account: Bound account
            required_role: Role the operation needs

        Raises:
            NoSessionEstablishedError: If no session-derived role exists for the account
            RoleMismatchError: If the session role differs
        """
        required_role = Role(required_role)

        if not self.registry.is_established or account.session_id is None:
            raise NoSessionEstablishedError(
                "Session not set",
                required_role=required_role.value
            )

        try:
            session = self.registry.get_session(account.session_id)
        except UnknownSessionError:
            raise NoSessionEstablishedError(
                f"Session {account.session_id} not registered",
                required_role=required_role.value
            )

        if session.role != required_role:
            logger.warning(
                f"Session {session.session_id} role {session.role.value} "
                f"cannot call {required_role.value} operation"
            )
            raise RoleMismatchError(
                f"Incorrect role for session {session.session_id}: "
                f"requires {required_role.value}, has {session.role.value}",
                required_role=required_role.value,
                actual_role=session.role.value
            )
