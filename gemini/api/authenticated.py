"""
Authenticated request pipeline.

credentials check -> role check -> nonce + sign -> send -> classify -> decode

Every step raises to the caller; nothing is retried, cached or deduplicated.
"""

import time
from typing import Any, Optional, Union
import logging

from .base import Transport, build_url
from .classifier import ResponseClassifier
from ..auth.account import Account
from ..auth.role_guard import RoleGuard
from ..auth.signer import RequestSigner
from ..config import GeminiSettings
from ..exceptions import CredentialsMissingError, GeminiError
from ..metrics import Metrics
from ..models import Role

logger = logging.getLogger(__name__)


class AuthenticatedCall:
    """
    Sends signed requests to private endpoints.

    The request body is always empty: all request data travels in the
    signed X-GEMINI-PAYLOAD header.
    """

    def __init__(
        self,
        settings: GeminiSettings,
        transport: Transport,
        signer: RequestSigner,
        role_guard: RoleGuard,
        classifier: Optional[ResponseClassifier] = None,
        metrics: Optional[Metrics] = None
    ):
        """
        Initialize pipeline.

        Args:
            settings: Client settings
            transport: HTTP transport
            signer: Request signer
            role_guard: Role checker
            classifier: Response classifier
            metrics: Optional metrics collector
        """
        self.settings = settings
        self.transport = transport
        self.signer = signer
        self.role_guard = role_guard
        self.classifier = classifier or ResponseClassifier()
        self.metrics = metrics

    def execute(
        self,
        account: Account,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        result_type: Any = dict,
        required_role: Optional[Union[Role, str]] = None
    ) -> Any:
        """
        Run one authenticated call.

        Args:
            account: Account to act as
            method: HTTP method
            path: API path without version (e.g. "order/new")
            params: Fields to sign into the payload
            result_type: Expected response type
            required_role: Role the operation needs (None for unprivileged calls)

        Returns:
            Decoded response

        Raises:
            CredentialsMissingError: If account has no usable credentials
            NoSessionEstablishedError: If role check finds no session
            RoleMismatchError: If session role differs from required_role
            EncodingError: If params are not JSON-serializable
            TransportError: On network failure
            ApplicationError: If venue returns an error body
            DecodeError: If response does not match result_type
        """
        if not account.has_credentials:
            raise CredentialsMissingError(
                "Authenticated request attempted without API credentials set"
            )

        # Rejected role checks must not consume a nonce
        if required_role is not None:
            self.role_guard.require_role(account, required_role)

        signed = self.signer.sign(account, path, params)

        if self.settings.log_requests:
            logger.debug(f"Request payload for {path}: {signed.payload_base64}")

        url = build_url(account.api_url, self.signer.api_version, path)
        start = time.time()
        status = "error"
        try:
            raw = self.transport.send(method, url, headers=signed.as_headers(), data="")

            if self.settings.log_requests:
                logger.debug(f"Received raw for {path}: {raw[:500]!r}")

            result = self.classifier.classify(raw, result_type)
            status = "ok"
            return result
        except GeminiError as e:
            status = type(e).__name__
            raise
        finally:
            if self.metrics:
                self.metrics.track_api_request(path, status)
                self.metrics.track_api_latency(path, time.time() - start)
