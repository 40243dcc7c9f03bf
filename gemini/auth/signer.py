"""
Request signing for Gemini private endpoints.

The request envelope travels base64-encoded in the X-GEMINI-PAYLOAD header
and is signed with HMAC-SHA384 keyed by the API secret.
"""

import base64
import hashlib
import hmac
from typing import Any, Optional

import orjson

from .account import Account
from ..config import API_VERSION
from ..models import SignedHeaders
from ..exceptions import EncodingError


class RequestSigner:
    """
    Builds and signs request envelopes.

    The signature depends only on the secret and the serialized envelope;
    the nonce is the only time-derived input and it is embedded in the
    envelope. This class never logs.
    """

    def __init__(self, api_version: str = API_VERSION):
        """
        Initialize signer.

        Args:
            api_version: Version segment for the "request" field
        """
        self.api_version = api_version

    def build_envelope(
        self,
        account: Account,
        path: str,
        params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Build the request envelope, consuming one nonce.

        Params are merged last, so a param named "request" or "nonce"
        overwrites the generated value. Callers must not pass those keys.

        Args:
            account: Account supplying the nonce
            path: API path without version (e.g. "order/new")
            params: Extra fields to sign

        Returns:
            Envelope dict
        """
        envelope: dict[str, Any] = {
            "request": f"/v{self.api_version}/{path}",
            "nonce": account.nonce.next(),
        }
        if params:
            envelope.update(params)
        return envelope

    def encode_payload(self, envelope: dict[str, Any]) -> str:
        """
        Serialize envelope to JSON and base64-encode it.

        Raises:
            EncodingError: If the envelope is not JSON-serializable
        """
        try:
            payload_json = orjson.dumps(envelope, option=orjson.OPT_SORT_KEYS)
        except TypeError as e:
            raise EncodingError(f"Unable to JSON encode request: {e}")
        return base64.b64encode(payload_json).decode("ascii")

    @staticmethod
    def compute_signature(api_secret: str, payload_base64: str) -> str:
        """HMAC-SHA384 of the base64 payload, hex encoded."""
        return hmac.new(
            api_secret.encode("utf-8"),
            payload_base64.encode("utf-8"),
            hashlib.sha384
        ).hexdigest()

    def sign_envelope(self, account: Account, envelope: dict[str, Any]) -> SignedHeaders:
        """Sign an already built envelope."""
        payload_base64 = self.encode_payload(envelope)
        return SignedHeaders(
            api_key=account.api_key,
            payload_base64=payload_base64,
            signature_hex=self.compute_signature(account.api_secret, payload_base64),
            envelope=envelope
        )

    def sign(
        self,
        account: Account,
        path: str,
        params: Optional[dict[str, Any]] = None
    ) -> SignedHeaders:
        """
        Build, serialize and sign a request envelope.

        Args:
            account: Account with key, secret and nonce counter
            path: API path without version (e.g. "order/new")
            params: Extra fields to sign

        Returns:
            Signed headers

        Raises:
            EncodingError: If params are not JSON-serializable
        """
        envelope = self.build_envelope(account, path, params)
        return self.sign_envelope(account, envelope)

    def verify(self, api_secret: str, payload_base64: str, signature_hex: str) -> bool:
        """
        Verify a signature against a payload.

        Returns:
            True if signature is valid
        """
        expected = self.compute_signature(api_secret, payload_base64)
        return hmac.compare_digest(expected, signature_hex.lower())
