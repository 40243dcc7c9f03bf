"""
Custom exceptions for Gemini client.

Provides typed exceptions so callers can tell session, permission,
transport and venue-level failures apart.
"""

from typing import Optional, Any


class GeminiError(Exception):
    """Base exception for all Gemini errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Session registry exceptions
class SessionError(GeminiError):
    """Session registration or lookup failed."""

    def __init__(self, message: str, session_id: Optional[int] = None):
        super().__init__(message, {"session_id": session_id})
        self.session_id = session_id


class DuplicateSessionError(SessionError):
    """Session ID already registered."""
    pass


class UnknownSessionError(SessionError):
    """Session ID not registered."""
    pass


class CredentialsMissingError(GeminiError):
    """Authenticated request attempted without configured credentials."""
    pass


# Role exceptions
class RolePermissionError(GeminiError):
    """Account role does not permit the requested operation."""

    def __init__(self, message: str, required_role: Optional[str] = None,
                 actual_role: Optional[str] = None):
        super().__init__(message, {"required_role": required_role, "actual_role": actual_role})
        self.required_role = required_role
        self.actual_role = actual_role


class NoSessionEstablishedError(RolePermissionError):
    """No session-derived role exists for the account."""
    pass


class RoleMismatchError(RolePermissionError):
    """Bound session role differs from the required role."""
    pass


class EncodingError(GeminiError):
    """Request envelope could not be serialized to JSON."""
    pass


class TransportError(GeminiError):
    """Network, connection or timeout failure, or unreadable HTTP error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code


class ApplicationError(GeminiError):
    """Venue returned an error body (result != "ok")."""

    def __init__(self, message: str, reason: Optional[str] = None,
                 result: Optional[str] = None):
        super().__init__(message, {"reason": reason, "result": result})
        self.reason = reason
        self.result = result


class DecodeError(GeminiError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, raw_body: Optional[bytes] = None):
        super().__init__(message, {"raw_body": raw_body})
        self.raw_body = raw_body
