"""API modules for Gemini client."""

from .base import Transport
from .classifier import ResponseClassifier
from .authenticated import AuthenticatedCall
from .public import PublicAPI
from .private import PrivateAPI

__all__ = ["Transport", "ResponseClassifier", "AuthenticatedCall", "PublicAPI", "PrivateAPI"]
