"""
Identity provider interface.

The client never owns sign-in state. It asks an ``IdentityProvider`` two
things per request:
1. Who is signed in right now (may be nobody)
2. A fresh bearer credential for that identity

Token caching and refresh are the provider's business.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import CredentialUnavailableError
from .models import Identity

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    """Abstract base class for identity providers."""

    @abstractmethod
    def get_current_identity(self) -> Optional[Identity]:
        """Return the active identity, or None when nobody is signed in."""
        pass

    @abstractmethod
    async def fetch_credential(self, identity: Identity) -> str:
        """
        Obtain a bearer credential for the given identity.

        Raises whatever the underlying provider raises when the credential
        cannot be issued.
        """
        pass


class StaticIdentityProvider(IdentityProvider):
    """
    In-process identity provider holding one identity and its credential.

    Usage:
        provider = StaticIdentityProvider()
        provider.sign_in(Identity(uid="landlord_1"), "id-token")
        ...
        provider.sign_out()
    """

    def __init__(self, identity: Optional[Identity] = None, credential: Optional[str] = None):
        self._identity = identity
        self._credential = credential

    def sign_in(self, identity: Identity, credential: str) -> None:
        self._identity = identity
        self._credential = credential
        logger.debug("Signed in as %s", identity.uid)

    def sign_out(self) -> None:
        if self._identity is not None:
            logger.debug("Signed out %s", self._identity.uid)
        self._identity = None
        self._credential = None

    def get_current_identity(self) -> Optional[Identity]:
        return self._identity

    async def fetch_credential(self, identity: Identity) -> str:
        if self._identity is None or identity.uid != self._identity.uid or self._credential is None:
            raise CredentialUnavailableError(f"No credential available for {identity.uid}")
        return self._credential
