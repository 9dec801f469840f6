"""Conference API access."""

from .cache import IRosterCache, RosterCache
from .client import BackendClient, IBackendClient

__all__ = ["BackendClient", "IBackendClient", "IRosterCache", "RosterCache"]
