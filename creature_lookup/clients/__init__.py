"""Client utilities for the remote creature catalog API."""

from .creature_api import AttemptOutcome, CreatureAPIClient, CreatureAPIError, CreatureNotFoundError

__all__ = ["AttemptOutcome", "CreatureAPIClient", "CreatureAPIError", "CreatureNotFoundError"]
