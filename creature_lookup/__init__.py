"""Public package exports for the creature lookup client."""

from .api_adapter import catalog_entry_from_payload, normalize_creature, normalize_stats
from .catalog import CatalogCache, filter_catalog
from .clients import AttemptOutcome, CreatureAPIClient, CreatureAPIError, CreatureNotFoundError
from .lookup import CreatureLookupService
from .models import (
    STAT_KEYS,
    CatalogEntry,
    CreatureRecord,
    SpecialAbility,
    StatBlock,
)

__all__ = [
    "catalog_entry_from_payload",
    "normalize_creature",
    "normalize_stats",
    "CatalogCache",
    "filter_catalog",
    "AttemptOutcome",
    "CreatureAPIClient",
    "CreatureAPIError",
    "CreatureNotFoundError",
    "CreatureLookupService",
    "STAT_KEYS",
    "CatalogEntry",
    "CreatureRecord",
    "SpecialAbility",
    "StatBlock",
]
