"""Transforms loosely-shaped creature API payloads into strict models."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

from .models import STAT_KEYS, CatalogEntry, CreatureRecord, Number, SpecialAbility, StatBlock

STAT_VALUE_FIELDS = ("base_stat", "value", "val")


def coerce_number(value: Any) -> Optional[Number]:
    """Return ``value`` as a finite int/float, or ``None`` when it does not parse."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            return None
        if not math.isfinite(parsed):
            return None
        return int(parsed) if parsed.is_integer() else parsed
    return None


def coerce_int(value: Any) -> Optional[int]:
    number = coerce_number(value)
    if number is None:
        return None
    if isinstance(number, float):
        return int(number) if number.is_integer() else None
    return number


def coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        number = coerce_number(value)
        if isinstance(number, float) and number.is_integer():
            return str(int(number))
        return str(value)
    return ""


def _field(payload: Any, key: str) -> Any:
    return payload.get(key) if isinstance(payload, Mapping) else None


def _first_present(entry: Mapping[str, Any], keys: tuple) -> Any:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return value
    return None


def normalize_stats(raw_stats: Any) -> StatBlock:
    if not isinstance(raw_stats, (list, tuple)):
        return StatBlock()

    values: Dict[str, Number] = {}
    for entry in raw_stats:
        if not isinstance(entry, Mapping):
            continue

        raw_name = entry.get("name")
        if raw_name is None:
            raw_name = _field(entry.get("stat"), "name")
        name = coerce_text(raw_name).strip().lower()
        if name not in STAT_KEYS:
            continue

        value = coerce_number(_first_present(entry, STAT_VALUE_FIELDS))
        if value is None:
            continue
        # Repeated keys: the last usable entry wins.
        values[name] = value

    return StatBlock(**values)


def _normalize_types(raw_types: Any) -> List[str]:
    if not isinstance(raw_types, (list, tuple)):
        return []

    types: List[str] = []
    for descriptor in raw_types:
        type_name = coerce_text(_field(descriptor, "name")).upper()
        if not type_name:
            continue
        types.append(type_name)
    return types


def _normalize_special(raw_special: Any) -> Optional[SpecialAbility]:
    name = coerce_text(_field(raw_special, "name"))
    description = coerce_text(_field(raw_special, "description"))
    if not name and not description:
        return None
    return SpecialAbility(name=name, description=description)


def normalize_creature(raw_payload: Any) -> CreatureRecord:
    """Build a display-ready record from a creature payload.

    Never raises: missing or malformed fields fall back to empty/absent values.
    """
    payload: Mapping[str, Any] = raw_payload if isinstance(raw_payload, Mapping) else {}

    return CreatureRecord(
        name=coerce_text(payload.get("name")),
        id=coerce_int(payload.get("id")),
        weight=coerce_number(payload.get("weight")),
        height=coerce_number(payload.get("height")),
        types=_normalize_types(payload.get("types")),
        stats=normalize_stats(payload.get("stats")),
        special=_normalize_special(payload.get("special")),
    )


def catalog_entry_from_payload(raw_entry: Any) -> CatalogEntry:
    return CatalogEntry(
        id=coerce_int(_field(raw_entry, "id")),
        name=coerce_text(_field(raw_entry, "name")),
    )
