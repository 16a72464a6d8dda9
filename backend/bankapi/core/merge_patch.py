"""Merge Patch — field-by-field conditional merge for partial updates.

Invariants:
    - The existing snapshot is never mutated (a new dict is returned)
    - Only fields listed in `fields` are considered
    - A None value in the patch means "leave unchanged", never "clear"
"""

from collections.abc import Iterable, Mapping
from typing import Any

BANK_ACCOUNT_MERGE_FIELDS = ("name", "balance")


def merge_non_null_fields(
    existing: Mapping[str, Any],
    patch: Mapping[str, Any],
    fields: Iterable[str] = BANK_ACCOUNT_MERGE_FIELDS,
) -> dict[str, Any]:
    """Return existing with every non-null patch field in `fields` applied."""
    merged = dict(existing)
    for name in fields:
        value = patch.get(name)
        if value is not None:
            merged[name] = value
    return merged
