"""Admin System Settings: schema and optimistic settings store."""

from mindbridge.admin.schema import (
    CATEGORIES,
    CATEGORY_DEFAULTS,
    FIELD_BOUNDS,
    FIELD_CHOICES,
    SettingsSnapshot,
    coerce_value,
)
from mindbridge.admin.store import SettingsStore

__all__ = [
    "CATEGORIES",
    "CATEGORY_DEFAULTS",
    "FIELD_BOUNDS",
    "FIELD_CHOICES",
    "SettingsSnapshot",
    "SettingsStore",
    "coerce_value",
]
