"""System settings schema.

Defines the fixed categories and fields of the admin System Settings
panel, their defaults and value domains, and the typed snapshot the
settings store owns.

Field names are the backend's camelCase wire names (``sessionTimeout``);
the snapshot models expose snake_case attributes with camelCase aliases.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel

from mindbridge.exceptions import SettingsValidationError

# ─── Defaults per category ────────────────────────────────────────────────────

NOTIFICATIONS_DEFAULTS: dict[str, Any] = {
    "emailNotifications": True,
    "systemAlerts": True,
    "maintenanceAlerts": True,
    "securityAlerts": True,
}

SECURITY_DEFAULTS: dict[str, Any] = {
    "passwordExpiry": 90,
    "sessionTimeout": 30,
    "maxLoginAttempts": 5,
}

SYSTEM_DEFAULTS: dict[str, Any] = {
    "maintenanceMode": False,
    "debugMode": False,
    "logLevel": "info",
    "backupFrequency": "daily",
}

CATEGORY_DEFAULTS: dict[str, dict[str, Any]] = {
    "notifications": NOTIFICATIONS_DEFAULTS,
    "security": SECURITY_DEFAULTS,
    "system": SYSTEM_DEFAULTS,
}

CATEGORIES: tuple[str, ...] = tuple(CATEGORY_DEFAULTS)

# ─── Value domains ────────────────────────────────────────────────────────────
# (min, max) for integer fields.

FIELD_BOUNDS: dict[str, tuple[int, int]] = {
    "passwordExpiry": (1, 365),
    "sessionTimeout": (5, 240),
    "maxLoginAttempts": (3, 10),
}

FIELD_CHOICES: dict[str, tuple[str, ...]] = {
    "logLevel": ("info", "warn", "error", "debug"),
    "backupFrequency": ("daily", "weekly", "monthly"),
}

FIELD_UNITS: dict[str, str] = {
    "passwordExpiry": "days",
    "sessionTimeout": "minutes",
}

LogLevel = Literal["info", "warn", "error", "debug"]
BackupFrequency = Literal["daily", "weekly", "monthly"]


# =============================================================================
# SNAPSHOT MODELS
# =============================================================================


class _Category(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class NotificationSettings(_Category):
    """Notification toggles."""

    email_notifications: StrictBool = True
    system_alerts: StrictBool = True
    maintenance_alerts: StrictBool = True
    security_alerts: StrictBool = True


class SecuritySettings(_Category):
    """Account security limits."""

    password_expiry: StrictInt = Field(default=90, description="Days before a password must be changed")
    session_timeout: StrictInt = Field(default=30, description="Idle minutes before sign-out")
    max_login_attempts: StrictInt = Field(default=5, description="Failed logins before lockout")


class SystemOptions(_Category):
    """Platform-wide operating options."""

    maintenance_mode: StrictBool = False
    debug_mode: StrictBool = False
    log_level: LogLevel = "info"
    backup_frequency: BackupFrequency = "daily"


class SettingsSnapshot(BaseModel):
    """Complete settings snapshot: category -> field -> value.

    Categories or fields absent from a payload take their defaults.
    """

    model_config = ConfigDict(extra="ignore")

    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    system: SystemOptions = Field(default_factory=SystemOptions)

    def get(self, category: str, field: str) -> Any:
        """Return the value of one field, addressed by wire names."""
        attr = field_attr(category, field)
        return getattr(getattr(self, category), attr)

    def with_value(self, category: str, field: str, value: Any) -> SettingsSnapshot:
        """Return a copy with a single field replaced.

        The value is not validated; other categories are shared unchanged.
        """
        attr = field_attr(category, field)
        section = getattr(self, category).model_copy(update={attr: value})
        return self.model_copy(update={category: section})

    def to_wire(self) -> dict[str, dict[str, Any]]:
        """Dump to the backend's camelCase nested mapping."""
        return self.model_dump(by_alias=True)


class SettingsEnvelope(BaseModel):
    """Response of ``GET /api/admin/settings``."""

    success: bool
    settings: SettingsSnapshot | None = None


class SettingUpdate(BaseModel):
    """Body of ``PUT /api/admin/settings``."""

    category: str
    setting: str
    value: bool | int | str


class UpdateEnvelope(BaseModel):
    """Response of ``PUT /api/admin/settings``."""

    success: bool
    message: str | None = None


# =============================================================================
# FIELD LOOKUP AND COERCION
# =============================================================================


def field_attr(category: str, field: str) -> str:
    """Resolve a wire field name to the snapshot model attribute.

    Raises:
        SettingsValidationError: If the category or field is unknown
    """
    if category not in CATEGORY_DEFAULTS:
        raise SettingsValidationError(
            f"Unknown settings category '{category}' (expected one of {', '.join(CATEGORIES)})",
            category=category,
            field=field,
        )
    if field not in CATEGORY_DEFAULTS[category]:
        raise SettingsValidationError(
            f"Unknown field '{field}' in category '{category}'",
            category=category,
            field=field,
        )
    model = SettingsSnapshot.model_fields[category].annotation
    for name, info in model.model_fields.items():  # type: ignore[union-attr]
        if info.alias == field:
            return name
    raise SettingsValidationError(f"No attribute for field '{field}'", category=category, field=field)


def field_kind(category: str, field: str) -> str:
    """Return ``bool``, ``int`` or ``choice`` for a known field."""
    field_attr(category, field)
    if field in FIELD_CHOICES:
        return "choice"
    default = CATEGORY_DEFAULTS[category][field]
    return "bool" if isinstance(default, bool) else "int"


def clamp_value(field: str, value: int) -> int:
    """Clamp an integer to the field's bounds, if it has any."""
    lo, hi = FIELD_BOUNDS.get(field, (None, None))
    if lo is not None:
        value = max(value, lo)
    if hi is not None:
        value = min(value, hi)
    return value


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def coerce_value(category: str, field: str, raw: Any) -> bool | int | str:
    """Convert raw input to a value inside the field's domain.

    Booleans accept the usual on/off spellings, integers are clamped to
    ``FIELD_BOUNDS`` and enumerated strings must be one of ``FIELD_CHOICES``.

    Raises:
        SettingsValidationError: If the value cannot be converted
    """
    kind = field_kind(category, field)

    if kind == "bool":
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise SettingsValidationError(f"{field} must be a boolean", category=category, field=field)

    if kind == "int":
        if isinstance(raw, bool):
            raise SettingsValidationError(f"{field} must be a number", category=category, field=field)
        try:
            number = int(raw)
        except (TypeError, ValueError):
            raise SettingsValidationError(
                f"{field} must be a number", category=category, field=field
            ) from None
        return clamp_value(field, number)

    text = str(raw).strip().lower()
    choices = FIELD_CHOICES[field]
    if text not in choices:
        raise SettingsValidationError(
            f"{field} must be one of {list(choices)}",
            category=category,
            field=field,
        )
    return text


def field_label(field: str) -> str:
    """Human label for a camelCase field (``sessionTimeout`` -> ``Session Timeout``)."""
    words: list[str] = []
    current = ""
    for ch in field:
        if ch.isupper() and current:
            words.append(current)
            current = ch
        else:
            current += ch
    if current:
        words.append(current)
    return " ".join(w[:1].upper() + w[1:] for w in words)
