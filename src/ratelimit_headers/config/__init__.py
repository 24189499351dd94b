"""Config – 12-factor settings and loaders."""

from ratelimit_headers.config.settings import (
    EnvSettingsLoader,
    RateLimitSettings,
    Settings,
    SettingsLoader,
)
from ratelimit_headers.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RateLimitSettings",
    "Settings",
    "SettingsLoader",
]
