"""Config settings – 12-factor env-based configuration."""
from ratelimit_headers.config.settings.base import RateLimitSettings, Settings
from ratelimit_headers.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "RateLimitSettings", "Settings", "SettingsLoader"]
