"""Registry – known vendor header conventions."""
from ratelimit_headers.registry.registry import DEFAULT_VARIANTS, VariantRegistry, default_registry
from ratelimit_headers.registry.vendor import RateLimitVariant, Vendor

__all__ = ["DEFAULT_VARIANTS", "RateLimitVariant", "VariantRegistry", "Vendor", "default_registry"]
