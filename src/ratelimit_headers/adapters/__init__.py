"""Adapters – integrations with third-party HTTP clients."""
