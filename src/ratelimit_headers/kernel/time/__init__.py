"""Kernel time – clock abstraction used to resolve reset times."""
from ratelimit_headers.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
