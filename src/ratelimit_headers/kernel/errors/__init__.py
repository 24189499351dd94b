"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── RateLimitHeaderError
        ├── MalformedHeaderError
        ├── MissingHeaderError
        │   ├── MissingLimitError
        │   │   └── MissingUsedError
        │   └── MissingRemainingError
        │       └── MissingResetError
        ├── InvalidValueError
        │   ├── InvalidCountError
        │   ├── InvalidTimestampError
        │   └── InvalidDateError
        └── RegistryLockError
"""

from ratelimit_headers.kernel.errors.base import BaseError
from ratelimit_headers.kernel.errors.parsing import (
    InvalidCountError,
    InvalidDateError,
    InvalidTimestampError,
    InvalidValueError,
    MalformedHeaderError,
    MissingHeaderError,
    MissingLimitError,
    MissingRemainingError,
    MissingResetError,
    MissingUsedError,
    RateLimitHeaderError,
    RegistryLockError,
)

__all__ = [
    "BaseError",
    "InvalidCountError",
    "InvalidDateError",
    "InvalidTimestampError",
    "InvalidValueError",
    "MalformedHeaderError",
    "MissingHeaderError",
    "MissingLimitError",
    "MissingRemainingError",
    "MissingResetError",
    "MissingUsedError",
    "RateLimitHeaderError",
    "RegistryLockError",
]
